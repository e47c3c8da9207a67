import ctypes


def is_admin():
    """True when the process runs with an elevated administrator token"""

    try:
        return ctypes.windll.shell32.IsUserAnAdmin() != 0
    except (AttributeError, OSError):
        # Not on Windows, or shell32 is unavailable
        return False
