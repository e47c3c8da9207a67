"""
Store implementation over the Windows registry, rooted at
HKEY_LOCAL_MACHINE

Keys are always opened in the native (64-bit) view so a 32-bit Python
sees the same Installer tables as msiexec does.
"""

import logging
import winreg

from etw_msi_cleanup.store import Store


logger = logging.getLogger('etw_msi_cleanup')

VIEW = winreg.KEY_WOW64_64KEY


def _access(writable):
    return (winreg.KEY_ALL_ACCESS if writable else winreg.KEY_READ) | VIEW


class RegistryStore(Store):
    """Registry-backed store; node handles are winreg.HKEYType objects"""

    def __init__(self, hive=winreg.HKEY_LOCAL_MACHINE):
        self.hive = hive

    def _open(self, key, sub_key, writable):
        try:
            return winreg.OpenKeyEx(key, sub_key, 0, _access(writable))
        except FileNotFoundError:
            return None

    def open_root(self, path, writable=False):
        logger.debug(f'Opening {path} (writable={writable})')
        return self._open(self.hive, path, writable)

    def open_child(self, node, name, writable=False):
        return self._open(node, name, writable)

    def list_children(self, node):
        num_keys, _, _ = winreg.QueryInfoKey(node)
        return [winreg.EnumKey(node, i) for i in range(num_keys)]

    def get_value_names(self, node):
        _, num_values, _ = winreg.QueryInfoKey(node)
        return [winreg.EnumValue(node, i)[0] for i in range(num_values)]

    def get_value(self, node, name):
        try:
            value, _ = winreg.QueryValueEx(node, name)
        except FileNotFoundError:
            return None

        return value

    def delete_subtree(self, node, name):
        # DeleteKeyEx only removes keys without subkeys, so empty the
        # key depth-first before removing it
        with winreg.OpenKeyEx(node, name, 0, _access(True)) as sub_key:
            for child in self.list_children(sub_key):
                self.delete_subtree(sub_key, child)

        winreg.DeleteKeyEx(node, name, VIEW, 0)

    def close(self, node):
        winreg.CloseKey(node)
