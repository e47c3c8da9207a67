class CleanupError(Exception):
    """Base class for failures that abort a cleanup run"""
    pass


class PreconditionError(CleanupError):
    """Raised before any store access when the run must not proceed"""
    pass


class StoreError(CleanupError):
    """Raised when a required store location can not be opened"""
    pass
