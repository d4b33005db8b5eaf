"""Domain-specific errors for kmon."""


class KmonError(Exception):
    """Base error for kmon."""


class CategoryLookupError(KmonError):
    """Raised when a category key or label does not name a known category."""


class DeviceLookupError(KmonError):
    """Raised when a device is not listed under its category root."""
