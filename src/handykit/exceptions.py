class HandyKitError(RuntimeError):
    """Base exception for handykit errors."""
