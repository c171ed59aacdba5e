class BaseError(Exception):
    """
    Base package exception.
    """


class EmptyHeapError(BaseError):
    """
    Heap has no elements.
    """


class InvalidHandleError(BaseError):
    """
    Handle is null, stale or belongs to another heap.
    """


class InvalidKeyOrderError(BaseError):
    """
    New value is not strictly less than the current one.
    """
