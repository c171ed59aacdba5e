from . import exceptions
from .exceptions import BaseError, EmptyHeapError, InvalidHandleError, InvalidKeyOrderError
from .heap import FibHeap
from .node import Handle
from .validator import ValidationResult

__all__ = [
    'BaseError',
    'EmptyHeapError',
    'FibHeap',
    'Handle',
    'InvalidHandleError',
    'InvalidKeyOrderError',
    'ValidationResult',
]
