from . import exceptions, render
from .exceptions import BaseError, InvalidArgumentError
from .heap import IndexedMinHeap
from .index import IndexTable

__all__ = [
    'BaseError',
    'IndexedMinHeap',
    'IndexTable',
    'InvalidArgumentError',
]
