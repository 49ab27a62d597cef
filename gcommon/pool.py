"""A simple growing pool of reusable objects."""

from collections import deque
from typing import Callable, Deque, Generic, TypeVar

T = TypeVar("T")

DEFAULT_SIZE = 30


class ObjectPool(Generic[T]):
    """Hands out objects made by ``factory``, creating ``size`` more whenever it runs dry."""

    def __init__(self, factory: Callable[[], T], size: int = DEFAULT_SIZE) -> None:
        if size <= 0:
            raise ValueError("size must be greater than zero")
        self._factory = factory
        self._size = size
        self._free: Deque[T] = deque()
        self._allocate_chunk()

    def _allocate_chunk(self) -> None:
        self._free.extend(self._factory() for _ in range(self._size))

    def acquire(self) -> T:
        """Take the oldest free object, allocating a new chunk if none is free."""
        if not self._free:
            self._allocate_chunk()
        return self._free.popleft()

    def release(self, obj: T) -> None:
        """Return an object to the back of the free list."""
        self._free.append(obj)

    def __len__(self) -> int:
        return len(self._free)