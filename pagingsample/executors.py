"""Background executor for database writes."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, TypeVar

T = TypeVar("T")


class IOExecutor:
    """Single worker thread shared by every mutation.

    One worker means writes are applied in submission order and never
    overlap each other.
    """

    def __init__(self, thread_name_prefix: str = "io") -> None:
        self._pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix=thread_name_prefix)

    def submit(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> Future[T]:
        return self._pool.submit(fn, *args, **kwargs)

    def shutdown(self, wait: bool = True) -> None:
        self._pool.shutdown(wait=wait)
