"""A cancellable callback run when a block is left."""

from typing import Callable, Optional


class Exit:
    """Runs ``func`` once on :meth:`close` or when its ``with`` block ends."""

    def __init__(self, func: Callable[[], object]) -> None:
        self._func: Optional[Callable[[], object]] = func

    def cancel(self) -> None:
        """Drop the callback so that it never runs."""
        self._func = None

    def close(self) -> None:
        """Run the callback if it is still pending."""
        func, self._func = self._func, None
        if func is not None:
            func()

    def __enter__(self) -> "Exit":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()