"""
Cancellation tokens for storage requests.

An ``Aborter`` is handed to every operation through its options. The
pipeline races the HTTP request against the aborter and cancels the request
when the aborter fires first. ``Aborter.NONE`` is the shared "never cancel"
value applied when the caller supplies nothing.

Example:
    ```python
    aborter = Aborter.timeout(5)
    await directory_client.create(DirectoryCreateOptions(abort_signal=aborter))

    # Cancel several requests at once
    parent = Aborter()
    tasks = [client.delete(DirectoryDeleteOptions(abort_signal=parent)) for client in clients]
    parent.abort()
    ```
"""

from typing import Callable, List, Optional
import time


class Aborter:
    """
    A cancellation token with an optional deadline and an optional parent.

    A child aborter is aborted once it or any of its ancestors is aborted or
    past its deadline. Listeners run on the thread that calls ``abort()``, so
    aborters are meant to be used from the event loop thread.
    """

    NONE: "Aborter"

    def __init__(
        self,
        timeout: Optional[float] = None,
        parent: Optional["Aborter"] = None,
    ):
        """
        Args:
            timeout: Seconds until the aborter fires on its own
            parent: Aborter whose cancellation also cancels this one
        """
        self._parent = parent
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._aborted = False
        self._listeners: List[Callable[[], None]] = []

    @classmethod
    def timeout(cls, seconds: float) -> "Aborter":
        """Create a root aborter that fires after ``seconds``."""
        return cls(timeout=seconds)

    def with_timeout(self, seconds: float) -> "Aborter":
        """Create a child aborter with its own deadline."""
        return Aborter(timeout=seconds, parent=self)

    @property
    def aborted(self) -> bool:
        if self._aborted:
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return True
        return self._parent is not None and self._parent.aborted

    def remaining(self) -> Optional[float]:
        """Seconds until the nearest deadline along the parent chain, or None."""
        remaining = None
        if self._deadline is not None:
            remaining = max(self._deadline - time.monotonic(), 0.0)
        if self._parent is not None:
            parent_remaining = self._parent.remaining()
            if parent_remaining is not None and (remaining is None or parent_remaining < remaining):
                remaining = parent_remaining
        return remaining

    def abort(self) -> None:
        """Trigger cancellation. Calling it again has no effect."""
        if self._aborted:
            return
        self._aborted = True
        listeners, self._listeners = self._listeners, []
        for listener in listeners:
            listener()

    def add_listener(self, listener: Callable[[], None]) -> None:
        """Register ``listener`` to run when this aborter or an ancestor is aborted."""
        self._listeners.append(listener)
        if self._parent is not None:
            self._parent.add_listener(listener)

    def remove_listener(self, listener: Callable[[], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
        if self._parent is not None:
            self._parent.remove_listener(listener)

    def __repr__(self) -> str:
        if self is Aborter.NONE:
            return "Aborter.NONE"
        return f"Aborter(aborted={self.aborted}, remaining={self.remaining()})"


class _NeverAborter(Aborter):
    def abort(self) -> None:
        raise RuntimeError("Aborter.NONE cannot be aborted")

    def add_listener(self, listener: Callable[[], None]) -> None:
        pass

    def remove_listener(self, listener: Callable[[], None]) -> None:
        pass


Aborter.NONE = _NeverAborter()


def resolve_abort_signal(abort_signal: Optional[Aborter]) -> Aborter:
    """Return the effective abort signal for a request."""
    return abort_signal if abort_signal is not None else Aborter.NONE
