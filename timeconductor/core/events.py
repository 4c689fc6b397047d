from __future__ import annotations

from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional

# timeconductor/core/events.py

Handler = Callable[..., Any]


class Subscription:
    """
    Handle for one handler registration.

    Contract:
    - cancel() releases the registration exactly once; later calls are no-ops
    - calling the handle is cancel(), so it doubles as an unsubscribe function
    """

    def __init__(self, release: Callable[[], None]):
        self._release: Optional[Callable[[], None]] = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def cancel(self) -> bool:
        """Release the registration. Returns False if it was already released."""
        if self._release is None:
            return False
        release, self._release = self._release, None
        release()
        return True

    def __call__(self) -> bool:
        return self.cancel()


class EventEmitter:
    """
    String-keyed handler registry.

    - emit() dispatches synchronously, in registration order
    - dispatch iterates over a snapshot, so a handler may unregister itself
    - handler exceptions propagate to the emitter's caller
    """

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = defaultdict(list)

    def on(self, event: str, handler: Handler) -> Subscription:
        self._handlers[event].append(handler)
        return Subscription(lambda: self.off(event, handler))

    def off(self, event: str, handler: Handler) -> None:
        handlers = self._handlers.get(event)
        if not handlers:
            return
        # one registration per off()
        for i, h in enumerate(handlers):
            if h == handler:
                del handlers[i]
                break

    def emit(self, event: str, *args: Any) -> None:
        for handler in list(self._handlers.get(event, ())):
            handler(*args)

    def listeners(self, event: str) -> List[Handler]:
        return list(self._handlers.get(event, ()))
