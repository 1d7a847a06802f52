"""
Debounce helper.

Delays a call until no new call has arrived for `wait_ms`. Scheduling is
delegated to a timer source (anything with set_timeout/clear_timeout), so the
same helper runs against a real event loop or a virtual clock.
"""

from typing import Any, Callable, Optional


class Debouncer:
    """
    Callable wrapper that collapses bursts of calls into one trailing call.

    Each call cancels the pending timer and schedules a new one; the wrapped
    function runs once, with the arguments of the last call, after the burst
    has been quiet for `wait_ms`.

    Example:
        debounced = Debouncer(on_scroll, 10, environment)
        environment.add_scroll_listener(debounced)
    """

    def __init__(self, func: Callable[..., Any], wait_ms: float, timers):
        self.func = func
        self.wait_ms = wait_ms
        self.timers = timers
        self._handle: Optional[int] = None

    def __call__(self, *args, **kwargs) -> None:
        self.cancel()

        def later():
            self._handle = None
            self.func(*args, **kwargs)

        self._handle = self.timers.set_timeout(later, self.wait_ms)

    @property
    def pending(self) -> bool:
        """True while a trailing call is scheduled."""
        return self._handle is not None

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        if self._handle is not None:
            self.timers.clear_timeout(self._handle)
            self._handle = None
