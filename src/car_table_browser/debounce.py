"""
Filename:       debounce.py
Author:         jole
Created:        19.10.2026

Description:    Coalesce bursts of search input into one search.

Notes:          There is no timer thread. The owner calls poll() from its loop (the curses loop wakes up every TICK_MS),
                and the pending value goes out once the input has been quiet for delay_ms. All times are milliseconds.
"""

# --- Import section ---------------------------------------------------------------------------------------------------
import logging
import time

from typing import Any, Callable, Optional
# --- END OF Import section --------------------------------------------------------------------------------------------


logger = logging.getLogger(__name__)

_NOTHING = object()



def monotonic_ms() -> float:
    return time.monotonic() * 1000.0
# --- END OF monotonic_ms() --------------------------------------------------------------------------------------------



class Debouncer:
    """
        Holds the latest pushed value until no new value has arrived for delay_ms, then hands it to on_emit. A value
    equal to the one emitted last is dropped instead, so typing "ab", backspace, "b" does not search twice for "ab".
    """

    def __init__(self,
                 _delay_ms:     float = 300,
                 _on_emit:      Optional[Callable[[Any], None]] = None,
                 _clock:        Optional[Callable[[], float]] = None
                 ) -> None:

        if _delay_ms < 0:
            raise ValueError(f"delay must not be negative, got {_delay_ms}")

        self.delay_ms   = _delay_ms
        self.on_emit    = _on_emit or (lambda _value: None)
        self.clock      = _clock or monotonic_ms

        self._pending:      Any             = _NOTHING
        self._last_push:    float           = 0.0
        self._last_emitted: Any             = _NOTHING
    # --- END OF __init__() --------------------------------------------------------------------------------------------



    @property
    def pending(self) -> bool:
        return self._pending is not _NOTHING
    # --- END OF pending() ---------------------------------------------------------------------------------------------



    @property
    def deadline(self) -> Optional[float]:
        """When the pending value is due, or None if nothing is waiting."""
        return self._last_push + self.delay_ms if self.pending else None
    # --- END OF deadline() --------------------------------------------------------------------------------------------



    def push(self, _value: Any, _now: Optional[float] = None) -> None:
        """
        Buffer _value, replacing any earlier one still waiting, and restart the quiet window.
        """

        self._pending   = _value
        self._last_push = self.clock() if _now is None else _now
    # --- END OF push() ------------------------------------------------------------------------------------------------



    def poll(self, _now: Optional[float] = None) -> bool:
        """
        Emit the pending value if the quiet window has passed.

        :param _now:    Current time in ms, defaults to the clock

        :return:        True if on_emit was called
        """

        if not self.pending:
            return False
        now = self.clock() if _now is None else _now
        if now - self._last_push < self.delay_ms:
            return False
        return self._release()
    # --- END OF poll() ------------------------------------------------------------------------------------------------



    def flush(self) -> bool:
        """Emit the pending value right away, without waiting for the window. Same duplicate rule as poll()."""
        if not self.pending:
            return False
        return self._release()
    # --- END OF flush() -----------------------------------------------------------------------------------------------



    def cancel(self) -> None:
        self._pending = _NOTHING
    # --- END OF cancel() ----------------------------------------------------------------------------------------------



    def _release(self) -> bool:
        value           = self._pending
        self._pending   = _NOTHING

        if self._last_emitted is not _NOTHING and value == self._last_emitted:
            logger.debug(f"Debouncer: dropping {value!r}, same as last emitted value")
            return False

        self._last_emitted = value
        self.on_emit(value)
        return True
    # --- END OF _release() --------------------------------------------------------------------------------------------

# --- END OF class Debouncer -------------------------------------------------------------------------------------------
