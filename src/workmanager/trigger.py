# src/workmanager/trigger.py
"""
Debounced recompute trigger driven by the simulated clock.

The host calls :meth:`PriorityTrigger.tick` on every simulation tick. A
run happens only when the tick lands on the pool's stagger slot *and* the
simulated hour differs from the last processed one, so each pool
recomputes at most once per in-game hour and pools spread their work over
different ticks.
"""

from __future__ import annotations

import zlib
from dataclasses import dataclass, field
from typing import Callable

from workmanager.logging import getLogger

__all__ = ["STAGGER_PERIOD", "PriorityTrigger", "stagger_offset_for"]

log = getLogger(__name__)

STAGGER_PERIOD = 60


def stagger_offset_for(pool_key: str, period: int = STAGGER_PERIOD) -> int:
    """Deterministic offset in ``[0, period)`` derived from the pool key."""
    return zlib.crc32(pool_key.encode("utf-8")) % period


@dataclass(slots=True)
class PriorityTrigger:
    """
    Per-pool scheduler state.

    Attributes
    ----------
    pool_key : str
        Identifier of the worker pool (e.g. a map id).
    stagger_offset : int
        Tick offset; defaults to ``stagger_offset_for(pool_key)``.
    stagger_period : int
        Ticks between two eligible slots.
    last_hour : int | None
        Last simulated hour a run happened in; None before the first run.
    """

    pool_key: str
    stagger_offset: int | None = None
    stagger_period: int = STAGGER_PERIOD
    last_hour: int | None = field(default=None)
    _offset: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.stagger_period < 1:
            raise ValueError(
                f"stagger_period must be >= 1, got {self.stagger_period}"
            )
        if self.stagger_offset is None:
            self._offset = stagger_offset_for(self.pool_key, self.stagger_period)
        else:
            self._offset = self.stagger_offset
        self.stagger_offset = self._offset

    def should_run(self, tick: int, hour: int) -> bool:
        """True on a stagger-aligned tick in a not yet processed hour."""
        if (tick + self._offset) % self.stagger_period != 0:
            return False
        return hour != self.last_hour

    def tick(self, tick: int, hour: int, run: Callable[[], object]) -> bool:
        """
        Call *run* if due and record the hour once it returns.

        Exceptions from *run* propagate unchanged and leave ``last_hour``
        untouched, so the next stagger-aligned tick tries again.

        Returns
        -------
        bool
            Whether *run* was called.
        """
        if not self.should_run(tick, hour):
            return False
        log.debug(
            "Pool '%s': updating work priorities (tick %d, hour %d)",
            self.pool_key,
            tick,
            hour,
        )
        run()
        self.last_hour = hour
        return True

    def reset(self) -> None:
        """Forget the last processed hour (e.g. after loading a save)."""
        self.last_hour = None
