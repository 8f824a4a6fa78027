"""One-shot timers driven by the host's frame loop."""
import heapq
import itertools
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

log = logging.getLogger(__name__)


class Timer:
    def __init__(self, owner: Any, due: float, callback: Callable[[], None]):
        self.owner = owner
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self):
        self.cancelled = True


class Scheduler:
    """Fires callbacks after a delay measured in ticked seconds.

    Timers are grouped by owner so that whoever destroys the owner can
    invalidate everything still pending for it in one call.
    """

    def __init__(self):
        self.now = 0.0
        self._heap: List[Tuple[float, int, Timer]] = []
        self._by_owner: Dict[int, List[Timer]] = {}
        self._seq = itertools.count()

    def schedule(self, owner: Any, delay: float, callback: Callable[[], None]) -> Timer:
        timer = Timer(owner, self.now + max(0.0, delay), callback)
        heapq.heappush(self._heap, (timer.due, next(self._seq), timer))
        self._by_owner.setdefault(id(owner), []).append(timer)
        return timer

    def tick(self, dt: float) -> int:
        """Advance the clock by ``dt`` and fire every timer now due. Returns the fire count."""
        self.now += dt
        fired = 0
        while self._heap and self._heap[0][0] <= self.now:
            _, _, timer = heapq.heappop(self._heap)
            self._forget(timer)
            if timer.cancelled:
                continue
            timer.fired = True
            timer.callback()
            fired += 1
        return fired

    def cancel_owner(self, owner: Any) -> int:
        timers = self._by_owner.pop(id(owner), [])
        count = 0
        for timer in timers:
            if timer.active:
                timer.cancel()
                count += 1
        if count:
            log.debug("cancelled %d pending timer(s) for %r", count, owner)
        return count

    def pending(self, owner: Optional[Any] = None) -> int:
        if owner is not None:
            return sum(1 for t in self._by_owner.get(id(owner), []) if t.active)
        return sum(1 for _, _, t in self._heap if t.active)

    def _forget(self, timer: Timer):
        timers = self._by_owner.get(id(timer.owner))
        if timers is None:
            return
        if timer in timers:
            timers.remove(timer)
        if not timers:
            del self._by_owner[id(timer.owner)]
