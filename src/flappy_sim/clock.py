"""
clock.py: Fixed-interval tick drivers.

SimulationClock is fired by the host's own frame loop. ThreadedClock runs a
timer thread for hosts without one, but still executes ticks on the thread
that drains it, so the simulation never needs locks.
"""

import logging
import queue
import threading
import time
from typing import Callable, Optional

from .constants import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)

TickCallback = Callable[[int], None]


class SimulationClock:
    """
    Invokes the per-tick callback once per fire() while started.
    Elapsed simulated time per tick is always the nominal interval.
    """

    def __init__(self, interval_ms: float = TICK_INTERVAL_MS,
                 on_tick: Optional[TickCallback] = None):
        self.interval_ms = interval_ms
        self.on_tick = on_tick
        self.tick_count = 0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def bind(self, on_tick: TickCallback):
        self.on_tick = on_tick

    def start(self):
        self._running = True

    def stop(self):
        self._running = False

    def fire(self) -> bool:
        """Runs one tick. Returns False when stopped or unbound."""
        if not self._running or self.on_tick is None:
            return False
        self.tick_count += 1
        self.on_tick(self.tick_count)
        return True


class ThreadedClock(SimulationClock):
    """
    A timer thread enqueues one token per interval; drain() runs them serially
    on the calling thread. Tokens carry the generation they were produced in,
    and stop() advances the generation so nothing queued earlier fires.
    """

    def __init__(self, interval_ms: float = TICK_INTERVAL_MS,
                 on_tick: Optional[TickCallback] = None):
        super().__init__(interval_ms, on_tick)
        self.ticks: "queue.Queue[int]" = queue.Queue()
        self._generation = 0
        self._beating = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self):
        if self._running:
            return
        super().start()
        self._beating.set()
        self._thread = threading.Thread(
            target=self._timer_loop, args=(self._generation,),
            name="flappy-sim-clock", daemon=True)
        self._thread.start()
        logger.debug("Clock thread started (%.1f ms interval).", self.interval_ms)

    def stop(self):
        if not self._running:
            return
        super().stop()
        self._generation += 1
        self._beating.clear()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()
        logger.debug("Clock thread stopped.")

    def _timer_loop(self, generation: int):
        interval = self.interval_ms / 1000.0
        while self._beating.is_set():
            time.sleep(interval)
            if self._beating.is_set():
                self.ticks.put(generation)

    def drain(self, max_ticks: Optional[int] = None) -> int:
        """
        Runs queued ticks on the current thread.
        Stale tokens from before a stop() are dropped. Returns ticks run.
        """
        fired = 0
        while max_ticks is None or fired < max_ticks:
            try:
                generation = self.ticks.get_nowait()
            except queue.Empty:
                break
            if generation != self._generation:
                continue
            if self.fire():
                fired += 1
        return fired
