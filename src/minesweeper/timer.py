"""
Game timer for the Minesweeper engine.

The timer never advances on its own: the host calls ``tick()`` (or reads
``elapsed_seconds``) on its own schedule, and the board stops the timer
when the game ends.
"""
import time
from dataclasses import dataclass, field
from typing import Callable, Optional


# ============================================================================
# Game Timer
# ============================================================================

@dataclass
class GameTimer:
    """
    Whole-second stopwatch driven by an injectable clock.

    Attributes:
        clock: Callable returning the current time in seconds.
    """

    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    _start: Optional[float] = None
    _elapsed: int = 0
    _running: bool = False

    @property
    def running(self) -> bool:
        """Check if the timer is currently counting."""
        return self._running

    @property
    def elapsed_seconds(self) -> int:
        """Seconds counted so far; frozen once stopped."""
        if self._running:
            self._refresh()
        return self._elapsed

    def start(self) -> None:
        """Start counting from zero."""
        self._start = self.clock()
        self._elapsed = 0
        self._running = True

    def stop(self) -> None:
        """Take a final reading and stop counting."""
        if not self._running:
            return
        self._refresh()
        self._running = False

    def tick(self) -> int:
        """
        Periodic callback from the host.

        Returns:
            Elapsed whole seconds. A stopped timer returns its frozen
            value unchanged.
        """
        return self.elapsed_seconds

    def reset(self) -> None:
        """Stop and clear the timer."""
        self._start = None
        self._elapsed = 0
        self._running = False

    def _refresh(self) -> None:
        self._elapsed = int(self.clock() - self._start)
