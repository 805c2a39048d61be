"""
Best-time persistence for finished games.

Stores the fastest winning time per board configuration in a JSON file.
The engine knows nothing about this module; it reads a won board after
the fact.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from .board import Board, BoardConfig


logger = logging.getLogger(__name__)

DEFAULT_SCORES_PATH = Path.home() / ".minesweeper" / "best_times.json"


# ============================================================================
# Best Time Store
# ============================================================================

class BestTimeStore:
    """
    JSON-backed map from board key (``WxHxM``) to best time in seconds.

    A missing or unreadable file reads as an empty store.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_SCORES_PATH) -> None:
        self.path = Path(path)

    def all(self) -> Dict[str, int]:
        """Load every stored best time."""
        if not self.path.exists():
            return {}
        try:
            with open(self.path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning(
                "Ignoring unreadable scores file %s: %s", self.path, exc
            )
            return {}
        if not isinstance(data, dict):
            return {}
        return {
            key: int(value)
            for key, value in data.items()
            if isinstance(value, (int, float))
        }

    def best(self, config: BoardConfig) -> Optional[int]:
        """Best time for a configuration, or None if never won."""
        return self.all().get(config.key)

    def record(self, board: Board) -> bool:
        """
        Store the board's time if it is a win that beats the record.

        Returns:
            True if a new best time was written.
        """
        if not board.is_won:
            return False

        times = self.all()
        key = board.config.key
        seconds = board.elapsed_seconds
        previous = times.get(key)
        if previous is not None and previous <= seconds:
            return False

        times[key] = seconds
        self._save(times)
        return True

    def _save(self, times: Dict[str, int]) -> None:
        """Write all times to JSON."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(times, f, indent=2, sort_keys=True)
