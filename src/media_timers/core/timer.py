"""Timer record data model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from pathlib import Path
from typing import Optional, Tuple


@dataclass
class Timer:
    """A scheduled playback entry.

    Attributes:
        name: Display name of the timer
        enabled: Whether the timer takes part in scheduling
        from_time: Time of day when playback starts, or None when unset
        to_time: Time of day when playback stops, or None when unset
        resource_path: Media file to play, or None when unset
    """
    name: str
    enabled: bool = False
    from_time: Optional[time] = None
    to_time: Optional[time] = None
    resource_path: Optional[Path] = None

    def sort_key(self) -> Tuple:
        """Natural order: name (case-insensitive), then start and end time.

        Unset times sort before any set time.
        """
        return (
            self.name.casefold(),
            self.from_time is not None,
            self.from_time or time(0, 0, 0),
            self.to_time is not None,
            self.to_time or time(0, 0, 0),
            self.name,
        )

    def __lt__(self, other: "Timer") -> bool:
        if not isinstance(other, Timer):
            return NotImplemented
        return self.sort_key() < other.sort_key()
