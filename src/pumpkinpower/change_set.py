"""Tracked jack o' lantern locations, persisted as a flat text file.

One location identifier per line, UTF-8, no header. The file is read once at
startup and rewritten once at shutdown; nothing is written between events.
"""

from __future__ import annotations

import logging
from collections.abc import MutableSet
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


class ChangeSet(MutableSet):
    """Set of location identifiers bound to a data file."""

    def __init__(self, path: Path, locations: Iterable[str] = ()):
        self.path = Path(path)
        self._locations: set[str] = set(locations)

    def __contains__(self, location: object) -> bool:
        return location in self._locations

    def __iter__(self) -> Iterator[str]:
        return iter(self._locations)

    def __len__(self) -> int:
        return len(self._locations)

    def __repr__(self) -> str:
        return f"ChangeSet({str(self.path)!r}, {sorted(self._locations)!r})"

    def add(self, location: str) -> None:
        self._locations.add(location)

    def discard(self, location: str) -> None:
        self._locations.discard(location)

    def ensure_file(self) -> None:
        """Create an empty data file if there is none yet."""
        if self.path.exists():
            return
        try:
            self.path.touch()
        except OSError as e:
            logger.warning("Failed to create %s: %s", self.path.name, e)

    def load(self) -> None:
        """Add every non-empty line of the data file to the set."""
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                for line in fh:
                    location = line.strip()
                    if location:
                        self._locations.add(location)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to load changed blocks from file: %s", e)
            return
        logger.debug("Loaded %d changed block(s) from %s", len(self._locations), self.path)

    def save(self) -> None:
        """Overwrite the data file with the current set, one entry per line."""
        try:
            with self.path.open("w", encoding="utf-8") as fh:
                for location in self._locations:
                    fh.write(location)
                    fh.write("\n")
        except OSError as e:
            logger.warning("Failed to save changed blocks to file: %s", e)
            return
        logger.debug("Saved %d changed block(s) to %s", len(self._locations), self.path)
