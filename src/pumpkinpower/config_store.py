"""Line-oriented reader for the plugin's config.yml.

Only ``notifications-enabled: <true|false>`` is understood. A matching line
with no value after the colon is skipped like one with no colon at all. The file is not
parsed as YAML: each line starting with the key is split on ``:`` and the
second token decides the flag, last line wins.
"""

from __future__ import annotations

import logging
from pathlib import Path

NOTIFICATIONS_KEY = "notifications-enabled"
DEFAULT_CONFIG = f"{NOTIFICATIONS_KEY}: true\n"

logger = logging.getLogger(__name__)


def parse_bool(value: str) -> bool:
    """Anything other than a case-insensitive "true" is False."""
    return value.strip().lower() == "true"


class ConfigStore:
    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> bool:
        """Return the notifications flag, True when the file can't tell us."""
        enabled: bool | None = None
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                for line in fh:
                    if not line.startswith(NOTIFICATIONS_KEY):
                        continue
                    parts = line.split(":")
                    if len(parts) < 2 or not parts[1].strip():
                        logger.warning("Ignoring malformed config line: %r", line.rstrip("\n"))
                        continue
                    enabled = parse_bool(parts[1])
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to load %s: %s", self.path.name, e)
            return True

        if enabled is None:
            logger.warning("No %s entry in %s, defaulting to true", NOTIFICATIONS_KEY, self.path.name)
            return True
        return enabled

    def save_default(self) -> None:
        """Write the default config if the file is missing."""
        if self.path.exists():
            return
        try:
            self.path.write_text(DEFAULT_CONFIG, encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to save default %s: %s", self.path.name, e)
