"""JSON config file storage."""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class ConfigStore:
    """Reads and writes the versioned JSON config file."""

    def __init__(self, path: Path | str):
        """Initialize config store.

        Args:
            path: Location of the JSON config file
        """
        self.path = Path(path)

    def read_config(self) -> dict[str, Any] | None:
        """Load the config file.

        Returns:
            Parsed JSON object, or None if the file is missing, unreadable,
            not valid JSON, or not a JSON object
        """
        logger.info("Reading config at %s", self.path)

        try:
            data = self.path.read_text(encoding="utf-8")
            config = json.loads(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.info("Config unavailable: %s", e)
            return None

        if not isinstance(config, dict):
            logger.info("Config is not a JSON object: %s", self.path)
            return None

        logger.info("Read config: %s", json.dumps(config))
        return config

    def write_config(self, config: dict[str, Any]) -> bool:
        """Write the config file.

        Returns:
            True if the file was written
        """
        try:
            text = json.dumps(config, indent=2, ensure_ascii=False) + "\n"
            self.path.write_text(text, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.error("Failed to write config at %s: %s", self.path, e)
            return False

        logger.info("Wrote config: %s", json.dumps(config))
        return True
