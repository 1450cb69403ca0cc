"""Named encoder profiles loaded from YAML."""

from pathlib import Path
from typing import Optional

import yaml
from loguru import logger

from .config import Config
from .encoder import Encoder


class ProfileRegistry:
    """
    Named Encoder configurations read from a profiles YAML file.

    File format:
        profiles:
          - name: public
            target_tag: custom
            ignore_value: "-"

    A missing or empty file yields an empty registry.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize registry.

        Args:
            config_path: Path to profiles.yaml. If None, uses Config.PROFILES_PATH.
        """
        self._config_path = config_path or Config.PROFILES_PATH
        self._profiles: dict[str, Encoder] = {}
        self._load()

    def _load(self) -> None:
        self._profiles.clear()
        path = Path(self._config_path)

        if not path.exists():
            logger.debug(f"Profiles file not found at {self._config_path}, no profiles loaded")
            return

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse profiles file {self._config_path}: {e}")
            return

        if not data:
            logger.debug("Profiles file is empty")
            return

        if not isinstance(data, dict):
            logger.error(f"Profiles file {self._config_path} must contain a mapping")
            return

        for entry in data.get("profiles") or []:
            try:
                name = entry["name"]
                encoder = Encoder(
                    target_tag=str(entry["target_tag"]),
                    ignore_value=str(entry.get("ignore_value", Config.IGNORE_VALUE)),
                )
            except (KeyError, TypeError) as e:
                logger.error(f"Invalid profile (missing {e}): {entry}")
                continue

            if not isinstance(name, str):
                logger.error(f"Invalid profile (name must be a string): {entry}")
                continue

            if name in self._profiles:
                logger.warning(f"Duplicate profile '{name}', keeping the last definition")
            self._profiles[name] = encoder
            logger.debug(f"Loaded profile: {name}")

        logger.info(f"Loaded {len(self._profiles)} encoder profile(s) from {self._config_path}")

    def reload(self) -> None:
        """Re-read the profiles file."""
        self._load()

    def names(self) -> list[str]:
        """Profile names in file order."""
        return list(self._profiles)

    def get(self, name: str) -> Encoder:
        """
        Look up a profile.

        Raises:
            KeyError: If no profile has that name
        """
        if name not in self._profiles:
            raise KeyError(f"Unknown profile: {name}. Choose from: {self.names()}")
        return self._profiles[name]
