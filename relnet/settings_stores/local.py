import json
from pathlib import Path
from typing import Any

from loguru import logger

from relnet.settings_stores.base import SettingsStore


class LocalSettingsStore(SettingsStore):
    """Settings store that keeps values in a JSON file."""

    def __init__(self, filepath: str | Path | None = None) -> None:
        """Initialize LocalSettingsStore.

        Args:
            filepath: Path to settings file. If provided and exists, will auto-load.
                     If provided and doesn't exist, will save to this path when save() is called.
                     If not provided, keeps settings in memory only.
        """
        self._filepath = str(filepath) if filepath else None

        if self._filepath and Path(self._filepath).exists():
            with open(self._filepath, "r") as f:
                self._values: dict[str, Any] = json.load(f)
        else:
            self._values = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def save(self) -> None:
        if not self._filepath:
            logger.debug("Settings store has no filepath, keeping settings in memory")
            return

        Path(self._filepath).parent.mkdir(parents=True, exist_ok=True)
        with open(self._filepath, "w") as f:
            json.dump(self._values, f)
