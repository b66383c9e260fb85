from typing import Any

from relnet.settings_stores.base import SettingsStore


class FakeSettingsStore(SettingsStore):
    """Fake settings store for testing."""

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self.values = values or {}
        self.saves = 0

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value

    def save(self) -> None:
        self.saves += 1
