from typing import Any, Protocol


class SettingsStore(Protocol):
    """Protocol for persisted key/value settings."""

    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting, or ``default`` when it is not set."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Set a setting. Call save() to persist it."""
        ...

    def save(self) -> None:
        """Persist all settings."""
        ...
