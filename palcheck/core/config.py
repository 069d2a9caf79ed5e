"""
Configuration management for PalCheck
Handles paths and settings
"""
from pathlib import Path
import json

DEFAULT_DEBOUNCE_MS = 300


class Config:
    """PalCheck configuration"""

    def __init__(self, base_dir: str = None):
        """
        Initialize configuration

        Args:
            base_dir: Base directory for PalCheck data.
                     Defaults to ~/.palcheck
        """
        if base_dir is None:
            base_dir = Path.home() / ".palcheck"
        else:
            base_dir = Path(base_dir)

        self.base_dir = base_dir
        self.base_dir.mkdir(parents=True, exist_ok=True)

        self.logs_dir = self.base_dir / "logs"
        self.logs_dir.mkdir(exist_ok=True)

        self.settings_path = self.base_dir / "settings.json"

        self._load_settings()

    def get_log_dir(self) -> Path:
        """Get logs directory"""
        return self.logs_dir

    def get_settings_path(self) -> Path:
        """Get settings file path"""
        return self.settings_path

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0

    def _load_settings(self):
        """Load settings from the settings file, falling back to defaults"""
        self.debounce_ms: int = DEFAULT_DEBOUNCE_MS

        if self.settings_path.exists():
            try:
                with open(self.settings_path, "r", encoding="utf-8") as f:
                    data = json.load(f)
                value = data.get("debounce_ms", self.debounce_ms)
                if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
                    self.debounce_ms = value
            except (ValueError, OSError, AttributeError):
                # Undecodable or malformed settings file: keep defaults
                pass

    def set_debounce_ms(self, debounce_ms: int):
        """
        Set and persist the debounce delay

        Args:
            debounce_ms: quiet period in milliseconds before a check runs
        """
        if isinstance(debounce_ms, bool) or not isinstance(debounce_ms, int) or debounce_ms < 0:
            raise ValueError(f"debounce_ms must be a non-negative integer, got {debounce_ms!r}")

        with open(self.settings_path, "w", encoding="utf-8") as f:
            json.dump({"debounce_ms": debounce_ms}, f, indent=2)

        self.debounce_ms = debounce_ms

    def get_settings(self) -> dict:
        """Get current settings"""
        return {
            "debounce_ms": self.debounce_ms,
            "settings_path": str(self.settings_path),
            "log_dir": str(self.logs_dir),
        }
