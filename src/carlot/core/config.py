"""Settings persistence."""

from pathlib import Path
from typing import Optional

import platformdirs
import tomli
import tomli_w
from pydantic import ValidationError

from carlot.exceptions import ConfigError, ConfigValidationError
from carlot.models import Settings

# Current settings schema version
CURRENT_VERSION = 1


class ConfigManager:
    """Reads and writes carlot settings as TOML."""

    CONFIG_FILENAME = "config.toml"

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        """Initialize config manager.

        Args:
            config_dir: Override config directory (for testing)
        """
        if config_dir:
            self._config_dir = Path(config_dir)
        else:
            self._config_dir = Path(platformdirs.user_config_dir("carlot"))

    @property
    def config_path(self) -> Path:
        """Path to settings file."""
        return self._config_dir / self.CONFIG_FILENAME

    @property
    def exists(self) -> bool:
        """Check if settings file exists."""
        return self.config_path.exists()

    def save(self, settings: Settings) -> None:
        """Write settings to disk, creating the directory if needed.

        Raises:
            ConfigError: If the settings file cannot be written
        """
        config_dict = settings.model_dump(mode="json", exclude_none=True)
        try:
            self._config_dir.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(tomli_w.dumps(config_dict), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not save settings to {self.config_path}", str(e))

    def load(self) -> Settings:
        """Load settings, falling back to defaults when no file exists.

        Returns:
            Loaded and validated Settings

        Raises:
            ConfigError: If the file cannot be read
            ConfigValidationError: If the file is not valid TOML or has bad values
        """
        if not self.exists:
            return Settings()

        try:
            text = self.config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Could not read settings from {self.config_path}", str(e))

        try:
            config_dict = tomli.loads(text)
        except tomli.TOMLDecodeError as e:
            raise ConfigValidationError("config", str(e))

        try:
            settings = Settings.model_validate(config_dict)
        except ValidationError as e:
            raise ConfigValidationError("config", str(e))

        if settings.version > CURRENT_VERSION:
            raise ConfigValidationError(
                "version",
                f"Settings version {settings.version} is newer than this carlot supports",
            )
        return settings

    def delete(self) -> bool:
        """Delete settings file.

        Returns:
            True if file was deleted, False if it didn't exist

        Raises:
            ConfigError: If the settings file cannot be removed
        """
        if not self.exists:
            return False
        try:
            self.config_path.unlink()
        except OSError as e:
            raise ConfigError(f"Could not delete {self.config_path}", str(e))
        return True
