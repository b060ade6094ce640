"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.addon-loader/config.toml.
The directory can be moved with the ADDON_LOADER_HOME environment variable.
Every key is optional:

    registry_path = "~/.addon-loader/addons.txt"
    template_path = "~/dotfiles/autoconfig.js.template"
    firefox_bin = "/Applications/Firefox Nightly.app/Contents/MacOS/firefox"
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import tomlkit

HOME_ENV_VAR = "ADDON_LOADER_HOME"
CONFIG_FILENAME = "config.toml"
REGISTRY_FILENAME = "addons.txt"


def default_home() -> Path:
    """Return the addon-loader home directory (ADDON_LOADER_HOME or ~/.addon-loader)."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".addon-loader"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in AddonLoaderContext.
    All fields are read-only after construction.
    """

    registry_path: Path
    template_path: Path | None
    firefox_bin: str | None

    @staticmethod
    def defaults(home: Path) -> "GlobalConfig":
        return GlobalConfig(
            registry_path=home / REGISTRY_FILENAME,
            template_path=None,
            firefox_bin=None,
        )


def _optional_str(data: dict, key: str, config_path: Path) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{key}' in {config_path} must be a non-empty string")
    return value


def parse_global_config(text: str, config_path: Path, home: Path) -> GlobalConfig:
    """Parse config.toml contents, filling unset keys with defaults.

    Raises:
        ValueError: If the TOML is malformed or a key has the wrong type
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Malformed config at {config_path}: {e}") from e

    defaults = GlobalConfig.defaults(home)
    registry = _optional_str(data, "registry_path", config_path)
    template = _optional_str(data, "template_path", config_path)

    return GlobalConfig(
        registry_path=Path(registry).expanduser() if registry else defaults.registry_path,
        template_path=Path(template).expanduser() if template else None,
        firefox_bin=_optional_str(data, "firefox_bin", config_path),
    )


def render_global_config(config: GlobalConfig) -> str:
    doc = tomlkit.document()
    doc.add(tomlkit.comment("Global addon-loader configuration"))
    doc["registry_path"] = str(config.registry_path)
    if config.template_path is not None:
        doc["template_path"] = str(config.template_path)
    if config.firefox_bin is not None:
        doc["firefox_bin"] = config.firefox_bin
    return tomlkit.dumps(doc)


class ConfigStore(ABC):
    """Abstract interface for global config access.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if the config file exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config, returning defaults when no file exists.

        Raises:
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Save global config.

        Raises:
            OSError: If the directory or file cannot be written
        """
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for messages and debugging)."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads/writes <home>/config.toml."""

    def __init__(self, home: Path | None = None) -> None:
        self._home = home if home is not None else default_home()

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        config_path = self.path()
        if not config_path.exists():
            return GlobalConfig.defaults(self._home)
        return parse_global_config(config_path.read_text(encoding="utf-8"), config_path, self._home)

    def save(self, config: GlobalConfig) -> None:
        config_path = self.path()
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(render_global_config(config), encoding="utf-8")

    def path(self) -> Path:
        return self._home / CONFIG_FILENAME


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None, home: Path | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config file doesn't exist)
            home: Home directory used for defaults and path()
        """
        self._config = config
        self._home = home if home is not None else Path("/test/addon-loader-home")

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            return GlobalConfig.defaults(self._home)
        return self._config

    def save(self, config: GlobalConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return self._home / CONFIG_FILENAME
