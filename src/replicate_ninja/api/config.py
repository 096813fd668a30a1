"""Configuration management for Replicate API credentials and settings."""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from replicate_ninja import __version__
from replicate_ninja.utils.exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://api.replicate.com/v1"
DEFAULT_TIMEOUT = 30.0
DEFAULT_POLL_INTERVAL = 1.0

CONFIG_FILENAMES = [
    "replicate-ninja.yaml",
    "replicate.yaml",
    "replicate-ninja.yml",
    "replicate.yml",
]


class ConfigLoader:
    """Resolve Replicate settings from .env file, YAML profile and explicit values.

    Supports hybrid configuration:
    - .env file: Contains the API token (and optionally the other settings)
    - YAML file: Contains named profiles (base URL, timeout, poll interval)
    - Explicit values: Override both .env and YAML settings
    """

    def __init__(
        self,
        env_file: Optional[str] = None,
        profile: Optional[str] = None,
        config_file: Optional[str] = None
    ):
        """Initialize configuration.

        Args:
            env_file: Path to .env file (default: searches for .env in current dir and parents)
            profile: Profile name to load from YAML config (e.g., 'prod', 'staging')
            config_file: Path to YAML config file (default: replicate-ninja.yaml or replicate.yaml)
        """
        if env_file:
            load_dotenv(env_file)
        else:
            dotenv_path = self._find_upwards([".env"])
            if dotenv_path:
                load_dotenv(dotenv_path=dotenv_path)

        self.profile_config: Dict[str, Any] = {}
        if profile:
            self.profile_config = self._load_profile(profile, config_file)

    @staticmethod
    def _find_upwards(filenames) -> Optional[Path]:
        """Find the first of ``filenames`` in the current directory or its parents.

        Returns:
            Path to the file or None if not found
        """
        current = Path.cwd()
        while True:
            for filename in filenames:
                candidate = current / filename
                if candidate.exists():
                    return candidate
            if current == current.parent:
                return None
            current = current.parent

    def _load_profile(self, profile: str, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load profile configuration from YAML file.

        Args:
            profile: Profile name to load
            config_file: Path to YAML config file (optional)

        Returns:
            Profile configuration dictionary

        Raises:
            ConfigurationError: If the config file or the profile is missing
        """
        if config_file:
            config_path = Path(config_file)
        else:
            config_path = self._find_upwards(CONFIG_FILENAMES)

        if not config_path or not config_path.exists():
            raise ConfigurationError(
                "Config file not found. Create replicate-ninja.yaml or replicate.yaml, "
                "or specify --config-file"
            )

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        if not isinstance(config_data, dict) or 'profiles' not in config_data:
            raise ConfigurationError("Config file must contain 'profiles' section")

        profiles = config_data['profiles']
        if not isinstance(profiles, dict):
            raise ConfigurationError("'profiles' section must be a mapping of profile names")

        if profile not in profiles:
            available = ', '.join(str(name) for name in profiles)
            raise ConfigurationError(
                f"Profile '{profile}' not found in config. "
                f"Available profiles: {available}"
            )

        settings = profiles[profile] or {}
        if not isinstance(settings, dict):
            raise ConfigurationError(f"Profile '{profile}' must be a mapping of settings")
        return settings

    def get(
        self,
        key: str,
        explicit: Optional[Any] = None,
        default: Optional[Any] = None,
        profile_key: Optional[str] = None
    ) -> Optional[Any]:
        """Get configuration value with precedence: explicit > profile > .env > default.

        Args:
            key: Environment variable key
            explicit: Value passed by the caller (highest priority)
            default: Default value if not found
            profile_key: Key name in profile config (if the setting may come from a profile)

        Returns:
            Configuration value or None
        """
        if explicit is not None:
            return explicit

        if profile_key and profile_key in self.profile_config:
            return self.profile_config[profile_key]

        env_value = os.getenv(key)
        if env_value is not None:
            return env_value

        return default

    def get_api_token(self, explicit: Optional[str] = None) -> str:
        """Get API token. Tokens are never read from profiles."""
        return self.get("REPLICATE_API_TOKEN", explicit, default="")

    def get_base_url(self, explicit: Optional[str] = None) -> str:
        """Get API base URL."""
        return self.get("REPLICATE_API_URL", explicit, DEFAULT_BASE_URL, profile_key="base_url")

    def get_timeout(self, explicit: Optional[float] = None) -> Optional[float]:
        """Get request timeout in seconds; ``none`` disables the timeout."""
        value = self.get("REPLICATE_TIMEOUT", explicit, DEFAULT_TIMEOUT, profile_key="timeout")
        if isinstance(value, str) and value.strip().lower() == "none":
            return None
        return _to_float("timeout", value)

    def get_poll_interval(self, explicit: Optional[float] = None) -> float:
        """Get delay between polling attempts in seconds."""
        value = self.get(
            "REPLICATE_POLL_INTERVAL", explicit, DEFAULT_POLL_INTERVAL, profile_key="poll_interval"
        )
        return _to_float("poll_interval", value)


def _to_float(name: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Invalid {name}: {value!r} is not a number")
    if number < 0:
        raise ConfigurationError(f"Invalid {name}: {value!r} must not be negative")
    return number


@dataclass(frozen=True)
class Config:
    """Immutable client settings shared by every resource of a client."""

    api_token: str = field(default="", repr=False)
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = f"replicate-ninja/{__version__}"
    timeout: Optional[float] = DEFAULT_TIMEOUT
    poll_interval: float = DEFAULT_POLL_INTERVAL

    @classmethod
    def from_env(
        cls,
        api_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
        env_file: Optional[str] = None,
        profile: Optional[str] = None,
        config_file: Optional[str] = None,
    ) -> "Config":
        """Build a config from explicit values, a YAML profile and the environment.

        A missing token is not an error here; every request checks it
        before anything is sent.
        """
        loader = ConfigLoader(env_file, profile=profile, config_file=config_file)
        return cls(
            api_token=loader.get_api_token(api_token),
            base_url=str(loader.get_base_url(base_url)).rstrip('/'),
            timeout=loader.get_timeout(timeout),
            poll_interval=loader.get_poll_interval(poll_interval),
        )

    def with_overrides(self, **changes: Any) -> "Config":
        """Return a copy with some fields replaced."""
        return replace(self, **changes)
