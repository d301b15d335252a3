"""Runtime settings for the Smart Closet app."""

from dataclasses import dataclass
from pathlib import Path
import os
import re
from typing import Callable, Dict, Optional

DEFAULT_VISION_MODEL = "gemini-2.5-flash"
DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_STORAGE_PATH = "data/local_storage.json"
API_KEY_SETTINGS = ("gemini_api_key", "api_key", "google_api_key")

_YAML_LINE = re.compile(r"^(?P<key>[A-Za-z_][\w.-]*)\s*:\s*(?P<value>.*?)\s*$")


@dataclass
class AppConfig:
    """Settings for storage, the Gemini client and the mock login.

    The Gemini credential is optional: when it is missing every stylist call
    short-circuits to its canned fallback without touching the network.
    """

    gemini_api_key: Optional[str] = None
    vision_model: str = DEFAULT_VISION_MODEL
    text_model: str = DEFAULT_TEXT_MODEL
    request_timeout: float = 30.0
    storage_path: str = DEFAULT_STORAGE_PATH
    login_delay_seconds: float = 0.8
    default_language: str = "zh"
    environment: str | None = None

    def __post_init__(self) -> None:
        if self.gemini_api_key is not None and not self.gemini_api_key.strip():
            self.gemini_api_key = None

    @property
    def has_credential(self) -> bool:
        return bool(self.gemini_api_key)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Read settings from the process environment over an optional YAML file.

        The file is ``$APP_CONFIG_PATH`` when set, otherwise
        ``$CLOSET_CONFIG_DIR/<APP_ENV>.yaml`` (``config/environments`` by
        default). Each setting is looked up as an upper-case environment
        variable first, then as a key in the file. The API key may be given as
        ``GEMINI_API_KEY``, ``API_KEY`` or ``GOOGLE_API_KEY``, in that order.
        """

        env_name = os.getenv("APP_ENV") or None
        file_values = cls._load_yaml_config(cls._config_file(env_name))

        def lookup(key: str) -> Optional[str]:
            value = os.getenv(key.upper())
            return value if value is not None else file_values.get(key)

        casts: Dict[str, Callable[[str], object]] = {
            "vision_model": str,
            "text_model": str,
            "request_timeout": float,
            "storage_path": str,
            "login_delay_seconds": float,
            "default_language": str,
        }
        settings = {}
        for name, cast in casts.items():
            raw = lookup(name)
            if raw:
                settings[name] = cast(raw)

        api_key = next((value for value in map(lookup, API_KEY_SETTINGS) if value), None)
        return cls(gemini_api_key=api_key, environment=env_name, **settings)

    @staticmethod
    def _config_file(env_name: Optional[str]) -> Optional[Path]:
        explicit = os.getenv("APP_CONFIG_PATH")
        if explicit:
            return Path(explicit)
        if env_name:
            return Path(os.getenv("CLOSET_CONFIG_DIR", "config/environments")) / f"{env_name}.yaml"
        return None

    @staticmethod
    def _load_yaml_config(path: Optional[Path]) -> Dict[str, str]:
        """Read flat ``key: value`` pairs; nesting and lists are not supported."""

        if path is None or not path.is_file():
            return {}
        values: Dict[str, str] = {}
        for line in path.read_text(encoding="utf-8").splitlines():
            match = _YAML_LINE.match(line.strip())
            if not match or line.lstrip().startswith("#"):
                continue
            value = match.group("value")
            if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                value = value[1:-1]
            values[match.group("key")] = value
        return values


__all__ = ["AppConfig", "API_KEY_SETTINGS"]
