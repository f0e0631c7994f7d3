# File: media_scanner/core/config/settings.py

import os
from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, List, Mapping, Optional

from dotenv import load_dotenv


class ConfigurationError(ValueError):
    """Raised when a configuration value is present but unusable."""


# media_scanner/core/config/settings.py -> media_scanner/core/config -> media_scanner/core -> media_scanner
PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent.parent
DEFAULT_INDEX_HTML: Path = PACKAGE_DIR / "static" / "index.html"

DEFAULT_HOST = "127.0.0.1"
DEFAULT_MAX_DEPTH = 3
DEFAULT_IGNORED_DIRS = frozenset({"node_modules"})
LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class Settings:
    """
    Immutable runtime configuration.
    Built once at startup and handed to the app factory.
    """
    port: Optional[int] = None
    scan_path: Optional[Path] = None
    host: str = DEFAULT_HOST
    max_depth: int = DEFAULT_MAX_DEPTH
    ignored_dirs: FrozenSet[str] = DEFAULT_IGNORED_DIRS
    index_html: Path = DEFAULT_INDEX_HTML
    log_level: str = "INFO"

    def __post_init__(self):
        if self.port is not None and not 0 < self.port < 65536:
            raise ConfigurationError(f"PORT must be between 1 and 65535, got {self.port}")
        if self.max_depth < 0:
            raise ConfigurationError(f"MAX_DEPTH cannot be negative: {self.max_depth}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Reads settings from a mapping (defaults to os.environ).
        Call load_env_file() first if a .env file should be honoured.
        """
        env = os.environ if environ is None else environ

        return cls(
            port=_parse_port(env.get("PORT")),
            scan_path=_parse_scan_path(env.get("SCAN_PATH")),
            host=env.get("HOST") or DEFAULT_HOST,
            max_depth=_parse_int("MAX_DEPTH", env.get("MAX_DEPTH"), DEFAULT_MAX_DEPTH),
            ignored_dirs=_parse_names(env.get("IGNORED_DIRS")),
            index_html=Path(env["INDEX_HTML"]) if env.get("INDEX_HTML") else DEFAULT_INDEX_HTML,
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )

    def missing(self) -> List[str]:
        """Names of the required settings that are not configured."""
        names = []
        if self.port is None:
            names.append("PORT")
        if self.scan_path is None:
            names.append("SCAN_PATH")
        return names


def load_env_file(path: Optional[Path] = None) -> bool:
    """
    Loads KEY=VALUE pairs from a .env file into os.environ.
    Variables already set in the environment are left alone.
    """
    return load_dotenv(dotenv_path=path or Path.cwd() / ".env", override=False)


def _parse_int(name: str, raw: Optional[str], default: Optional[int]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _parse_port(raw: Optional[str]) -> Optional[int]:
    return _parse_int("PORT", raw, None)


def _parse_scan_path(raw: Optional[str]) -> Optional[Path]:
    if raw is None or raw.strip() == "":
        return None
    return Path(raw.strip()).expanduser().resolve()


def _parse_names(raw: Optional[str]) -> FrozenSet[str]:
    if raw is None:
        return DEFAULT_IGNORED_DIRS
    return frozenset(name.strip() for name in raw.split(",") if name.strip())
