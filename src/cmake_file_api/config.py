"""Settings for the command-line front-end.

The library itself takes explicit arguments only. The CLI fills its defaults
from ``cmake-file-api.toml`` or from ``[tool.cmake-file-api]`` in
``pyproject.toml``, whichever is found first walking up from the working
directory.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import msgspec

from cmake_file_api.errors import ConfigError
from cmake_file_api.objects import object_type_for
from cmake_file_api.serde_msgspec import StructBaseStrict, convert, describe_decode_error

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "cmake-file-api.toml"
PYPROJECT_FILENAME = "pyproject.toml"
TOOL_TABLE = "cmake-file-api"

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


class FileApiSettings(StructBaseStrict, frozen=True):
    """Defaults for CLI commands.

    Unknown keys are rejected so typos surface instead of being ignored.
    """

    build_dir: str | None = None
    client_name: str | None = None
    requests: tuple[str, ...] | None = None
    log_level: str | None = None

    def __post_init__(self) -> None:
        if self.log_level is not None and self.log_level.upper() not in _LOG_LEVELS:
            msg = f"Invalid log_level {self.log_level!r}; expected one of {sorted(_LOG_LEVELS)}."
            raise ValueError(msg)
        for name in self.requests or ():
            object_type_for(name)


def _find_in_parents(filename: str, start: Path | None = None) -> Path | None:
    path = (start or Path.cwd()).resolve()
    while True:
        candidate = path / filename
        if candidate.is_file():
            return candidate
        if path.parent == path:
            return None
        path = path.parent


def _read_toml(path: Path) -> dict[str, object]:
    try:
        payload = msgspec.toml.decode(path.read_text(encoding="utf-8"), type=object, strict=True)
    except OSError as exc:
        msg = f"Failed to read config file {path}: {exc}"
        raise ConfigError(msg) from exc
    except msgspec.DecodeError as exc:
        msg = f"Invalid TOML in {path}: {describe_decode_error(exc)}"
        raise ConfigError(msg) from exc
    if not isinstance(payload, dict):
        msg = f"Expected TOML mapping in {path}, got {type(payload).__name__}."
        raise ConfigError(msg)
    return payload


def _extract_tool_config(pyproject: Mapping[str, object]) -> Mapping[str, object] | None:
    tool = pyproject.get("tool")
    if not isinstance(tool, Mapping):
        return None
    nested = tool.get(TOOL_TABLE)
    return nested if isinstance(nested, Mapping) else None


def _decode_settings(raw: Mapping[str, object], *, location: str) -> FileApiSettings:
    try:
        return convert(raw, target_type=FileApiSettings)
    except msgspec.ValidationError as exc:
        msg = f"Config validation failed for {location}: {describe_decode_error(exc)}"
        raise ConfigError(msg) from exc


def load_settings(config_file: Path | str | None = None, *, start: Path | None = None) -> FileApiSettings:
    """Load CLI settings.

    Parameters
    ----------
    config_file
        Explicit settings file. ``pyproject.toml`` files are read from their
        ``[tool.cmake-file-api]`` table; any other file is read whole.
    start
        Directory to search upward from. Defaults to the working directory.

    Returns
    -------
    FileApiSettings
        Loaded settings, or defaults when no settings file exists.

    Raises
    ------
    ConfigError
        Raised when a settings file is unreadable, is not valid TOML, or holds
        unknown keys or values of the wrong type.
    """
    if config_file is not None:
        path = Path(config_file)
        if not path.is_file():
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)
        raw = _read_toml(path)
        if path.name == PYPROJECT_FILENAME:
            nested = _extract_tool_config(raw)
            return _decode_settings(nested or {}, location=f"{path}:tool.{TOOL_TABLE}")
        return _decode_settings(raw, location=str(path))

    config_path = _find_in_parents(CONFIG_FILENAME, start)
    if config_path is not None:
        logger.debug("Loading settings from %s", config_path)
        return _decode_settings(_read_toml(config_path), location=str(config_path))

    pyproject_path = _find_in_parents(PYPROJECT_FILENAME, start)
    if pyproject_path is not None:
        nested = _extract_tool_config(_read_toml(pyproject_path))
        if nested is not None:
            logger.debug("Loading settings from %s", pyproject_path)
            return _decode_settings(nested, location=f"{pyproject_path}:tool.{TOOL_TABLE}")
    return FileApiSettings()


__all__ = ["CONFIG_FILENAME", "FileApiSettings", "load_settings"]
