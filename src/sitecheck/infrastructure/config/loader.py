"""TOML profile loader.

A profile file holds up to two tables, [validator] and [prober], each
mapping onto the matching configuration dataclass. Nested tables and
arrays of tables map onto nested dataclasses; absent keys keep their
defaults.

Example profile:
    [validator]
    document = "dist/index.html"
    deprecated_names = ["aleah", "zenbot"]

    [validator.meta]
    lang = "en"

    [[prober.viewports]]
    name = "Phone"
    width = 375
    height = 667
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import fields, is_dataclass
from typing import TYPE_CHECKING, Any, get_args, get_origin, get_type_hints

from sitecheck.domain.exceptions.config import ConfigError
from sitecheck.domain.model.configuration import ProberConfig, ValidatorConfig

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_TABLES: dict[str, type] = {
    "validator": ValidatorConfig,
    "prober": ProberConfig,
}


def read_profile(path: Path) -> dict[str, Any]:
    """Parse a profile file and check its top-level tables.

    Raises:
        ConfigError: If the file is unreadable, not TOML, or has unknown tables
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(str(path), e.strerror or str(e)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(str(path), str(e)) from e

    unknown = sorted(set(data) - set(_TABLES))
    if unknown:
        raise ConfigError(str(path), f"unknown table(s): {', '.join(unknown)}")
    logger.debug("profile %s: tables %s", path, sorted(data))
    return data


def load_validator_config(path: Path | None) -> ValidatorConfig:
    """ValidatorConfig from the [validator] table, defaults if path is None.

    Raises:
        ConfigError: If the profile is invalid
    """
    if path is None:
        return ValidatorConfig()
    return build(ValidatorConfig, _table(path, "validator"), source=str(path), where="validator")


def load_prober_config(path: Path | None) -> ProberConfig:
    """ProberConfig from the [prober] table, defaults if path is None.

    Raises:
        ConfigError: If the profile is invalid
    """
    if path is None:
        return ProberConfig()
    return build(ProberConfig, _table(path, "prober"), source=str(path), where="prober")


def _table(path: Path, name: str) -> dict[str, Any]:
    table = read_profile(path).get(name, {})
    if not isinstance(table, dict):
        raise ConfigError(str(path), f"'{name}' must be a table")
    return table


def build[T](cls: type[T], table: dict[str, Any], *, source: str, where: str) -> T:
    """Construct dataclass cls from a TOML table.

    Args:
        cls: Target dataclass
        table: Parsed TOML table
        source: Profile name for error messages
        where: Dotted key path of table for error messages

    Returns:
        Instance with table values over field defaults

    Raises:
        ConfigError: On unknown keys, wrong types or violated invariants
    """
    names = {f.name for f in fields(cls)}  # type: ignore[arg-type]
    unknown = sorted(set(table) - names)
    if unknown:
        raise ConfigError(source, f"unknown key(s) in [{where}]: {', '.join(unknown)}")

    hints = get_type_hints(cls)
    kwargs = {
        key: _coerce(value, hints[key], source=source, where=f"{where}.{key}")
        for key, value in table.items()
    }
    try:
        return cls(**kwargs)
    except (TypeError, ValueError) as e:
        raise ConfigError(source, f"[{where}] {e}") from e


def _coerce(value: Any, hint: Any, *, source: str, where: str) -> Any:
    def wrong(expected: str) -> ConfigError:
        return ConfigError(source, f"{where} must be {expected}, got {type(value).__name__}")

    if is_dataclass(hint):
        if not isinstance(value, dict):
            raise wrong("a table")
        return build(hint, value, source=source, where=where)

    if get_origin(hint) is tuple:
        if not isinstance(value, list):
            raise wrong("an array")
        (item_hint, _ellipsis) = get_args(hint)
        return tuple(
            _coerce(item, item_hint, source=source, where=f"{where}[{i}]") for i, item in enumerate(value)
        )

    if hint is int:
        # TOML booleans are ints to Python
        if isinstance(value, bool) or not isinstance(value, int):
            raise wrong("an integer")
        return value
    if hint is str:
        if not isinstance(value, str):
            raise wrong("a string")
        return value

    raise ConfigError(source, f"{where} cannot be set from a profile")
