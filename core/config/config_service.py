"""Typed, layered configuration loader with precedence handling.

Layer-Reihenfolge (später gewinnt):
    0. embedded defaults (``_DEFAULTS``)
    1. packaged ``core/config/defaults.ini``
    2. environment (``DAYSTRIP_<SECTION>__<KEY>``)
    3. machine ``core/config/config.ini`` (optional)
    4. user config (XDG / APPDATA)
"""
from __future__ import annotations

import os
import configparser
from dataclasses import dataclass, fields
from pathlib import Path
from threading import RLock
from typing import Any, Callable, Dict, Tuple

# --------------------------------------------------------------------------- #
#  Paths & default definitions
# --------------------------------------------------------------------------- #

CONFIG_DIR = Path(__file__).resolve().parent
PACKAGE_ROOT = CONFIG_DIR.parent.parent
DEFAULTS_INI = CONFIG_DIR / "defaults.ini"
MACHINE_INI = CONFIG_DIR / "config.ini"

ENV_PREFIX = "DAYSTRIP_"


_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "Daystrip": {
        "options_prefix": "tribe_ext_daystrip",
        "target_section": "display",
        "target_page": "tribeEventsDateFormatSettingsTitle",
    },
    "Logging": {
        "db_path": (Path.home() / ".daystrip" / "logs.db").as_posix(),
        "persist": "true",
    },
    "I18n": {
        "language": "en",
        "labels_tsv": (PACKAGE_ROOT / "core" / "i18n" / "labels.tsv").as_posix(),
    },
}


# --------------------------------------------------------------------------- #
#  Datamodels
# --------------------------------------------------------------------------- #

@dataclass
class DaystripConfig:
    options_prefix: str = "tribe_ext_daystrip"
    target_section: str = "display"
    target_page: str = "tribeEventsDateFormatSettingsTitle"


@dataclass
class LoggingConfig:
    db_path: Path
    persist: bool = True


@dataclass
class I18nConfig:
    labels_tsv: Path
    language: str = "en"


# --------------------------------------------------------------------------- #
#  Helpers
# --------------------------------------------------------------------------- #

def _cp_to_dict(cp: configparser.ConfigParser) -> Dict[str, Dict[str, Any]]:
    data: Dict[str, Dict[str, Any]] = {}
    for section in cp.sections():
        data[section] = {k: v for k, v in cp.items(section)}
    return data


def _read_ini(path: Path) -> Dict[str, Dict[str, Any]]:
    cp = configparser.ConfigParser()
    cp.read(path, encoding="utf-8")
    return _cp_to_dict(cp)


def _apply(target: Dict[str, Dict[str, Any]], source: Dict[str, Dict[str, Any]],
           layer: str, origin: str,
           sources: Dict[Tuple[str, str], Dict[str, str]]) -> None:
    for section, items in source.items():
        sec = target.setdefault(section, {})
        for key, value in items.items():
            sec[key] = value
            sources[(section, key)] = {"layer": layer, "source": origin}


def _cast(value: Any, typ: Any) -> Any:
    if typ in (Path, "Path"):
        return Path(str(value)).expanduser()
    if typ in (bool, "bool"):
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in {"1", "true", "yes", "on"}
    if typ in (int, "int"):
        return int(value)
    if typ in (float, "float"):
        return float(value)
    return str(value)


def _build_dataclass(cls: type, data: Dict[str, Any]) -> Any:
    kwargs = {}
    for field in fields(cls):
        if field.name not in data:
            continue
        kwargs[field.name] = _cast(data[field.name], field.type)
    return cls(**kwargs)


def _env_overlays() -> Dict[str, Dict[str, Any]]:
    result: Dict[str, Dict[str, Any]] = {}
    for env_key, value in os.environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        remainder = env_key[len(ENV_PREFIX):]
        parts = remainder.split("__", 1)
        if len(parts) != 2:
            continue
        section, key = parts
        # "I18N" -> "I18n", "DAYSTRIP" -> "Daystrip"
        section = section.capitalize()
        key = key.lower()
        result.setdefault(section, {})[key] = value
    return result


def _user_config_path() -> Path:
    if os.name == "nt":
        appdata = os.environ.get("APPDATA") or (Path.home() / "AppData" / "Roaming")
        return Path(appdata) / "Daystrip" / "config.ini"
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")) / "daystrip" / "config.ini"


# --------------------------------------------------------------------------- #
#  ConfigService
# --------------------------------------------------------------------------- #


class ConfigService:
    """Facade merging layered configuration with type safety."""

    def __init__(self) -> None:
        self._lock = RLock()
        self.reload()

    # ------------------------------------------------------------------ #
    def reload(self) -> None:
        with self._lock:
            merged: Dict[str, Dict[str, Any]] = {}
            sources: Dict[Tuple[str, str], Dict[str, str]] = {}

            # Layer 0: embedded defaults
            _apply(merged, _DEFAULTS, "code", "embedded", sources)

            # Layer 1: defaults.ini
            if DEFAULTS_INI.exists():
                _apply(merged, _read_ini(DEFAULTS_INI), "defaults.ini", str(DEFAULTS_INI), sources)

            # Layer 2: environment variables
            _apply(merged, _env_overlays(), "env", "os.environ", sources)

            # Layer 3: machine config
            if MACHINE_INI.exists():
                _apply(merged, _read_ini(MACHINE_INI), "machine", str(MACHINE_INI), sources)

            # Layer 4: user overrides
            user_ini = _user_config_path()
            if user_ini.exists():
                _apply(merged, _read_ini(user_ini), "user", str(user_ini), sources)

            self._merged = merged
            self._sources = sources

            self.daystrip = _build_dataclass(DaystripConfig, merged.get("Daystrip", {}))
            self.logging = _build_dataclass(LoggingConfig, merged.get("Logging", {}))
            self.i18n = _build_dataclass(I18nConfig, merged.get("I18n", {}))

    # ------------------------------------------------------------------ #
    def get(self, section: str, key: str, *, cast: Callable[[Any], Any] | type = str) -> Any:
        val = self._merged.get(section, {}).get(key)
        if val is None:
            return None
        if isinstance(cast, type):
            return _cast(val, cast)
        return cast(val)

    def meta_source(self, section: str, key: str) -> Dict[str, str] | None:
        return self._sources.get((section, key))


# Global singleton
config_service = ConfigService()
