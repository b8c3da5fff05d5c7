"""Configuration loading from JSON files."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from acpistat.battery import POWER_SUPPLY_ROOT
from acpistat.thermal import THERMAL_ROOT
from acpistat.units import Units

log = logging.getLogger(__name__)
_USER_CONFIG = Path.home() / ".config" / "acpistat" / "config.json"
_SYSTEM_CONFIG = Path("/etc/acpistat/config.json")

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass
class PathsConfig:
    power_supply: Path = POWER_SUPPLY_ROOT
    thermal: Path = THERMAL_ROOT

    def __post_init__(self):
        self.power_supply = Path(self.power_supply)
        self.thermal = Path(self.thermal)


@dataclass
class DisplayConfig:
    units: str = "celsius"
    details: bool = False

    def __post_init__(self):
        valid = [u.value for u in Units]
        if self.units not in valid:
            raise ValueError(f"display.units must be one of {', '.join(valid)}, got {self.units!r}")

    @property
    def unit(self) -> Units:
        return Units(self.units)


@dataclass
class LoggingConfig:
    level: str = "warning"

    def __post_init__(self):
        if self.level.lower() not in _LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {', '.join(_LOG_LEVELS)}, got {self.level!r}")


@dataclass
class Config:
    paths: PathsConfig = field(default_factory=PathsConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: Path | None = None) -> Config:
    if path is not None:
        candidates = [path]
    else:
        candidates = [_USER_CONFIG, _SYSTEM_CONFIG]

    for candidate in candidates:
        if candidate.is_file():
            log.info("Loading config from %s", candidate)
            data = json.loads(candidate.read_text())
            return _parse(data)

    log.info("No config file found, using defaults")
    return Config()


def _parse(data: dict) -> Config:
    paths_data = data.get("paths", {})
    display_data = data.get("display", {})
    logging_data = data.get("logging", {})

    return Config(
        paths=PathsConfig(**paths_data),
        display=DisplayConfig(**display_data),
        logging=LoggingConfig(**logging_data),
    )
