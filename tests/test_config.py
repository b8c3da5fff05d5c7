import json
import logging
from pathlib import Path

import pytest

from acpistat.config import Config, DisplayConfig, LoggingConfig, load_config
from acpistat.units import Units

log = logging.getLogger(__name__)


def test_defaults():
    cfg = Config()
    assert cfg.paths.power_supply == Path("/sys/class/power_supply")
    assert cfg.paths.thermal == Path("/sys/class/thermal")
    assert cfg.display.units == "celsius"
    assert cfg.display.unit is Units.CELSIUS
    assert cfg.display.details is False
    assert cfg.logging.level == "warning"


def test_load_from_file(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({
        "paths": {
            "power_supply": str(tmp_path / "power_supply"),
        },
        "display": {
            "units": "kelvin",
            "details": True
        }
    }))
    cfg = load_config(config_file)
    assert cfg.paths.power_supply == tmp_path / "power_supply"
    assert isinstance(cfg.paths.power_supply, Path)
    assert cfg.display.unit is Units.KELVIN
    assert cfg.display.details is True
    # Unset values keep defaults
    assert cfg.paths.thermal == Path("/sys/class/thermal")
    assert cfg.logging.level == "warning"
    log.info("Loaded config: units=%s", cfg.display.units)


def test_load_missing_file_returns_defaults(tmp_path):
    cfg = load_config(tmp_path / "nonexistent.json")
    assert cfg.display.units == "celsius"


def test_empty_file(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text("{}")
    cfg = load_config(config_file)
    assert cfg.logging.level == "warning"


def test_invalid_units():
    with pytest.raises(ValueError, match="display.units must be one of"):
        DisplayConfig(units="rankine")


def test_invalid_log_level():
    with pytest.raises(ValueError, match="logging.level must be one of"):
        LoggingConfig(level="loud")


def test_log_level_case_insensitive():
    assert LoggingConfig(level="DEBUG").level == "DEBUG"


def test_unknown_key_rejected(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"display": {"colour": True}}))
    with pytest.raises(TypeError):
        load_config(config_file)
