"""Bulk queries over a sysfs device tree."""

import logging
import math
from dataclasses import fields, is_dataclass
from datetime import timedelta
from enum import Enum
from pathlib import Path

from acpistat.ac_adapter import AcAdapter, parse_ac_adapter
from acpistat.battery import Battery, parse_battery
from acpistat.cooling import CoolingDevice
from acpistat.device import DeviceKind, classify, collect
from acpistat.thermal import ThermalSensor, TripPoint, parse_thermal_sensor
from acpistat.units import Units

log = logging.getLogger(__name__)

DeviceRecord = AcAdapter | Battery | ThermalSensor


def parse_device(device_dir: Path, unit: Units = Units.CELSIUS) -> DeviceRecord | None:
    """Classify one device directory and parse it into a record.

    Returns None for directories that match no known device kind; raises
    AcpiError when a recognized device cannot be parsed.
    """
    kind = classify(device_dir)
    if kind is DeviceKind.BATTERY:
        return parse_battery(device_dir)
    if kind is DeviceKind.THERMAL_SENSOR:
        return parse_thermal_sensor(device_dir, unit)
    if kind is DeviceKind.AC_ADAPTER:
        return parse_ac_adapter(device_dir)
    return None


def query(root: Path, unit: Units = Units.CELSIUS) -> list[DeviceRecord]:
    """Parse every device under ``root``.

    A device that fails to parse is logged and left out so the rest of the
    tree is still reported. OSError from listing ``root`` propagates.
    """
    records = collect(root, lambda device_dir: parse_device(device_dir, unit))
    log.debug("Parsed %d devices under %s", len(records), root)
    return records


def record_to_dict(record: DeviceRecord | CoolingDevice | TripPoint) -> dict:
    result = {"kind": type(record).__name__}
    for f in fields(record):
        result[f.name] = _to_primitive(getattr(record, f.name))
    if isinstance(record, AcAdapter):
        result["online"] = record.online
    return result


def _to_primitive(value):
    if isinstance(value, Enum):
        return value.name.lower()
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    if isinstance(value, tuple):
        return [_to_primitive(v) for v in value]
    if is_dataclass(value):
        return {f.name: _to_primitive(getattr(value, f.name)) for f in fields(value)}
    return value
