"""Classify sysfs device directories."""

import logging
from enum import Enum, auto
from pathlib import Path

from acpistat.sysfs import AcpiError, attribute_exists, read_attribute

log = logging.getLogger(__name__)


class DeviceKind(Enum):
    BATTERY = auto()
    AC_ADAPTER = auto()
    THERMAL_SENSOR = auto()


def is_thermal_sensor(device_dir: Path) -> bool:
    return attribute_exists(device_dir, "temp")


def classify(device_dir: Path) -> DeviceKind | None:
    device_type = read_attribute(device_dir, "type")
    if device_type is not None and device_type.lower() == "battery":
        kind = DeviceKind.BATTERY
    elif is_thermal_sensor(device_dir):
        kind = DeviceKind.THERMAL_SENSOR
    elif device_type is not None or attribute_exists(device_dir, "online"):
        kind = DeviceKind.AC_ADAPTER
    else:
        log.debug("Cannot classify %s", device_dir)
        return None
    log.debug("Classified %s as %s", device_dir.name, kind.name)
    return kind


def iter_device_dirs(root: Path) -> list[Path]:
    """Return the device directories directly under ``root``, sorted by name.

    Raises OSError if ``root`` cannot be listed.
    """
    return [entry for entry in sorted(root.iterdir()) if entry.is_dir()]


def collect(root: Path, parse, select=None) -> list:
    """Parse the devices under ``root`` that ``select`` accepts.

    A device whose parse raises AcpiError is logged and left out so the rest
    of the tree is still reported; a parse returning None is dropped too.
    OSError from listing ``root`` propagates.
    """
    records = []
    for device_dir in iter_device_dirs(root):
        try:
            if select is not None and not select(device_dir):
                continue
            record = parse(device_dir)
        except AcpiError as e:
            log.warning("Skipping %s: %s", device_dir.name, e)
            continue
        if record is not None:
            records.append(record)
    return records


def of_kind(kind: DeviceKind):
    return lambda device_dir: classify(device_dir) is kind
