"""Read thermal zones and their trip points from Linux sysfs."""

import itertools
import logging
from dataclasses import dataclass
from pathlib import Path

from acpistat.device import DeviceKind, collect, of_kind
from acpistat.sysfs import (
    AcpiError,
    attribute_exists,
    read_attribute,
    read_attribute_as_integer,
)
from acpistat.units import Units, convert

log = logging.getLogger(__name__)

THERMAL_ROOT = Path("/sys/class/thermal")

_MILLIDEGREES = 1000


@dataclass(frozen=True, slots=True)
class TripPoint:
    index: int
    action_type: str
    temperature: float


@dataclass(frozen=True, slots=True)
class ThermalSensor:
    name: str
    current_temperature: float
    unit: Units
    trip_points: tuple[TripPoint, ...] = ()


def read_temperature(device_dir: Path, name: str, unit: Units) -> float:
    celsius = read_attribute_as_integer(device_dir, name) / _MILLIDEGREES
    return convert(celsius, unit)


def scan_trip_points(device_dir: Path, unit: Units) -> list[TripPoint]:
    """Collect trip points 0, 1, 2, ... until the first missing or broken one.

    A malformed entry ends the sequence; later indices are never looked at.
    """
    trip_points = []
    for index in itertools.count():
        temp_name = f"trip_point_{index}_temp"
        type_name = f"trip_point_{index}_type"
        try:
            if not attribute_exists(device_dir, temp_name):
                break
            action_type = read_attribute(device_dir, type_name)
            if action_type is None:
                log.debug("%s has %s but no %s", device_dir.name, temp_name, type_name)
                break
            temperature = read_temperature(device_dir, temp_name, unit)
        except AcpiError as e:
            log.debug("Stopping trip point scan of %s: %s", device_dir.name, e)
            break
        trip_points.append(TripPoint(index=index, action_type=action_type, temperature=temperature))
    return trip_points


def parse_thermal_sensor(device_dir: Path, unit: Units = Units.CELSIUS) -> ThermalSensor:
    return ThermalSensor(
        name=device_dir.name,
        current_temperature=read_temperature(device_dir, "temp", unit),
        unit=unit,
        trip_points=tuple(scan_trip_points(device_dir, unit)),
    )


def get_thermal_sensor_info(root: Path = THERMAL_ROOT,
                            unit: Units = Units.CELSIUS) -> list[ThermalSensor]:
    return collect(root, lambda device_dir: parse_thermal_sensor(device_dir, unit),
                   of_kind(DeviceKind.THERMAL_SENSOR))
