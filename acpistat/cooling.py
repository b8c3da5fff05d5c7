"""Read thermal cooling devices (fans, processor throttling) from Linux sysfs."""

from dataclasses import dataclass
from pathlib import Path

from acpistat.device import collect, is_thermal_sensor
from acpistat.sysfs import (
    attribute_exists,
    read_attribute_as_integer,
    read_required_attribute,
)
from acpistat.thermal import THERMAL_ROOT


@dataclass(frozen=True, slots=True)
class CoolingState:
    current_state: int
    max_state: int


@dataclass(frozen=True, slots=True)
class CoolingDevice:
    name: str
    device_type: str
    state: CoolingState | None


def is_cooling_device(device_dir: Path) -> bool:
    return not is_thermal_sensor(device_dir) and attribute_exists(device_dir, "cur_state")


def parse_cooling_device(device_dir: Path) -> CoolingDevice:
    current_state = read_attribute_as_integer(device_dir, "cur_state")
    max_state = read_attribute_as_integer(device_dir, "max_state")
    device_type = read_required_attribute(device_dir, "type")

    # Drivers report a negative state when they cannot tell
    state = CoolingState(current_state, max_state) if current_state >= 0 else None
    return CoolingDevice(name=device_dir.name, device_type=device_type, state=state)


def get_cooling_device_info(root: Path = THERMAL_ROOT) -> list[CoolingDevice]:
    return collect(root, parse_cooling_device, is_cooling_device)
