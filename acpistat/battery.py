"""Read and normalize battery state from Linux sysfs."""

import logging
import math
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum, auto
from pathlib import Path

from acpistat.device import DeviceKind, collect, of_kind
from acpistat.sysfs import (
    AttributeParseError,
    UnsupportedDeviceError,
    attribute_exists,
    read_attribute_as_integer,
    read_required_attribute,
    truncating_div,
)

log = logging.getLogger(__name__)

POWER_SUPPLY_ROOT = Path("/sys/class/power_supply")

_SECONDS_PER_HOUR = 3600


class ReportingConvention(Enum):
    CAPACITY = ("charge_now", "charge_full", "charge_full_design")
    ENERGY = ("energy_now", "energy_full", "energy_full_design")

    @property
    def now(self) -> str:
        return self.value[0]

    @property
    def full(self) -> str:
        return self.value[1]

    @property
    def full_design(self) -> str:
        return self.value[2]


class ChargingState(Enum):
    CHARGING = auto()
    DISCHARGING = auto()
    FULL = auto()


@dataclass(frozen=True, slots=True)
class Battery:
    name: str
    remaining_capacity: int   # mAh
    present_rate: int         # mA
    voltage: int              # mV
    design_capacity: int      # mAh
    last_full_capacity: int   # mAh
    charging_state: ChargingState
    percentage: float
    time_remaining: timedelta

    @property
    def capacity_health(self) -> float:
        return _ratio_percent(self.last_full_capacity, self.design_capacity)


def detect_convention(device_dir: Path) -> ReportingConvention:
    """Decide whether a battery reports charge (µAh) or energy (µWh).

    Only a complete attribute set counts; charge is checked first.
    """
    for convention in (ReportingConvention.CAPACITY, ReportingConvention.ENERGY):
        if all(attribute_exists(device_dir, name) for name in convention.value):
            log.debug("%s reports %s", device_dir.name, convention.name.lower())
            return convention
    raise UnsupportedDeviceError(
        f"Cannot determine if {device_dir} supports energy or capacity reporting"
    )


def parse_charging_state(raw: str, device_dir: Path) -> ChargingState:
    status = raw.strip().lower()
    if status == "charging":
        return ChargingState.CHARGING
    if status == "discharging":
        return ChargingState.DISCHARGING
    if status == "full":
        return ChargingState.FULL
    raise UnsupportedDeviceError(f"Unrecognized charging state in {device_dir}: {raw!r}")


def charge_percentage(remaining: int, full: int) -> float:
    return _ratio_percent(remaining, full)


def time_to_state_change(remaining: int, full: int, present_rate: int,
                         state: ChargingState) -> timedelta:
    # rate + 1 keeps an idle battery (rate 0) from dividing by zero
    if state is ChargingState.CHARGING:
        seconds = truncating_div(_SECONDS_PER_HOUR * (full - remaining), present_rate + 1)
    elif state is ChargingState.DISCHARGING:
        seconds = truncating_div(_SECONDS_PER_HOUR * remaining, present_rate + 1)
    else:
        seconds = 0
    return timedelta(seconds=seconds)


def parse_battery(device_dir: Path) -> Battery:
    convention = detect_convention(device_dir)

    voltage = _read_counter(device_dir, "voltage_now")
    remaining = _read_counter(device_dir, convention.now)
    last_full = _read_counter(device_dir, convention.full)
    design = _read_counter(device_dir, convention.full_design)

    if convention is ReportingConvention.ENERGY:
        _require_voltage(device_dir, voltage)
        remaining //= voltage
        last_full //= voltage
        design //= voltage

    if attribute_exists(device_dir, "power_now"):
        _require_voltage(device_dir, voltage)
        power = _read_counter(device_dir, "power_now")
        # match the capacity scaling: mW / mV for energy, mA for charge
        if convention is ReportingConvention.ENERGY:
            present_rate = power // voltage
        else:
            present_rate = power * 1000 // voltage
    else:
        present_rate = _read_counter(device_dir, "current_now")

    state = parse_charging_state(read_required_attribute(device_dir, "status"), device_dir)

    return Battery(
        name=device_dir.name,
        remaining_capacity=remaining,
        present_rate=present_rate,
        voltage=voltage,
        design_capacity=design,
        last_full_capacity=last_full,
        charging_state=state,
        percentage=charge_percentage(remaining, last_full),
        time_remaining=time_to_state_change(remaining, last_full, present_rate, state),
    )


def get_battery_info(root: Path = POWER_SUPPLY_ROOT) -> list[Battery]:
    return collect(root, parse_battery, of_kind(DeviceKind.BATTERY))


def _read_counter(device_dir: Path, name: str) -> int:
    value = read_attribute_as_integer(device_dir, name)
    if value < 0:
        raise AttributeParseError(f"Negative reading in {device_dir / name}: {value}")
    return value // 1000


def _require_voltage(device_dir: Path, voltage: int):
    if voltage == 0:
        raise UnsupportedDeviceError(f"{device_dir} reports zero voltage")


def _ratio_percent(part: int, whole: int) -> float:
    if whole == 0:
        return math.nan if part == 0 else math.copysign(math.inf, part)
    return part * 100 / whole
