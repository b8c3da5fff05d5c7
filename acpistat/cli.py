"""Command-line presentation of acpistat records."""

import json
import sys
from datetime import timedelta
from pathlib import Path

from acpistat.ac_adapter import AcAdapter, get_ac_adapter_info
from acpistat.battery import Battery, ChargingState, get_battery_info
from acpistat.cooling import CoolingDevice, get_cooling_device_info
from acpistat.engine import record_to_dict
from acpistat.thermal import ThermalSensor, get_thermal_sensor_info
from acpistat.units import Units

SECTIONS = ("battery", "ac_adapter", "thermal", "cooling")


def format_duration(duration: timedelta) -> str:
    total = int(duration.total_seconds())
    sign = "-" if total < 0 else ""
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_battery(battery: Battery, details: bool = False) -> list[str]:
    state = battery.charging_state
    line = f"{battery.name}: {state.name.capitalize()}, {battery.percentage:.1f}%"
    if state is ChargingState.CHARGING:
        line += f", {format_duration(battery.time_remaining)} until charged"
    elif state is ChargingState.DISCHARGING:
        line += f", {format_duration(battery.time_remaining)} remaining"
    lines = [line]
    if details:
        lines.append(
            f"{battery.name}: design capacity {battery.design_capacity} mAh, "
            f"last full capacity {battery.last_full_capacity} mAh = {battery.capacity_health:.0f}%"
        )
        lines.append(f"{battery.name}: voltage {battery.voltage} mV, rate {battery.present_rate} mA")
    return lines


def format_ac_adapter(adapter: AcAdapter) -> list[str]:
    return [f"{adapter.name}: {'on-line' if adapter.online else 'off-line'}"]


def format_thermal_sensor(sensor: ThermalSensor, details: bool = False) -> list[str]:
    symbol = sensor.unit.symbol
    lines = [f"{sensor.name}: {sensor.current_temperature:.1f} degrees {symbol}"]
    if details:
        for trip in sensor.trip_points:
            lines.append(
                f"{sensor.name}: trip point {trip.index} switches to mode {trip.action_type} "
                f"at temperature {trip.temperature:.1f} degrees {symbol}"
            )
    return lines


def format_cooling_device(device: CoolingDevice) -> list[str]:
    if device.state is None:
        return [f"{device.name}: {device.device_type} no state information available"]
    return [f"{device.name}: {device.device_type} {device.state.current_state} of {device.state.max_state}"]


def cmd_battery(root: Path, details: bool = False):
    batteries = _query(get_battery_info, root)
    if not batteries:
        print("No support for device type: power_supply", file=sys.stderr)
    for battery in batteries:
        _print_lines(format_battery(battery, details))


def cmd_ac_adapter(root: Path):
    for adapter in _query(get_ac_adapter_info, root):
        _print_lines(format_ac_adapter(adapter))


def cmd_thermal(root: Path, unit: Units = Units.CELSIUS, details: bool = False):
    for sensor in _query(get_thermal_sensor_info, root, unit):
        _print_lines(format_thermal_sensor(sensor, details))


def cmd_cooling(root: Path):
    for device in _query(get_cooling_device_info, root):
        _print_lines(format_cooling_device(device))


def cmd_json(sections, power_supply_root: Path, thermal_root: Path, unit: Units = Units.CELSIUS):
    queries = {
        "battery": lambda: _query(get_battery_info, power_supply_root),
        "ac_adapter": lambda: _query(get_ac_adapter_info, power_supply_root),
        "thermal": lambda: _query(get_thermal_sensor_info, thermal_root, unit),
        "cooling": lambda: _query(get_cooling_device_info, thermal_root),
    }
    result = {
        section: [record_to_dict(record) for record in queries[section]()]
        for section in sections
    }
    print(json.dumps(result, indent=2, allow_nan=False))


def run_command(args, config):
    sections = [s for s in SECTIONS if getattr(args, s, False)] or ["battery"]
    power_supply_root = args.power_supply_root or config.paths.power_supply
    thermal_root = args.thermal_root or config.paths.thermal
    unit = Units(args.units) if args.units else config.display.unit
    details = args.details or config.display.details

    if args.json:
        cmd_json(sections, power_supply_root, thermal_root, unit)
        return

    dispatch = {
        "battery": lambda: cmd_battery(power_supply_root, details),
        "ac_adapter": lambda: cmd_ac_adapter(power_supply_root),
        "thermal": lambda: cmd_thermal(thermal_root, unit, details),
        "cooling": lambda: cmd_cooling(thermal_root),
    }
    for section in sections:
        dispatch[section]()


def _query(func, root, *args):
    try:
        return func(root, *args)
    except OSError as e:
        print(f"Error: cannot read {root} ({e.strerror or e})", file=sys.stderr)
        sys.exit(1)


def _print_lines(lines):
    for line in lines:
        print(line)
