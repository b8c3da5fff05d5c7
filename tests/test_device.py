import logging

import pytest

from acpistat.device import DeviceKind, classify, collect, is_thermal_sensor, iter_device_dirs, of_kind
from acpistat.sysfs import UnsupportedDeviceError

log = logging.getLogger(__name__)


def test_classify_battery(make_device):
    assert classify(make_device("BAT0", type="Battery")) is DeviceKind.BATTERY


def test_classify_battery_case_insensitive(make_device):
    assert classify(make_device("BAT1", type="  BATTERY ")) is DeviceKind.BATTERY


def test_classify_thermal_sensor(make_device):
    device = make_device("thermal_zone0", type="x86_pkg_temp", temp="45000")
    assert classify(device) is DeviceKind.THERMAL_SENSOR
    assert is_thermal_sensor(device) is True


def test_classify_mains(make_device):
    assert classify(make_device("ACAD", type="Mains", online="1")) is DeviceKind.AC_ADAPTER


def test_classify_other_type_is_adapter(make_device):
    assert classify(make_device("ucsi-source-psy", type="USB")) is DeviceKind.AC_ADAPTER


def test_classify_online_without_type(make_device):
    """An adapter-shaped directory without type is never a battery."""
    kind = classify(make_device("AC", online="1"))
    assert kind is not DeviceKind.BATTERY
    assert kind is DeviceKind.AC_ADAPTER


def test_classify_battery_wins_over_temp(make_device):
    assert classify(make_device("BAT0", type="Battery", temp="30000")) is DeviceKind.BATTERY


def test_classify_unknown(make_device):
    assert classify(make_device("hwmon0", name="acpitz")) is None


def test_iter_device_dirs_sorted(tmp_path):
    for name in ("BAT1", "ACAD", "BAT0"):
        (tmp_path / name).mkdir()
    (tmp_path / "uevent").write_text("stray file\n")
    assert [p.name for p in iter_device_dirs(tmp_path)] == ["ACAD", "BAT0", "BAT1"]


def test_iter_device_dirs_follows_symlinks(tmp_path):
    target = tmp_path / "devices" / "BAT0"
    target.mkdir(parents=True)
    root = tmp_path / "class"
    root.mkdir()
    (root / "BAT0").symlink_to(target)
    assert [p.name for p in iter_device_dirs(root)] == ["BAT0"]


def test_iter_device_dirs_missing_root(tmp_path):
    with pytest.raises(OSError):
        iter_device_dirs(tmp_path / "nope")


def test_collect_skips_failures(tmp_path, make_device, caplog):
    make_device("AC", type="Mains", online="1")
    make_device("BAT0", type="Battery")
    make_device("hwmon0", name="coretemp")

    def parse(device_dir):
        if device_dir.name == "BAT0":
            raise UnsupportedDeviceError("no convention")
        return device_dir.name

    with caplog.at_level(logging.WARNING, logger="acpistat.device"):
        assert collect(tmp_path, parse, of_kind(DeviceKind.AC_ADAPTER)) == ["AC"]
        assert collect(tmp_path, parse) == ["AC", "hwmon0"]
    assert "Skipping BAT0: no convention" in caplog.text
