"""Read AC adapter state from Linux sysfs."""

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

from acpistat.battery import POWER_SUPPLY_ROOT
from acpistat.device import DeviceKind, collect, of_kind
from acpistat.sysfs import UnsupportedDeviceError, read_required_attribute


class AdapterStatus(Enum):
    ONLINE = auto()
    OFFLINE = auto()


@dataclass(frozen=True, slots=True)
class AcAdapter:
    name: str
    status: AdapterStatus

    @property
    def online(self) -> bool:
        return self.status is AdapterStatus.ONLINE


def parse_ac_adapter(device_dir: Path) -> AcAdapter:
    online = read_required_attribute(device_dir, "online").lower()
    if online == "1":
        status = AdapterStatus.ONLINE
    elif online == "0":
        status = AdapterStatus.OFFLINE
    else:
        raise UnsupportedDeviceError(f"Invalid contents in {device_dir / 'online'}: {online!r}")
    return AcAdapter(name=device_dir.name, status=status)


def get_ac_adapter_info(root: Path = POWER_SUPPLY_ROOT) -> list[AcAdapter]:
    return collect(root, parse_ac_adapter, of_kind(DeviceKind.AC_ADAPTER))
