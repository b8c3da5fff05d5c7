"""Read attribute files from sysfs device directories."""

from pathlib import Path


class AcpiError(Exception):
    pass


class AttributeReadError(AcpiError):
    """An attribute file exists but could not be read."""


class MissingAttributeError(AttributeReadError):
    """A required attribute file does not exist."""


class AttributeParseError(AcpiError, ValueError):
    pass


class UnsupportedDeviceError(AcpiError):
    """The device lacks a recognized attribute set or reports an unknown value."""


def attribute_exists(device_dir: Path, name: str) -> bool:
    path = device_dir / name
    return path.is_file() and not path.is_symlink()


def read_attribute(device_dir: Path, name: str) -> str | None:
    """Return the trimmed contents of an attribute, or None if it is absent.

    Missing files are meaningful in sysfs (the driver does not support the
    attribute), so only a failed read of an existing file is an error.
    """
    if not attribute_exists(device_dir, name):
        return None
    path = device_dir / name
    try:
        return path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        raise AttributeReadError(f"Cannot read {path}: {e}") from e


def read_required_attribute(device_dir: Path, name: str) -> str:
    value = read_attribute(device_dir, name)
    if value is None:
        raise MissingAttributeError(f"Missing attribute {device_dir / name}")
    return value


def read_attribute_as_integer(device_dir: Path, name: str, divisor: int = 1) -> int:
    """Read a required integer attribute and divide it by ``divisor``.

    The division truncates toward zero, so ``divisor=1000`` turns micro-units
    into milli-units the same way integer counters always have.
    """
    raw = read_required_attribute(device_dir, name)
    try:
        value = int(raw)
    except ValueError as e:
        raise AttributeParseError(f"Bad integer in {device_dir / name}: {raw!r}") from e
    return truncating_div(value, divisor)


def truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    if (numerator < 0) != (denominator < 0):
        return -quotient
    return quotient
