"""Temperature unit conversion."""

from enum import Enum


class Units(Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"

    @property
    def symbol(self) -> str:
        return self.name[0]


def convert(celsius: float, unit: Units) -> float:
    if unit is Units.FAHRENHEIT:
        return celsius * 1.8 + 32
    if unit is Units.KELVIN:
        return celsius + 273.15
    return celsius
