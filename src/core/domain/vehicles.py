"""Vehicle and Car value types.

`Car` composes a `Vehicle` instead of inheriting from it: make/year live in
the inner vehicle and the car only adds its model designation.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vehicle:
    """A named, dated transport entity."""

    make: str
    year: int

    def get_info(self) -> str:
        return f"Make: {self.make}, Year: {self.year}"


@dataclass(frozen=True, init=False)
class Car:
    """A vehicle with a model designation.

    Built as `Car(make, year, model)`; `get_info` is answered by the wrapped
    vehicle, `get_model` by the car itself.
    """

    vehicle: Vehicle
    model: str

    def __init__(self, make: str, year: int, model: str) -> None:
        # frozen dataclass: bypass __setattr__ during construction only.
        object.__setattr__(self, "vehicle", Vehicle(make, year))
        object.__setattr__(self, "model", model)

    @property
    def make(self) -> str:
        return self.vehicle.make

    @property
    def year(self) -> int:
        return self.vehicle.year

    def get_info(self) -> str:
        return self.vehicle.get_info()

    def get_model(self) -> str:
        return f"Model: {self.model}"
