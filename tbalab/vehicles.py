"""Vehicles, cars and trucks, with a showcase of their life cycle."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import List, Optional, Sequence

FUEL_PRICE = 40.0


def _format_number(value: float) -> str:
    return f"{value:g}"


@dataclass
class Vehicle:
    """A vehicle with a fuel tank (litres) and a consumption rate (litres per 100 km)."""

    id: int = 0
    brand: str = ""
    model: str = ""
    color: str = ""
    fuel_capacity: float = 0.0
    consumption_rate: float = 0.0

    def assigned_copy(self) -> Vehicle:
        """Return a copy whose brand is marked as assigned."""
        return replace(self, brand=f"{self.brand} assigned")

    def describe_shifted(self) -> str:
        """Return the vehicle's fields, tab-indented, followed by a blank line."""
        return (
            f"\tid: {self.id}\n"
            f"\tbrand: {self.brand}\n"
            f"\tmodel: {self.model}\n"
            f"\tcolor: {self.color}\n"
            f"\tfuel capacity: {_format_number(self.fuel_capacity)}\n"
            f"\tconsumption rate: {_format_number(self.consumption_rate)}\n\n"
        )

    def driving_range(self) -> float:
        """Return the distance in km on a full tank, or 0 without consumption."""
        if self.consumption_rate > 0:
            return self.fuel_capacity / self.consumption_rate * 100.0
        return 0.0

    def _kinds(self) -> List[str]:
        return [cls.__name__ for cls in reversed(type(self).__mro__) if issubclass(cls, Vehicle)]

    def _constructed(self) -> str:
        return "".join(
            f"{kind} #{self.id} {self.brand} constructed.\n\n" for kind in self._kinds()
        )

    def _destructed(self) -> str:
        return "".join(
            f"~ {kind} #{self.id} {self.brand} destructed.\n\n"
            for kind in reversed(self._kinds())
        )


@dataclass
class Car(Vehicle):
    """A passenger car."""


@dataclass
class Truck(Vehicle):
    """A truck that also has a carrying capacity."""

    carry_capacity: float = 0.0

    def transportation_cost(self, fuel_price: float = FUEL_PRICE) -> float:
        """Return the fuel cost per km per unit of capacity, or -1 without capacity."""
        if self.carry_capacity > 0:
            return self.consumption_rate / 100.0 * fuel_price / self.carry_capacity
        return -1.0


def showcase() -> str:
    """Return the log of building, copying, printing and discarding sample vehicles."""
    cars = [
        Car(1, "Wolkswagen", "Tuareg", "Brown", 70.0, 5.0),
        Car(2, "Porsche", "Cayenne", "Black", 75.0, 9.4),
        Car(3, "Audi", "R8", "White", 60.0, 12.0),
    ]
    trucks = [
        Truck(1, "Tesla", "Cybertruck", "Gray", 100.0, 5.0, 10.0),
        Truck(2, "FAW", "J6 CA3250", "Black", 110.0, 11.0, 6.0),
        Truck(3, "KamAZ", "43118", "Orange", 130.0, 3.0, 7.0),
    ]
    out: List[str] = [vehicle._constructed() for vehicle in (*cars, *trucks)]

    out.extend(Car()._constructed() for _ in cars)
    stored_cars = []
    for car in cars:
        out.append("assigning...\n")
        stored_cars.append(car.assigned_copy())

    out.extend(Truck()._constructed() for _ in trucks)
    stored_trucks = []
    for truck in trucks:
        out.append("assigning...\n")
        stored_trucks.append(truck.assigned_copy())

    for car in stored_cars:
        out.append(car.describe_shifted())
        out.append(f"\tdriving range: {_format_number(car.driving_range())}\n\n")
    for truck in stored_trucks:
        out.append(truck.describe_shifted())
        out.append(
            f"\ttransportation_cost: {_format_number(truck.transportation_cost())}\n\n"
        )

    out.extend(vehicle._destructed() for vehicle in stored_trucks)
    out.extend(vehicle._destructed() for vehicle in stored_cars)
    out.extend(vehicle._destructed() for vehicle in reversed([*cars, *trucks]))
    return "".join(out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the vehicle showcase."""
    sys.stdout.write(showcase())
    return 0


if __name__ == "__main__":
    sys.exit(main())