"""
Vehicle contract with a default method and a static method.

`honk()` has a body on the base class, so every vehicle gets it for free
and only overrides it if it needs a different sound. `print_vehicle_info()`
belongs to the contract itself and is called on the class, no instance
required.
"""

from abc import ABC, abstractmethod


class Vehicle(ABC):
    """Something that can start, stop and honk."""

    @abstractmethod
    def start(self) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...

    def honk(self) -> None:
        print("Beep beep!")

    @staticmethod
    def print_vehicle_info() -> None:
        print("Vehicles are means of transportation")


class Car(Vehicle):
    """Uses the inherited `honk()`."""

    def start(self) -> None:
        print("Car is starting...")

    def stop(self) -> None:
        print("Car is stopping...")
