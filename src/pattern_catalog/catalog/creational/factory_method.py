"""Factory method: subclasses decide which vehicle a service uses."""

from abc import ABC, abstractmethod


class Vehicle(ABC):
    @abstractmethod
    def deliver(self) -> str: ...


class Car(Vehicle):
    def deliver(self) -> str:
        return "Delivering by car."


class Bike(Vehicle):
    def deliver(self) -> str:
        return "Delivering by bike."


class VehicleFactory(ABC):
    @abstractmethod
    def create_vehicle(self) -> Vehicle:
        """Factory method."""


class CarFactory(VehicleFactory):
    def create_vehicle(self) -> Vehicle:
        return Car()


class BikeFactory(VehicleFactory):
    def create_vehicle(self) -> Vehicle:
        return Bike()


class TransportService:
    def __init__(self, factory: VehicleFactory):
        self.vehicle = factory.create_vehicle()

    def start_delivery(self) -> str:
        line = self.vehicle.deliver()
        print(line)
        return line


def main() -> None:
    TransportService(CarFactory()).start_delivery()
    TransportService(BikeFactory()).start_delivery()
