"""Builder: step-by-step construction of an immutable House."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class House:
    foundation: Optional[str] = None
    walls: Optional[str] = None
    roof: Optional[str] = None
    number_of_rooms: int = 0
    has_garage: bool = False
    has_swimming_pool: bool = False

    def __str__(self) -> str:
        garage = "a garage" if self.has_garage else "no garage"
        pool = "a swimming pool" if self.has_swimming_pool else "no swimming pool"
        return (
            f"House with {self.foundation} foundation, {self.walls} walls, "
            f"{self.roof} roof, {self.number_of_rooms} rooms, {garage}, {pool}"
        )


class HouseBuilder:
    """Fluent builder; every setter returns the builder."""

    def __init__(self):
        self._foundation = None
        self._walls = None
        self._roof = None
        self._number_of_rooms = 0
        self._has_garage = False
        self._has_swimming_pool = False

    def set_foundation(self, foundation: str) -> "HouseBuilder":
        self._foundation = foundation
        return self

    def set_walls(self, walls: str) -> "HouseBuilder":
        self._walls = walls
        return self

    def set_roof(self, roof: str) -> "HouseBuilder":
        self._roof = roof
        return self

    def set_number_of_rooms(self, number_of_rooms: int) -> "HouseBuilder":
        if number_of_rooms < 0:
            raise ValueError("number_of_rooms cannot be negative")
        self._number_of_rooms = number_of_rooms
        return self

    def set_garage(self, has_garage: bool) -> "HouseBuilder":
        self._has_garage = has_garage
        return self

    def set_swimming_pool(self, has_swimming_pool: bool) -> "HouseBuilder":
        self._has_swimming_pool = has_swimming_pool
        return self

    def build(self) -> House:
        return House(
            foundation=self._foundation,
            walls=self._walls,
            roof=self._roof,
            number_of_rooms=self._number_of_rooms,
            has_garage=self._has_garage,
            has_swimming_pool=self._has_swimming_pool,
        )


def main() -> None:
    house = (
        HouseBuilder()
        .set_foundation("Concrete")
        .set_walls("Brick")
        .set_roof("Shingle")
        .set_number_of_rooms(4)
        .set_garage(True)
        .set_swimming_pool(False)
        .build()
    )
    print(house)
