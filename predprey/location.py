"""
Grid coordinate value type.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """
    Immutable (row, col) position in a Field.

    Equality and hashing are by value, so locations can be used as dict keys
    and compared across calls.
    """
    row: int
    col: int

    def __post_init__(self):
        if self.row < 0 or self.col < 0:
            raise ValueError(f"Location ({self.row}, {self.col}) has a negative coordinate")

    def __str__(self) -> str:
        return f"{self.row},{self.col}"
