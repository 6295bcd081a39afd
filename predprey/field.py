"""
Dense 2D occupancy grid.

The Field is the single source of truth for which organism occupies which
cell. It holds non-owning references only: organism lifetime belongs to the
simulation's live list. Each cell holds at most one organism; keeping it that
way is the caller's job (clear before place), the Field does not detect
collisions.
"""

import numpy as np
from typing import Iterator, List, Optional, Tuple, TYPE_CHECKING

from .constants import NEIGHBOR_OFFSETS
from .location import Location
from .rng import Randomizer, get_random

if TYPE_CHECKING:
    from .organism import Organism


class Field:
    """
    Rectangular grid of depth x width cells, each vacant or holding one organism.

    Locations outside the grid are a programming error and are not validated;
    numpy raises IndexError for them.
    """

    def __init__(self, depth: int, width: int, rng: Optional[Randomizer] = None):
        """
        Args:
            depth: Number of rows
            width: Number of columns
            rng: Randomizer for neighborhood shuffling (default: shared instance)
        """
        self._depth = depth
        self._width = width
        self._rng = rng if rng is not None else get_random()
        self._grid = np.empty((depth, width), dtype=object)  # filled with None

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def width(self) -> int:
        return self._width

    def place(self, organism: 'Organism', location: Location):
        """
        Put organism at location, overwriting any previous occupant.

        Args:
            organism: Organism to place
            location: Target cell (must be in bounds)
        """
        self._grid[location.row, location.col] = organism

    def clear(self, location: Location):
        """Vacate the cell at location (no-op if already vacant)"""
        self._grid[location.row, location.col] = None

    def clear_all(self):
        """Vacate every cell"""
        self._grid.fill(None)

    def get_organism_at(self, location: Location) -> Optional['Organism']:
        """
        Return the occupant of location.

        Returns:
            Organism at location, or None if the cell is vacant
        """
        return self._grid[location.row, location.col]

    def adjacent_locations(self, location: Location) -> List[Location]:
        """
        Get all in-bounds neighbors of location, in random order.

        The location itself is never included.

        Args:
            location: Center cell

        Returns:
            Shuffled list of up to 8 adjacent locations
        """
        locations = []
        for d_row, d_col in NEIGHBOR_OFFSETS:
            row = location.row + d_row
            col = location.col + d_col
            if 0 <= row < self._depth and 0 <= col < self._width:
                locations.append(Location(row, col))

        self._rng.shuffle(locations)
        return locations

    def free_adjacent_locations(self, location: Location) -> List[Location]:
        """Get adjacent locations that are currently vacant (random order)"""
        return [loc for loc in self.adjacent_locations(location)
                if self.get_organism_at(loc) is None]

    def free_adjacent_location(self, location: Location) -> Optional[Location]:
        """
        Try to find a vacant cell next to location.

        Returns:
            A free adjacent location, or None if the neighborhood is full
        """
        free = self.free_adjacent_locations(location)
        if free:
            return free[0]
        return None

    def random_adjacent_location(self, location: Location) -> Location:
        """Pick one in-bounds neighbor of location at random (occupied or not)"""
        return self.adjacent_locations(location)[0]

    def adjacent_organisms(self, location: Location) -> List['Organism']:
        """
        Get the organisms in cells adjacent to location.

        Ordered by ascending layer value; organisms on the same layer keep
        the shuffled neighborhood order.
        """
        found = []
        for loc in self.adjacent_locations(location):
            organism = self.get_organism_at(loc)
            if organism is not None:
                found.append(organism)

        return sorted(found, key=lambda o: o.get_layer_value())

    def occupants(self) -> Iterator[Tuple[Location, 'Organism']]:
        """Iterate (location, organism) over occupied cells in row-major order"""
        rows, cols = np.nonzero(self._grid != None)  # elementwise on object array
        for row, col in zip(rows, cols):
            yield Location(int(row), int(col)), self._grid[row, col]

    def occupied_count(self) -> int:
        """Number of non-vacant cells"""
        return int(np.count_nonzero(self._grid != None))
