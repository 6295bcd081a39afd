"""
Organism lifecycle base class.

An Organism owns its own age, aliveness and location, and registers itself
in a shared Field. Concrete species supply the maximum age, a factory for
offspring, and the per-tick behavior.

Lifecycle:
    construction -> Alive (placed in the field)
    increment_age() past max age, or set_dead() -> Dead (terminal, field cell vacated)
"""

from abc import abstractmethod
from typing import List, Optional

from .actor import Actor
from .constants import DEFAULT_LAYER
from .field import Field
from .location import Location
from .rng import Randomizer, get_random


class Organism(Actor):
    """
    Abstract individual living in a Field.

    Invariants:
        - location and field are set iff the organism is alive
        - the field cell at location references this organism
        - once dead, always dead

    Attributes:
        LAYER: Class-level layer value; species override to change sensing order
    """

    LAYER = DEFAULT_LAYER

    def __init__(self, random_age: bool, field: Field, location: Location,
                 rng: Optional[Randomizer] = None):
        """
        Create an organism and place it at location in field.

        Args:
            random_age: If True, start at a random age in [0, max age); otherwise 0
            field: Field to occupy
            location: Cell to occupy (any previous occupant is overwritten)
            rng: Randomizer for age sampling and behavior (default: shared instance)
        """
        self._rng = rng if rng is not None else get_random()
        self._layer = self.LAYER
        if random_age:
            self._age = self._rng.next_int(self.get_max_age())
        else:
            self._age = 0
        self._alive = True
        self._field: Optional[Field] = field
        self._location: Optional[Location] = None
        self.set_location(location)

    @abstractmethod
    def act(self, new_organisms: List['Organism']):
        """
        Make this organism do whatever it does in one tick.

        Only called while the organism is active. Implementations must call
        increment_age() and append any offspring to new_organisms.

        Args:
            new_organisms: Collector for organisms born this tick
        """

    @abstractmethod
    def get_max_age(self) -> int:
        """Maximum age for this species (constant per species)"""

    @abstractmethod
    def create_organism(self, random_age: bool, field: Field, location: Location) -> 'Organism':
        """
        Create a new organism of the same species.

        Args:
            random_age: If True, the newcomer gets a random age
            field: Field to occupy
            location: Cell to occupy

        Returns:
            The new organism, already placed in field
        """

    @property
    def age(self) -> int:
        return self._age

    @property
    def location(self) -> Optional[Location]:
        return self._location

    @property
    def field(self) -> Optional[Field]:
        return self._field

    @property
    def rng(self) -> Randomizer:
        return self._rng

    def is_alive(self) -> bool:
        return self._alive

    def is_active(self) -> bool:
        """An organism stays active for as long as it is alive"""
        return self.is_alive()

    def get_layer_value(self) -> int:
        return self._layer

    def set_dead(self):
        """
        Mark this organism dead and remove it from the field.

        Safe to call more than once; only the first call touches the field.
        """
        self._alive = False
        if self._location is not None:
            self._field.clear(self._location)
            self._location = None
            self._field = None

    def set_location(self, new_location: Location):
        """
        Move to new_location in the current field.

        The old cell is cleared before the new one is written.

        Args:
            new_location: Destination cell
        """
        if self._location is not None:
            self._field.clear(self._location)
        self._location = new_location
        self._field.place(self, new_location)

    def increment_age(self):
        """Age by one tick. Dies once age exceeds the species maximum."""
        self._age += 1
        if self._age > self.get_max_age():
            self.set_dead()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(age={self._age}, alive={self._alive}, "
                f"location={self._location})")
