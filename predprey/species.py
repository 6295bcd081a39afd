"""
Concrete species: Rabbit (prey) and Fox (predator).

Species parameters come from a SpeciesConfig loaded from the data pack. All
individuals of a species share the same config object, so max age, breeding
and feeding parameters are constant per species.
"""

from typing import Dict, List, Optional, Type

from .data_types import SpeciesConfig
from .field import Field
from .location import Location
from .organism import Organism
from .rng import Randomizer


class Animal(Organism):
    """
    Organism driven by a SpeciesConfig, with shared breeding rules.

    Attributes:
        species_id: Species definition ID (e.g., "rabbit")
    """

    def __init__(self, random_age: bool, field: Field, location: Location,
                 config: SpeciesConfig, rng: Optional[Randomizer] = None):
        # Config must be set before the base constructor samples an age
        self._config = config
        super().__init__(random_age, field, location, rng)
        self._layer = config.layer

    @property
    def species_id(self) -> str:
        return self._config.species_id

    @property
    def config(self) -> SpeciesConfig:
        return self._config

    def get_max_age(self) -> int:
        return self._config.max_age

    def create_organism(self, random_age: bool, field: Field, location: Location) -> 'Animal':
        return type(self)(random_age, field, location, self._config, self._rng)

    def can_breed(self) -> bool:
        return self._age >= self._config.breeding.breeding_age

    def breed(self) -> int:
        """
        Decide how many young to produce this tick.

        Returns:
            Litter size (0 if too young or the breeding roll fails)
        """
        breeding = self._config.breeding
        if self.can_breed() and self._rng.next_double() <= breeding.breeding_probability:
            return self._rng.next_int(breeding.max_litter_size) + 1
        return 0

    def give_birth(self, new_organisms: List[Organism]):
        """
        Place newborns in free adjacent cells.

        Young that find no free cell are not born.

        Args:
            new_organisms: Collector for newborns
        """
        free = self._field.free_adjacent_locations(self._location)
        births = self.breed()
        for location in free[:births]:
            young = self.create_organism(False, self._field, location)
            new_organisms.append(young)

    def move_or_die(self, new_location: Optional[Location]):
        """Move to new_location, or die of overcrowding when there is nowhere to go"""
        if new_location is not None:
            self.set_location(new_location)
        else:
            self.set_dead()


class Rabbit(Animal):
    """Prey: ages, breeds and wanders to a free neighboring cell"""

    def act(self, new_organisms: List[Organism]):
        self.increment_age()
        if self.is_alive():
            self.give_birth(new_organisms)
            self.move_or_die(self._field.free_adjacent_location(self._location))


class Fox(Animal):
    """
    Predator: ages, gets hungry, breeds, and hunts adjacent prey.

    A fox eating prey takes over the prey's cell. A fox whose food level
    drops to zero starves.
    """

    def __init__(self, random_age: bool, field: Field, location: Location,
                 config: SpeciesConfig, rng: Optional[Randomizer] = None):
        super().__init__(random_age, field, location, config, rng)
        food_value = self.food_value
        if random_age:
            self._food_level = self._rng.next_int(food_value)
        else:
            self._food_level = food_value

    @property
    def food_value(self) -> int:
        return self._config.feeding.food_value

    @property
    def food_level(self) -> int:
        return self._food_level

    def act(self, new_organisms: List[Organism]):
        self.increment_age()
        self.increment_hunger()
        if self.is_alive():
            self.give_birth(new_organisms)
            new_location = self.find_food()
            if new_location is None:
                new_location = self._field.free_adjacent_location(self._location)
            self.move_or_die(new_location)

    def increment_hunger(self):
        """Burn one unit of food. Starves at zero."""
        self._food_level -= 1
        if self._food_level <= 0:
            self.set_dead()

    def find_food(self) -> Optional[Location]:
        """
        Eat the first edible neighbor, checked in layer order.

        Returns:
            Cell of the eaten prey, or None if nothing edible is adjacent
        """
        diet = self._config.feeding.diet
        for organism in self._field.adjacent_organisms(self._location):
            if getattr(organism, 'species_id', None) in diet and organism.is_alive():
                prey_location = organism.location
                organism.set_dead()
                self._food_level = self.food_value
                return prey_location
        return None


SPECIES_KINDS: Dict[str, Type[Animal]] = {
    'rabbit': Rabbit,
    'fox': Fox,
}


def create_species(config: SpeciesConfig, random_age: bool, field: Field,
                   location: Location, rng: Optional[Randomizer] = None) -> Animal:
    """
    Create an individual of the species described by config.

    Args:
        config: Species definition (kind selects the class)
        random_age: If True, the individual gets a random age
        field: Field to occupy
        location: Cell to occupy
        rng: Randomizer (default: shared instance)

    Returns:
        New Animal placed in field

    Raises:
        ValueError: If config.kind is not a known species kind
    """
    cls = SPECIES_KINDS.get(config.kind)
    if cls is None:
        raise ValueError(f"Unknown species kind '{config.kind}' for {config.species_id}")
    return cls(random_age, field, location, config, rng)
