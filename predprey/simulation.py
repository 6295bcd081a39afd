"""
Predator-prey simulation kernel.

Main simulation class that owns the live organism list, populates the field,
and drives the tick loop.

Tick contract:
    - every organism active at the moment its turn comes acts exactly once
    - organisms act in list order and see the field as left by earlier actors
    - organisms born during a tick do not act until the next tick
    - organisms that became inactive are dropped after the pass
"""

import time
from typing import Dict, List, Optional
from pathlib import Path

from .data_types import World, SpeciesConfig, PopulateEntry
from .field import Field
from .location import Location
from .loader import load_all_data
from .organism import Organism
from .rng import Randomizer, make_seed
from .species import create_species
from .stats import FieldStats
from .constants import (
    DEFAULT_SEED,
    TICK_TIME_WINDOW,
    FOX_CREATION_PROBABILITY,
    RABBIT_CREATION_PROBABILITY,
)


class PredPreySimulation:
    """
    Main simulation class for the predator-prey field.

    Manages organism lifecycle, population, and the tick loop.
    """

    def __init__(
        self,
        data_root: Path,
        schema_dir: Optional[Path] = None,
        seed: Optional[int] = None,
        depth: Optional[int] = None,
        width: Optional[int] = None,
        world_file: str = "default.yaml"
    ):
        """
        Initialize simulation from data pack.

        Args:
            data_root: Path to data directory
            schema_dir: Optional path to JSON schemas
            seed: Optional seed override (default: world file seed, then DEFAULT_SEED)
            depth: Optional field depth override
            width: Optional field width override
            world_file: World file name under data_root/world
        """
        # Load data pack
        print("Loading data pack...")
        data = load_all_data(data_root, schema_dir, world_file)

        self.world: World = data['world']
        self.species_registry: Dict[str, SpeciesConfig] = data['species']

        if seed is None:
            seed = self.world.simulation.seed
        if seed is None:
            seed = DEFAULT_SEED
        self.seed: int = seed

        # One random stream per world, derived from the world seed
        self.rng = Randomizer(make_seed(self.seed, self.world.world_id))

        self.field = Field(
            depth if depth is not None else self.world.field.depth,
            width if width is not None else self.world.field.width,
            self.rng
        )

        # Simulation state
        self.organisms: List[Organism] = []
        self.tick_count: int = 0
        self.summary_interval: int = self.world.simulation.summary_interval
        self.stats = FieldStats()

        # Performance metrics
        self._tick_times: List[float] = []
        self._tick_time_sum: float = 0.0
        self._tick_time_window: int = TICK_TIME_WINDOW  # Rolling average window

        self._populate_table = self._build_populate_table()

        self.reset()

        print(f"[OK] Simulation initialized: {len(self.organisms)} organisms on "
              f"{self.field.depth}x{self.field.width} field (seed={self.seed})")

    def _build_populate_table(self) -> List[PopulateEntry]:
        """
        Resolve the per-cell creation table.

        Uses the world file's populate list; falls back to one entry per
        predator and prey species with the default probabilities.
        Entries naming unknown species are dropped with a warning.
        """
        entries = self.world.populate
        if not entries:
            defaults = {'fox': FOX_CREATION_PROBABILITY, 'rabbit': RABBIT_CREATION_PROBABILITY}
            # Predators first, matching the order cells are offered to species
            entries = [
                PopulateEntry(species_id=config.species_id, creation_probability=defaults[kind])
                for kind in ('fox', 'rabbit')
                for config in self.species_registry.values()
                if config.kind == kind
            ]

        table = []
        for entry in entries:
            if entry.species_id not in self.species_registry:
                print(f"[WARN] Species {entry.species_id} not found in registry, skipping")
                continue
            table.append(entry)
        return table

    def reset(self):
        """Clear the field, rewind the random stream, and repopulate"""
        self.tick_count = 0
        self.organisms = []
        self.field.clear_all()
        self.rng.reset()
        self.stats.reset()
        self._tick_times = []
        self._tick_time_sum = 0.0
        self.populate()

    def populate(self):
        """
        Fill the field with organisms of random age.

        Each cell is offered to the populate entries in order; the first
        entry whose probability roll succeeds claims the cell.
        """
        for row in range(self.field.depth):
            for col in range(self.field.width):
                for entry in self._populate_table:
                    if self.rng.next_double() <= entry.creation_probability:
                        self.spawn(entry.species_id, Location(row, col), random_age=True)
                        break

    def spawn(self, species_id: str, location: Location, random_age: bool = False) -> Organism:
        """
        Create one organism and add it to the live list.

        Args:
            species_id: Species definition ID
            location: Cell to occupy (must be vacant)
            random_age: If True, the organism gets a random age

        Returns:
            The new organism

        Raises:
            ValueError: If species_id is unknown or location is occupied
        """
        config = self.species_registry.get(species_id)
        if config is None:
            raise ValueError(f"Unknown species: {species_id}")
        if self.field.get_organism_at(location) is not None:
            raise ValueError(f"Location {location} is already occupied")

        organism = create_species(config, random_age, self.field, location, self.rng)
        self.organisms.append(organism)
        self.stats.reset()
        return organism

    def tick(self):
        """
        Advance simulation by one tick.

        Iterates a snapshot of the live list, so organisms born this tick
        are collected separately and merged only after every act() returned.
        """
        tick_start = time.perf_counter()

        new_organisms: List[Organism] = []
        for organism in list(self.organisms):
            # May have been eaten earlier in this pass
            if organism.is_active():
                organism.act(new_organisms)

        self.organisms = [o for o in self.organisms if o.is_active()]
        self.organisms.extend(o for o in new_organisms if o.is_active())

        self.stats.reset()
        self.tick_count += 1

        self._record_tick_time(time.perf_counter() - tick_start)

    def simulate(self, num_ticks: int) -> int:
        """
        Run up to num_ticks ticks, stopping early once the field is no longer viable.

        Prints a summary every summary_interval ticks.

        Returns:
            Number of ticks actually run
        """
        ran = 0
        for _ in range(num_ticks):
            if not self.is_viable():
                print(f"[WARN] Population no longer viable at tick {self.tick_count}, stopping")
                break
            self.tick()
            ran += 1

            if self.summary_interval > 0 and self.tick_count % self.summary_interval == 0:
                self.print_tick_summary()

        return ran

    def get_population_counts(self) -> Dict[str, int]:
        """Get occupant count per species (species with no occupants are reported as 0)"""
        counts = {species_id: 0 for species_id in self.species_registry}
        counts.update(self.stats.get_population_counts(self.field))
        return counts

    def is_viable(self) -> bool:
        """True while at least two species are still present"""
        return self.stats.is_viable(self.field)

    def get_tick_stats(self) -> dict:
        """
        Get current tick timing statistics.

        Returns:
            Dict with tick_count, avg_tick_time_ms, last_tick_time_ms
        """
        if not self._tick_times:
            return {
                'tick_count': self.tick_count,
                'avg_tick_time_ms': 0.0,
                'last_tick_time_ms': 0.0
            }

        avg_time = self._tick_time_sum / len(self._tick_times)
        last_time = self._tick_times[-1]

        return {
            'tick_count': self.tick_count,
            'avg_tick_time_ms': avg_time * 1000.0,
            'last_tick_time_ms': last_time * 1000.0
        }

    def _record_tick_time(self, elapsed: float):
        """
        Record tick timing for rolling average.

        Args:
            elapsed: Tick time in seconds
        """
        self._tick_times.append(elapsed)
        self._tick_time_sum += elapsed

        # Maintain rolling window
        if len(self._tick_times) > self._tick_time_window:
            removed = self._tick_times.pop(0)
            self._tick_time_sum -= removed

    def get_snapshot(self) -> dict:
        """
        Get complete simulation state snapshot.

        Returns:
            Dict with tick_count, population, organisms, timing
        """
        return {
            'tick_count': self.tick_count,
            'organism_count': len(self.organisms),
            'population': self.get_population_counts(),
            'organisms': [
                {
                    'species_id': o.species_id,
                    'age': o.age,
                    'location': [o.location.row, o.location.col]
                }
                for o in self.organisms
            ],
            'timing': self.get_tick_stats()
        }

    def print_tick_summary(self):
        """Print tick summary to console (lightweight monitoring)"""
        stats = self.get_tick_stats()
        population = " | ".join(
            f"{species_id}: {count}" for species_id, count in self.get_population_counts().items()
        )
        print(f"Tick {stats['tick_count']:5d} | "
              f"Avg: {stats['avg_tick_time_ms']:6.3f} ms | "
              f"Last: {stats['last_tick_time_ms']:6.3f} ms | "
              f"{population}")
