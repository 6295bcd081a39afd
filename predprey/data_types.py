"""
Data types mirroring YAML schema structures.

These dataclasses are populated by loader.py from YAML files.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .constants import (
    DEFAULT_LAYER,
    DEFAULT_FIELD_DEPTH,
    DEFAULT_FIELD_WIDTH,
    TICK_SUMMARY_INTERVAL,
)


# ============================================================================
# Species Definition
# ============================================================================

@dataclass(frozen=True)
class BreedingConfig:
    """Reproduction parameters for a species"""
    breeding_age: int  # Minimum age before an individual can breed
    breeding_probability: float  # Chance per tick of producing a litter
    max_litter_size: int  # Litter size is uniform in [1, max_litter_size]


@dataclass(frozen=True)
class FeedingConfig:
    """Feeding parameters for predators"""
    diet: List[str] = field(default_factory=list)  # Species IDs this species eats
    food_value: int = 9  # Ticks of food gained from one eaten prey


@dataclass(frozen=True)
class SpeciesConfig:
    """
    Complete species definition.

    Shared by every individual of the species, so anything read from here
    (max_age in particular) is constant per species.
    """
    species_id: str
    name: str
    kind: str  # rabbit, fox
    max_age: int
    breeding: BreedingConfig
    layer: int = DEFAULT_LAYER
    feeding: Optional[FeedingConfig] = None
    description: Optional[str] = None


# ============================================================================
# World Definition
# ============================================================================

@dataclass
class FieldDimensions:
    """Size of the simulated grid"""
    depth: int = DEFAULT_FIELD_DEPTH
    width: int = DEFAULT_FIELD_WIDTH


@dataclass
class SimulationConfig:
    """Simulation global defaults"""
    seed: Optional[int] = None
    summary_interval: int = TICK_SUMMARY_INTERVAL


@dataclass
class PopulateEntry:
    """Per-cell chance of creating a species when the field is populated"""
    species_id: str
    creation_probability: float


@dataclass
class World:
    """Top-level world configuration"""
    world_id: str
    name: str
    field: FieldDimensions
    simulation: SimulationConfig
    populate: List[PopulateEntry]
    description: Optional[str] = None
