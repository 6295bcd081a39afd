"""
YAML data loader with schema validation.

Loads world and species definitions from YAML files and validates
them against JSON schemas.
"""

import yaml
import json
from pathlib import Path
from typing import Dict, Optional
import jsonschema

from .constants import DEFAULT_LAYER
from .data_types import (
    SpeciesConfig, BreedingConfig, FeedingConfig,
    World, FieldDimensions, SimulationConfig, PopulateEntry
)
from .species import SPECIES_KINDS


class DataLoadError(Exception):
    """Raised when data loading or validation fails"""
    pass


def load_yaml(file_path: Path) -> dict:
    """Load YAML file and return parsed dict"""
    if not file_path.exists():
        raise DataLoadError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DataLoadError(f"YAML parse error in {file_path}: {e}")


def validate_against_schema(data: dict, schema_path: Path, data_path: Path):
    """Validate data dict against JSON schema"""
    if not schema_path.exists():
        # Schema validation is optional
        return

    try:
        with open(schema_path, 'r') as f:
            schema = json.load(f)
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        raise DataLoadError(f"Validation error in {data_path}: {e.message}")
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON schema {schema_path}: {e}")


def load_species(file_path: Path, schema_dir: Optional[Path] = None) -> SpeciesConfig:
    """Load species definition from YAML"""
    data = load_yaml(file_path)

    # Validate if schema available
    if schema_dir:
        schema_path = schema_dir / "species.schema.json"
        validate_against_schema(data, schema_path, file_path)

    try:
        breeding = BreedingConfig(**data['breeding'])

        feeding = None
        if 'feeding' in data:
            feeding = FeedingConfig(**data['feeding'])

        species = SpeciesConfig(
            species_id=data['species_id'],
            name=data['name'],
            kind=data['kind'],
            max_age=data['max_age'],
            breeding=breeding,
            layer=data.get('layer', DEFAULT_LAYER),
            feeding=feeding,
            description=data.get('description')
        )
    except (KeyError, TypeError) as e:
        raise DataLoadError(f"Malformed species definition in {file_path}: {e}")

    if species.kind not in SPECIES_KINDS:
        raise DataLoadError(f"Unknown species kind '{species.kind}' in {file_path}")
    if species.kind == 'fox' and species.feeding is None:
        raise DataLoadError(f"Predator {species.species_id} has no feeding section in {file_path}")

    return species


def load_world(file_path: Path, schema_dir: Optional[Path] = None) -> World:
    """Load world configuration from YAML"""
    data = load_yaml(file_path)

    # Validate if schema available
    if schema_dir:
        schema_path = schema_dir / "world.schema.json"
        validate_against_schema(data, schema_path, file_path)

    try:
        field = FieldDimensions(**data.get('field', {}))
        simulation = SimulationConfig(**data.get('simulation', {}))
        populate = [PopulateEntry(**p) for p in data.get('populate', [])]

        return World(
            world_id=data['world_id'],
            name=data['name'],
            field=field,
            simulation=simulation,
            populate=populate,
            description=data.get('description')
        )
    except (KeyError, TypeError) as e:
        raise DataLoadError(f"Malformed world definition in {file_path}: {e}")


def load_species_registry(species_dir: Path, schema_dir: Optional[Path] = None) -> Dict[str, SpeciesConfig]:
    """Load all species from directory"""
    species_dir = Path(species_dir)
    if not species_dir.exists():
        raise DataLoadError(f"Species directory not found: {species_dir}")

    registry = {}
    for yaml_file in sorted(species_dir.glob("*.yaml")):
        species = load_species(yaml_file, schema_dir)
        registry[species.species_id] = species

    if not registry:
        raise DataLoadError(f"No species files found in {species_dir}")

    return registry


def load_all_data(data_root: Path, schema_dir: Optional[Path] = None,
                  world_file: str = "default.yaml") -> dict:
    """Load all simulation data from data directory

    Returns dict with keys: world, species
    """
    data_root = Path(data_root)

    # Load world
    world = load_world(data_root / "world" / world_file, schema_dir)

    # Load species
    species = load_species_registry(data_root / "species", schema_dir)

    # Diets may only name known species
    for config in species.values():
        if config.feeding:
            for prey_id in config.feeding.diet:
                if prey_id not in species:
                    raise DataLoadError(
                        f"Species {config.species_id} eats unknown species {prey_id}"
                    )

    return {
        'world': world,
        'species': species
    }
