"""
Test data loading system

Verifies YAML -> Python dataclass conversion and schema validation.
"""

import shutil
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from predprey.loader import (
    DataLoadError,
    load_species, load_world, load_species_registry,
    load_all_data, load_yaml
)

DATA_ROOT = Path(__file__).parent.parent.parent / "data"
SCHEMA_DIR = DATA_ROOT / "schemas"


def copy_data_pack(tmp_path: Path) -> Path:
    """Copy the bundled data pack so a test can break it"""
    target = tmp_path / "data"
    shutil.copytree(DATA_ROOT, target)
    return target


def test_load_rabbit():
    """Test loading Rabbit species"""
    species = load_species(DATA_ROOT / "species" / "rabbit.yaml", SCHEMA_DIR)

    print(f"[OK] Loaded species: {species.name} ({species.species_id})")
    print(f"  Max age: {species.max_age}, breeding age: {species.breeding.breeding_age}")

    assert species.kind == 'rabbit'
    assert species.max_age == 40
    assert species.layer == 1
    assert species.breeding.breeding_probability == 0.12
    assert species.breeding.max_litter_size == 4
    assert species.feeding is None


def test_load_fox():
    """Test loading Fox species with feeding section"""
    species = load_species(DATA_ROOT / "species" / "fox.yaml", SCHEMA_DIR)

    assert species.kind == 'fox'
    assert species.max_age == 150
    assert species.layer == 2
    assert species.feeding.diet == ['rabbit']
    assert species.feeding.food_value == 9

    print("[OK] Fox feeding config loaded correctly\n")


def test_load_world():
    """Test loading default world config"""
    world = load_world(DATA_ROOT / "world" / "default.yaml", SCHEMA_DIR)

    print(f"[OK] Loaded world: {world.name} ({world.world_id})")
    print(f"  Field: {world.field.depth}x{world.field.width}")

    assert world.field.depth == 80
    assert world.field.width == 120
    assert world.simulation.seed == 1111
    assert world.simulation.summary_interval == 100
    assert [p.species_id for p in world.populate] == ['fox', 'rabbit']
    assert world.populate[0].creation_probability == 0.02


def test_load_all():
    """Test loading entire data pack"""
    data = load_all_data(DATA_ROOT, SCHEMA_DIR)

    assert data['world'].world_id == 'meadow'
    assert set(data['species']) == {'rabbit', 'fox'}

    print("[PASS] Complete data pack loaded")


def test_missing_file():
    with pytest.raises(DataLoadError):
        load_yaml(DATA_ROOT / "species" / "unicorn.yaml")


def test_missing_species_dir(tmp_path):
    with pytest.raises(DataLoadError):
        load_species_registry(tmp_path / "nope")


def test_empty_species_dir(tmp_path):
    with pytest.raises(DataLoadError):
        load_species_registry(tmp_path)


def test_yaml_parse_error(tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("species_id: [unclosed\n")
    with pytest.raises(DataLoadError):
        load_yaml(bad)


def test_schema_violation(tmp_path):
    data_root = copy_data_pack(tmp_path)
    rabbit_file = data_root / "species" / "rabbit.yaml"
    rabbit_file.write_text(rabbit_file.read_text().replace("max_age: 40", "max_age: -4"))

    with pytest.raises(DataLoadError, match="Validation error"):
        load_species(rabbit_file, data_root / "schemas")


def test_schema_optional(tmp_path):
    """Without a schema file the same data loads (validation skipped)"""
    data_root = copy_data_pack(tmp_path)
    species = load_species(data_root / "species" / "rabbit.yaml", tmp_path / "no-schemas")
    assert species.species_id == 'rabbit'


def test_missing_required_key(tmp_path):
    bad = tmp_path / "stub.yaml"
    bad.write_text("species_id: stub\nname: Stub\nkind: rabbit\n")
    with pytest.raises(DataLoadError, match="Malformed"):
        load_species(bad)


def test_unknown_kind(tmp_path):
    bad = tmp_path / "owl.yaml"
    bad.write_text(
        "species_id: owl\nname: Owl\nkind: owl\nmax_age: 20\n"
        "breeding: {breeding_age: 2, breeding_probability: 0.1, max_litter_size: 1}\n"
    )
    with pytest.raises(DataLoadError, match="Unknown species kind"):
        load_species(bad)


def test_predator_requires_feeding(tmp_path):
    bad = tmp_path / "fox.yaml"
    bad.write_text(
        "species_id: fox\nname: Fox\nkind: fox\nmax_age: 20\n"
        "breeding: {breeding_age: 2, breeding_probability: 0.1, max_litter_size: 1}\n"
    )
    with pytest.raises(DataLoadError, match="no feeding"):
        load_species(bad)


def test_unknown_diet(tmp_path):
    data_root = copy_data_pack(tmp_path)
    fox_file = data_root / "species" / "fox.yaml"
    fox_file.write_text(fox_file.read_text().replace("- rabbit", "- vole"))

    with pytest.raises(DataLoadError, match="vole"):
        load_all_data(data_root, data_root / "schemas")


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
