"""
Population statistics gathered from the Field.
"""

from typing import Dict

from .field import Field


class FieldStats:
    """
    Per-species occupant counts for a Field.

    Counts are computed on demand and cached until reset() is called.
    Organisms without a species_id are counted under their class name.
    """

    def __init__(self):
        self._counts: Dict[str, int] = {}
        self._valid = False

    def reset(self):
        """Invalidate cached counts (call whenever the field changes)"""
        self._counts = {}
        self._valid = False

    def get_population_counts(self, field: Field) -> Dict[str, int]:
        """
        Get number of occupants per species.

        Args:
            field: Field to count

        Returns:
            Dict of {species_id: count}, only species with at least one occupant
        """
        if not self._valid:
            self._generate_counts(field)
        return dict(self._counts)

    def is_viable(self, field: Field) -> bool:
        """True while more than one species is still present"""
        counts = self.get_population_counts(field)
        return sum(1 for n in counts.values() if n > 0) > 1

    def _generate_counts(self, field: Field):
        self._counts = {}
        for _, organism in field.occupants():
            key = getattr(organism, 'species_id', type(organism).__name__)
            self._counts[key] = self._counts.get(key, 0) + 1
        self._valid = True
