"""
Actor interface: anything the simulation drives once per tick.
"""

from abc import ABC, abstractmethod
from typing import List


class Actor(ABC):
    """Participant in the tick loop"""

    @abstractmethod
    def act(self, new_actors: List['Actor']):
        """
        Do whatever this actor does in one tick.

        Args:
            new_actors: Collector for actors created during this tick
        """

    @abstractmethod
    def is_active(self) -> bool:
        """Whether the simulation should keep driving this actor"""

    @abstractmethod
    def get_layer_value(self) -> int:
        """Fixed layer used to order sensing among neighbors"""
