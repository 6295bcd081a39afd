"""
Predator-Prey Grid Simulation

A deterministic, headless predator-prey simulator on a bounded 2D field.
Organisms age, breed, hunt and die; the population advances one tick at a time.

Architecture: the Field is the source of truth for occupancy. The simulation
owns the live organism list and drives each tick.
"""

__version__ = "0.1.0"
