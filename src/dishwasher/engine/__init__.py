# src/dishwasher/engine/__init__.py
"""Cycle engine: the DishWasher orchestrator.

Example:
    from dishwasher.engine import DishWasher

    washer = DishWasher(water_pump, engine, dirt_filter, door)
    result = washer.start(config)
"""

from dishwasher.engine.dishwasher import MINIMAL_FILTER_CAPACITY, DishWasher

__all__ = [
    "MINIMAL_FILTER_CAPACITY",
    "DishWasher",
]
