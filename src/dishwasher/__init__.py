"""
Dishwasher: control sequencer for a household dishwasher wash cycle.

Coordinates a door, a water pump, a washing engine and a dirt filter
through one cycle and reports the outcome as a RunResult.
"""

__version__ = "0.1.0"
