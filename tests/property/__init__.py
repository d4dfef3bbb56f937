# tests/property/__init__.py
"""Property-based tests for the dishwasher.

Property-based testing validates invariants that must hold for ALL inputs,
not just the specific examples we think of.

Test categories:
- engine/: Cycle ordering, fault mapping and door-state invariants
"""
