"""Shared type aliases."""

SoluteIndex = int
"""Key of a chemical species in the simulation-wide solute dictionary."""
