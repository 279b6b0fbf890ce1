"""Procedural world generation package.

This package implements noise-based world generation: elevation,
temperature and moisture fields, biome classification, ridge rivers and
settlement seeding.
"""

from .config import WorldGenConfig
from .generator import (
    GenerationResult,
    WorldGenerator,
    generate_world,
    terrain_distribution,
)
from .noise import NoiseField
from .validation import ValidationResult, validate_world

__all__ = [
    "GenerationResult",
    "NoiseField",
    "ValidationResult",
    "WorldGenConfig",
    "WorldGenerator",
    "generate_world",
    "terrain_distribution",
    "validate_world",
]
