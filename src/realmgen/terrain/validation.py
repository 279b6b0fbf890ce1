"""Post-generation validation of world invariants."""

import numpy as np
import structlog

from ..state import World
from ..terrain_types import BLOCKED_CODES, TerrainType, terrain_value

logger = structlog.get_logger()


class ValidationResult:
    """Result of world validation."""

    def __init__(self) -> None:
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.passed = True

    def add_error(self, message: str) -> None:
        """Add validation error."""
        self.errors.append(message)
        self.passed = False

    def add_warning(self, message: str) -> None:
        """Add validation warning."""
        self.warnings.append(message)


def validate_world(world: World) -> ValidationResult:
    """Validate a generated world against its invariants.

    Args:
        world: Generated world.

    Returns:
        ValidationResult with any errors/warnings.
    """
    result = ValidationResult()
    terrain = world.terrain_array()

    # Check 1: Terrain codes are known
    _check_terrain_codes(terrain, result)

    # Check 2: Settlements only on open tiles, with in-band sizes
    _check_settlements(world, terrain, result)

    # Check 3: Carved river cells are water
    _check_rivers(world, terrain, result)

    # Check 4: Land exists at all
    land_fraction = float(np.mean(terrain != terrain_value(TerrainType.WATER)))
    if land_fraction == 0.0:
        result.add_warning("World has no land")

    if result.passed:
        logger.info("world_validation_passed", warnings=len(result.warnings))
    else:
        logger.warning("world_validation_failed", errors=result.errors)

    for warning in result.warnings:
        logger.warning("world_validation_warning", message=warning)

    return result


def _check_terrain_codes(terrain: np.ndarray, result: ValidationResult) -> None:
    valid = {terrain_value(t) for t in TerrainType}
    unknown = set(np.unique(terrain).tolist()) - valid
    if unknown:
        result.add_error(f"Unknown terrain codes: {sorted(unknown)}")


def _check_settlements(
    world: World,
    terrain: np.ndarray,
    result: ValidationResult,
) -> None:
    for position, settlement in world.settlements().items():
        if int(terrain[position.y, position.x]) in BLOCKED_CODES:
            result.add_error(f"Settlement {settlement.name} on blocked tile {position}")
        if not settlement.size_in_band():
            result.add_error(
                f"Settlement {settlement.name} size {settlement.size} "
                f"outside band for {settlement.state.value}"
            )


def _check_rivers(world: World, terrain: np.ndarray, result: ValidationResult) -> None:
    water = terrain_value(TerrainType.WATER)
    dry = [p for p in world.river_cells if terrain[p.y, p.x] != water]
    if dry:
        result.add_error(f"{len(dry)} river cells are not water")
