"""Command-line interface for world generation."""

import argparse
import logging
import time

import structlog

from ..types import Position


def parse_position(value: str) -> Position:
    """Parse an 'x,y' argument into a Position."""
    if "," not in value:
        raise argparse.ArgumentTypeError(f"Invalid coords format: {value} (expected 'x,y')")
    x, y = value.split(",", 1)
    try:
        return Position(x=int(x), y=int(y))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid coords: {value}") from e


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for world generation."""
    from ..config import Config, find_config, list_configs, load_config

    parser = argparse.ArgumentParser(description="Generate a procedural realm")
    parser.add_argument(
        "--config",
        type=str,
        help=f"Config name or path (available: {', '.join(list_configs())})",
    )
    parser.add_argument("--seed", type=int, help="Random seed (overrides config)")
    parser.add_argument("--width", type=int, help="World width (overrides config)")
    parser.add_argument("--height", type=int, help="World height (overrides config)")
    parser.add_argument(
        "--preview", action="store_true", help="Print an ASCII preview of the world"
    )
    parser.add_argument(
        "--enter",
        type=parse_position,
        default=None,
        help="Generate and print the settlement at x,y",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    logger = structlog.get_logger()

    if args.config:
        try:
            config_path = find_config(args.config)
            config = load_config(config_path)
            logger.info("config_loaded", path=str(config_path))
        except FileNotFoundError as e:
            parser.error(str(e))
    else:
        config = Config()

    world_config = config.world
    seed = args.seed if args.seed is not None else world_config.seed
    width = args.width if args.width is not None else world_config.width
    height = args.height if args.height is not None else world_config.height

    # Import here to avoid slow startup for --help
    from ..exceptions import RealmError
    from ..location.generator import LocationGenerator
    from .generator import WorldGenerator
    from .validation import validate_world

    start_time = time.time()
    try:
        world = WorldGenerator(seed, width, height, world_config).generate()
    except RealmError as e:
        parser.error(str(e))
    logger.info("generation_complete", seconds=round(time.time() - start_time, 2))

    validation = validate_world(world)
    if not validation.passed:
        logger.error("validation_failed", errors=validation.errors)
        parser.exit(1, "World failed validation: " + "; ".join(validation.errors) + "\n")

    if args.preview:
        for y in range(world.height):
            print("".join(
                world.get_tile(Position(x=x, y=y)).appearance()
                for x in range(world.width)
            ))

    if args.enter is not None:
        tile = world.get_tile(args.enter)
        if tile.settlement is None:
            parser.error(f"No settlement at {tile.position}")

        location_map = LocationGenerator(
            world.location_seed(tile.position),
            tile.terrain,
            tile.settlement,
            config.location,
        ).generate()

        print()
        print(tile.settlement.describe())
        for row in location_map.render():
            print(row)
        spawn = location_map.find_spawn_position(config.location.spawn_search_radius)
        logger.info("spawn_position", position=str(spawn))


if __name__ == "__main__":
    main()
