"""
Loguru setup for the hillclimb components.

Each module binds ``component`` (and optionally ``id``, e.g. a candidate
start) and the single package sink colours and filters on it.
"""

import sys

from loguru import logger

PALETTE = {
    "astar": "green",
    "bfs": "cyan",
    "multi_source": "blue",
    "heightmap": "magenta",
    "cli": "yellow",
}

# Components missing here log everything
DEFAULT_LEVELS = {
    "astar": "INFO",
    "bfs": "INFO",
    "multi_source": "INFO",
    "heightmap": "INFO",
}

LEVEL_PER_COMPONENT = dict(DEFAULT_LEVELS)

_handler_id = None


def set_level(level: str) -> None:
    """Set the minimum level for every component."""
    for comp in PALETTE:
        LEVEL_PER_COMPONENT[comp] = level


def component_filter(record):
    comp = record["extra"].get("component", "")
    min_level = logger.level(LEVEL_PER_COMPONENT.get(comp, "DEBUG")).no
    return record["level"].no >= min_level


def formatter(record):
    comp = record["extra"].get("component", "")
    tag = record["extra"].get("id", "")
    colour = PALETTE.get(comp, "white")
    label = f"{comp:<12} | {tag:<10}" if tag else f"{comp:<12}"
    return "{time:HH:mm:ss} | " f"<{colour}>{label}</> | " "<level>{message}</level>\n"


def configure(sink=sys.stderr, verbose: bool = False, colorize: bool = True) -> int:
    """Install the package sink, replacing the one from a previous call.

    Args:
        sink: Anything loguru accepts as a sink
        verbose: Drop every component to DEBUG
        colorize: Emit ANSI colours

    Returns:
        The loguru handler id of the new sink
    """
    global _handler_id
    if _handler_id is not None:
        logger.remove(_handler_id)

    LEVEL_PER_COMPONENT.clear()
    LEVEL_PER_COMPONENT.update(DEFAULT_LEVELS)
    if verbose:
        set_level("DEBUG")

    _handler_id = logger.add(
        sink, format=formatter, filter=component_filter, colorize=colorize
    )
    return _handler_id


logger.remove()
configure()
