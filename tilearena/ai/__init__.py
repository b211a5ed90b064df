"""Search layer: reachable-path queries over the grid."""

from tilearena.ai.reachability import (
    InvalidArgumentError,
    ReachabilitySearch,
    enumerate_steps,
    max_reachable_cells,
    search,
)

__all__ = [
    "InvalidArgumentError",
    "ReachabilitySearch",
    "enumerate_steps",
    "max_reachable_cells",
    "search",
]
