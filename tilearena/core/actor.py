"""TileActor — a single piece that moves across a TileArena."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from tilearena.ai.reachability import InvalidArgumentError, Path, SearchResult
from tilearena.core.arena import TileArena
from tilearena.core.models import Vector2

logger = logging.getLogger(__name__)


class PathNotDeterminedError(KeyError):
    """Raised when asking for a path to a tile outside the last computed reach."""


class TileActor:
    """An actor bound to an arena.

    ``select()`` computes the tiles reachable this turn; ``move_to()`` then
    follows one of those paths. When the arena layout changes the actor hops
    to a random free tile and forgets its computed paths.
    """

    def __init__(self, arena: TileArena, location: Vector2 = Vector2(0, 0), move_range: int = 3) -> None:
        if move_range < 0:
            raise InvalidArgumentError("Move range must be greater than or equal to zero.")
        self._arena = arena
        self._location = location
        self._move_range = move_range
        self._available_paths: SearchResult = {}
        arena.subscribe(self._on_layout_change)

    # -- properties --

    @property
    def arena(self) -> TileArena:
        return self._arena

    @property
    def location(self) -> Vector2:
        return self._location

    @location.setter
    def location(self, value: Vector2) -> None:
        self._location = value
        self._available_paths = {}

    @property
    def move_range(self) -> int:
        return self._move_range

    @move_range.setter
    def move_range(self, value: int) -> None:
        if value < 0:
            raise InvalidArgumentError("Move range must be greater than or equal to zero.")
        self._move_range = value
        self._available_paths = {}

    @property
    def available_paths(self) -> Mapping[Vector2, Path]:
        return MappingProxyType(self._available_paths)

    # -- turn flow --

    def select(self) -> Mapping[Vector2, Path]:
        """Compute and remember every destination reachable this turn."""
        self._available_paths = self._arena.get_all_movement_paths(self._location, self._move_range)
        return self.available_paths

    def path_to(self, dest: Vector2) -> Path:
        """Return the selected path ending at *dest* (destination first)."""
        try:
            return self._available_paths[dest]
        except KeyError:
            raise PathNotDeterminedError(f"Requested a path to {dest} that has not been determined.") from None

    def move_to(self, dest: Vector2) -> Path:
        """Follow the selected path to *dest*; return it ordered start to destination."""
        route = tuple(reversed(self.path_to(dest)))
        logger.debug("Actor moving %s -> %s in %d steps", self._location, dest, len(route) - 1)
        self._location = route[-1]
        self._available_paths = {}
        return route

    def detach(self) -> None:
        self._arena.unsubscribe(self._on_layout_change)

    def _on_layout_change(self) -> None:
        free = self._arena.random_free_tile()
        if free is not None:
            self._location = free
        else:
            logger.warning("No free tile in the new layout; actor stays at %s", self._location)
        self._available_paths = {}
