# wp_nav/domain/entities/grid.py
from collections.abc import Sequence

import numpy as np

from wp_nav.domain.entities.geometry import Vec3
from wp_nav.domain.entities.graph import Graph, Node

GridKey = tuple[int, int]  # (row, col)

# up, down, left, right; diagonals are never neighbours
DIRECTIONS: tuple[GridKey, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# 7 x 6 labyrinth; True = walkable
LABYRINTH_PATTERN: tuple[tuple[bool, ...], ...] = (
    (True, True, False, True, True, True),
    (True, False, True, True, True, True),
    (True, False, True, True, True, True),
    (True, True, True, False, True, True),
    (True, True, True, True, False, True),
    (True, True, False, True, False, True),
    (True, False, False, True, True, True),
)
LABYRINTH_START: GridKey = (0, 0)
LABYRINTH_GOAL: GridKey = (6, 5)


def manhattan_distance(a: GridKey, b: GridKey) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def is_adjacent(a: GridKey, b: GridKey) -> bool:
    return manhattan_distance(a, b) == 1


def has_valid_grid_position(key) -> bool:
    return (
        isinstance(key, tuple)
        and len(key) == 2
        and all(isinstance(v, (int, np.integer)) and v >= 0 for v in key)
    )


def _walkable_mask(pattern) -> np.ndarray:
    mask = np.asarray(pattern, dtype=bool)
    if mask.ndim != 2 or mask.size == 0:
        raise ValueError(f"grid pattern must be a non-empty 2-D array, got shape {mask.shape}")
    return mask.copy()


class Grid:
    """A rectangular world whose nodes are keyed by (row, col)."""

    def __init__(self, graph: Graph, rows: int, cols: int, spacing: float, y: float = 0.0):
        self.graph = graph
        self.rows, self.cols = rows, cols
        self.spacing, self.y = spacing, y

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def node_at(self, row: int, col: int) -> Node:
        return self.graph.resolve((row, col))

    def walkable(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and self.node_at(row, col).walkable

    def world_position(self, row: int, col: int) -> Vec3:
        return Vec3(row * self.spacing, self.y, col * self.spacing)

    def obstacles(self) -> list[GridKey]:
        return [n.key for n in self.graph.nodes if not n.walkable]


def build_grid(
    pattern: Sequence[Sequence[bool]] | np.ndarray,
    *,
    spacing: float = 5.0,
    y: float = 0.0,
    force_walkable: Sequence[GridKey] = (),
    hooks=None,
) -> Grid:
    """
    Build a grid world from a walkability pattern.

    Cells listed in ``force_walkable`` (typically start and goal) are made
    walkable before adjacency is computed. Adjacency is computed once here:
    each walkable cell gets a directed edge to each walkable in-bounds
    orthogonal neighbour, in DIRECTIONS order. Obstacles get no edges.
    """
    mask = _walkable_mask(pattern)
    rows, cols = mask.shape
    for r, c in force_walkable:
        if not (0 <= r < rows and 0 <= c < cols):
            raise ValueError(f"cell {(r, c)} is outside a {rows}x{cols} grid")
        mask[r, c] = True

    graph = Graph(hooks=hooks)
    grid = Grid(graph, rows, cols, spacing, y)
    for r in range(rows):
        for c in range(cols):
            graph.add_node((r, c), grid.world_position(r, c), walkable=bool(mask[r, c]))

    for r in range(rows):
        for c in range(cols):
            if not mask[r, c]:
                continue
            for dr, dc in DIRECTIONS:
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < cols and mask[nr, nc]:
                    graph.add_edge((r, c), (nr, nc))
    return grid


def random_grid(
    rows: int, cols: int, obstacle_ratio: float, rng: np.random.Generator
) -> np.ndarray:
    """Walkability mask with roughly ``obstacle_ratio`` of the cells blocked."""
    if rows <= 0 or cols <= 0:
        raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
    if not 0.0 <= obstacle_ratio < 1.0:
        raise ValueError(f"obstacle_ratio must be in [0, 1), got {obstacle_ratio}")
    return rng.random((rows, cols)) >= obstacle_ratio
