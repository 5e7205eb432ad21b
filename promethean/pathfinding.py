"""A* search on a 4-connected grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

Point = tuple[int, int]
Grid = Sequence[Sequence[int]]

_DIRECTIONS: tuple[Point, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
_MAX_PATH = 1024


@dataclass
class _Node:
    g: int = 0
    f: int = 0
    parent: Optional[Point] = None
    in_open: bool = False
    closed: bool = False


class _OpenHeap:
    """Binary min-heap of cells ordered by the f score of their nodes."""

    def __init__(self, nodes: dict[Point, _Node]) -> None:
        self._items: list[Point] = []
        self._nodes = nodes

    def __bool__(self) -> bool:
        return bool(self._items)

    def _f(self, index: int) -> int:
        return self._nodes[self._items[index]].f

    def _swap(self, a: int, b: int) -> None:
        self._items[a], self._items[b] = self._items[b], self._items[a]

    def push(self, cell: Point) -> None:
        self._items.append(cell)
        i = len(self._items) - 1
        while i > 0:
            parent = (i - 1) // 2
            if self._f(parent) <= self._f(i):
                break
            self._swap(parent, i)
            i = parent

    def pop(self) -> Point:
        result = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
        i = 0
        size = len(self._items)
        while True:
            left = 2 * i + 1
            right = left + 1
            if left >= size:
                break
            smallest = left
            if right < size and self._f(right) < self._f(left):
                smallest = right
            if self._f(i) <= self._f(smallest):
                break
            self._swap(i, smallest)
            i = smallest
        return result


def _heuristic(a: Point, b: Point) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def _search(walkable: Callable[[Point], bool], start: Point, goal: Point) -> Optional[list[Point]]:
    """Return the cells from start to goal, or None if the goal is unreachable.

    ``walkable`` must reject cells outside the grid. Very long paths are cut to
    their last cells leading up to the goal.
    """
    nodes: dict[Point, _Node] = {}
    heap = _OpenHeap(nodes)
    nodes[start] = _Node(g=0, f=_heuristic(start, goal), in_open=True)
    heap.push(start)

    while heap:
        current = heap.pop()
        node = nodes[current]
        node.in_open = False
        node.closed = True

        if current == goal:
            cells: list[Point] = []
            cell: Optional[Point] = current
            while cell is not None:
                cells.append(cell)
                cell = nodes[cell].parent
                if len(cells) > _MAX_PATH:
                    break
            cells.reverse()
            return cells

        for dx, dy in _DIRECTIONS:
            neighbour = (current[0] + dx, current[1] + dy)
            if not walkable(neighbour):
                continue
            n = nodes.setdefault(neighbour, _Node())
            if n.closed:
                continue
            tentative = node.g + 1
            if not n.in_open or tentative < n.g:
                n.g = tentative
                n.f = tentative + _heuristic(neighbour, goal)
                n.parent = current
                if not n.in_open:
                    heap.push(neighbour)
                    n.in_open = True
    return None


def find_path(grid: Grid, start: Sequence[int], goal: Sequence[int]) -> list[Point]:
    """Shortest 4-connected path over cells equal to 0; empty if there is none.

    ``grid`` is indexed ``grid[y][x]`` and points are ``(x, y)``.
    """
    if not grid or not grid[0]:
        return []
    width = len(grid[0])
    height = len(grid)

    def walkable(p: Point) -> bool:
        x, y = p
        return 0 <= x < width and 0 <= y < height and grid[y][x] == 0

    start_cell = (int(start[0]), int(start[1]))
    goal_cell = (int(goal[0]), int(goal[1]))
    if not walkable(start_cell) or not walkable(goal_cell):
        return []
    return _search(walkable, start_cell, goal_cell) or []