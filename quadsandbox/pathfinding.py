"""A* search over a world map."""

from __future__ import annotations

import heapq
from itertools import count

from quadsandbox.world_map import WorldMap

Point = tuple[int, int]


def _manhattan(a: Point, b: Point) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def find_path(world_map: WorldMap, start: Point, goal: Point) -> list[Point]:
    """Find a path of cells from ``start`` to ``goal``, both included.

    Every move costs one step, diagonals included. Returns an empty list when
    the goal cannot be reached.
    """
    start = (int(start[0]), int(start[1]))
    goal = (int(goal[0]), int(goal[1]))
    tie = count()
    best_cost = {start: 0}
    parents: dict[Point, Point] = {}
    frontier = [(_manhattan(start, goal), 0, next(tie), start)]

    while frontier:
        _, neg_cost, _, node = heapq.heappop(frontier)
        cost = -neg_cost
        if node == goal:
            path = [node]
            while node in parents:
                node = parents[node]
                path.append(node)
            path.reverse()
            return path
        if cost > best_cost[node]:
            continue
        for nx, ny, _ in world_map.available_exits(*node):
            successor = (nx, ny)
            new_cost = cost + 1
            if new_cost < best_cost.get(successor, new_cost + 1):
                best_cost[successor] = new_cost
                parents[successor] = node
                estimate = new_cost + _manhattan(successor, goal)
                heapq.heappush(frontier, (estimate, -new_cost, next(tie), successor))
    return []