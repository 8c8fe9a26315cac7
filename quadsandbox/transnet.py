"""Track network: nodes joined by straight edges, and positions along them."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Node:
    """A point in the plane where edges meet."""

    x: float
    y: float


@dataclass(frozen=True)
class Edge:
    """A directed straight connection between two nodes."""

    from_node_id: int
    to_node_id: int
    length: float

    @classmethod
    def between(cls, from_node_id: int, to_node_id: int, nodes: Sequence[Node]) -> Edge:
        """Create an edge whose length is the distance between the two nodes."""
        a = nodes[from_node_id]
        b = nodes[to_node_id]
        return cls(from_node_id, to_node_id, math.hypot(b.x - a.x, b.y - a.y))


@dataclass(frozen=True)
class GraphPos:
    """A position on the network: an edge and the distance travelled along it."""

    edge_id: int
    distance: float = 0.0

    @classmethod
    def start(cls, edge_id: int) -> GraphPos:
        """The position at the beginning of the given edge."""
        return cls(edge_id, 0.0)


@dataclass
class Graph:
    """A set of nodes and the edges between them."""

    nodes: list[Node]
    edges: list[Edge]

    def pos_to_location(self, graph_pos: GraphPos) -> Node:
        """Convert a position on an edge into plane coordinates."""
        track = self.edges[graph_pos.edge_id]
        a = self.nodes[track.from_node_id]
        b = self.nodes[track.to_node_id]
        frac = graph_pos.distance / track.length
        return Node(a.x + frac * (b.x - a.x), a.y + frac * (b.y - a.y))

    def update_pos(self, pos: GraphPos, route: Sequence[int], distance: float) -> GraphPos:
        """Move a position by ``distance`` along the edges listed in ``route``.

        Passing the end of an edge continues on the first route edge that starts
        where it ends; passing the beginning continues backwards on the first
        route edge that ends where it starts. Without such an edge the position
        stops at the end of the current edge.
        """
        track = self.edges[pos.edge_id]
        new_distance = pos.distance + distance

        if new_distance > track.length:
            next_edge = next(
                (e for e in route if self.edges[e].from_node_id == track.to_node_id), None
            )
            if next_edge is None:
                return GraphPos(pos.edge_id, track.length)
            return GraphPos(next_edge, new_distance - track.length)

        if new_distance < 0.0:
            prev_edge = next(
                (e for e in route if self.edges[e].to_node_id == track.from_node_id), None
            )
            if prev_edge is None:
                return GraphPos(pos.edge_id, 0.0)
            return GraphPos(prev_edge, self.edges[prev_edge].length + new_distance)

        return GraphPos(pos.edge_id, new_distance)