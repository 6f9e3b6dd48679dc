"""Traversal, connectivity, cycle detection and two-colouring of undirected graphs.

Graphs are given as iterables of ``(u, v)`` edges. Vertices are numbered
from 1, and ``vertex_count`` names how many of them (1 to ``vertex_count``)
are roots for the traversals.
"""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Hashable, Iterable

__all__ = [
    "build_adjacency",
    "dfs_order",
    "count_components",
    "has_cycle_bfs",
    "has_cycle_dfs",
    "two_color_bfs",
    "two_color_dfs",
]

Edge = tuple[Hashable, Hashable]


def build_adjacency(edges: Iterable[Edge]) -> dict[Hashable, list[Hashable]]:
    """Undirected adjacency lists, with neighbours in the order the edges were given."""
    adjacency: defaultdict[Hashable, list[Hashable]] = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return dict(adjacency)


def _explore(adjacency, start, visited: set, order: list | None = None) -> None:
    """Depth-first walk from ``start``, visiting neighbours in adjacency order."""
    visited.add(start)
    if order is not None:
        order.append(start)
    stack = [iter(adjacency.get(start, ()))]
    while stack:
        for neighbour in stack[-1]:
            if neighbour not in visited:
                visited.add(neighbour)
                if order is not None:
                    order.append(neighbour)
                stack.append(iter(adjacency.get(neighbour, ())))
                break
        else:
            stack.pop()


def _vertices(vertex_count: int) -> range:
    return range(1, vertex_count + 1)


def dfs_order(edges: Iterable[Edge], vertex_count: int) -> list[Hashable]:
    """Vertices in the order a depth-first search from 1, 2, ... first reaches them."""
    adjacency = build_adjacency(edges)
    visited: set = set()
    order: list = []
    for vertex in _vertices(vertex_count):
        if vertex not in visited:
            _explore(adjacency, vertex, visited, order)
    return order


def count_components(vertex_count: int, edges: Iterable[Edge]) -> int:
    """Number of connected components among vertices 1 to ``vertex_count``."""
    adjacency = build_adjacency(edges)
    visited: set = set()
    components = 0
    for vertex in _vertices(vertex_count):
        if vertex not in visited:
            components += 1
            _explore(adjacency, vertex, visited)
    return components


def _bfs_finds_cycle(adjacency, start, visited: set) -> bool:
    visited.add(start)
    queue = deque([(start, None)])
    while queue:
        current, parent = queue.popleft()
        for neighbour in adjacency.get(current, ()):
            if neighbour in visited:
                if neighbour != parent:
                    return True
            else:
                visited.add(neighbour)
                queue.append((neighbour, current))
    return False


def has_cycle_bfs(edges: Iterable[Edge], vertex_count: int) -> bool:
    """Whether the graph has a cycle, found by breadth-first search with parent tracking."""
    adjacency = build_adjacency(edges)
    visited: set = set()
    return any(
        _bfs_finds_cycle(adjacency, vertex, visited)
        for vertex in _vertices(vertex_count)
        if vertex not in visited
    )


def _dfs_finds_cycle(adjacency, start, visited: set) -> bool:
    visited.add(start)
    stack = [(start, None, iter(adjacency.get(start, ())))]
    while stack:
        node, parent, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour not in visited:
                visited.add(neighbour)
                stack.append((neighbour, node, iter(adjacency.get(neighbour, ()))))
                break
            if neighbour != parent:
                return True
        else:
            stack.pop()
    return False


def has_cycle_dfs(edges: Iterable[Edge], vertex_count: int) -> bool:
    """Whether the graph has a cycle, found by depth-first search with parent tracking."""
    adjacency = build_adjacency(edges)
    visited: set = set()
    for vertex in _vertices(vertex_count):
        if vertex not in visited and _dfs_finds_cycle(adjacency, vertex, visited):
            return True
    return False


def _bfs_colors(adjacency, start, colors: dict) -> bool:
    colors[start] = 0
    queue = deque([start])
    while queue:
        current = queue.popleft()
        current_color = colors[current]
        for neighbour in adjacency.get(current, ()):
            if colors.get(neighbour) == current_color:
                return False
            first_seen = neighbour not in colors
            colors[neighbour] = 1 - current_color
            if first_seen:
                queue.append(neighbour)
    return True


def two_color_bfs(edges: Iterable[Edge], vertex_count: int) -> dict[int, int] | None:
    """Colours 0/1 for vertices 1 to ``vertex_count`` by breadth-first search.

    Returns ``None`` when the graph is not bipartite.
    """
    adjacency = build_adjacency(edges)
    colors: dict = {}
    for vertex in _vertices(vertex_count):
        if vertex not in colors and not _bfs_colors(adjacency, vertex, colors):
            return None
    return {vertex: colors[vertex] for vertex in _vertices(vertex_count)}


def _dfs_colors(adjacency, start, colors: dict) -> bool:
    colors.setdefault(start, 0)
    stack = [(start, iter(adjacency.get(start, ())))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour not in colors:
                colors[neighbour] = 1 - colors[node]
                stack.append((neighbour, iter(adjacency.get(neighbour, ()))))
                break
            if colors[neighbour] == colors[node]:
                return False
        else:
            stack.pop()
    return True


def two_color_dfs(edges: Iterable[Edge], vertex_count: int) -> dict[int, int] | None:
    """Colours 0/1 for vertices 1 to ``vertex_count`` by depth-first search.

    Returns ``None`` when the graph is not bipartite.
    """
    adjacency = build_adjacency(edges)
    colors: dict = {}
    for vertex in _vertices(vertex_count):
        if vertex not in colors and not _dfs_colors(adjacency, vertex, colors):
            return None
    return {vertex: colors[vertex] for vertex in _vertices(vertex_count)}