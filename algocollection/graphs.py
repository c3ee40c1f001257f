"""Lowest common ancestors in rooted trees and topological order of directed graphs."""

from __future__ import annotations

from collections.abc import Iterable


def _check_node(node: int, size: int) -> None:
    if not 0 <= node < size:
        raise ValueError(f"node {node} outside range 0..{size - 1}")


class RootedTree:
    """A tree on nodes ``0..size-1`` answering ancestor queries by binary lifting."""

    def __init__(self, size: int, edges: Iterable[tuple[int, int]], root: int = 0) -> None:
        if size < 1:
            raise ValueError("a tree needs at least one node")
        _check_node(root, size)
        adjacency: list[list[int]] = [[] for _ in range(size)]
        edge_count = 0
        for u, v in edges:
            _check_node(u, size)
            _check_node(v, size)
            adjacency[u].append(v)
            adjacency[v].append(u)
            edge_count += 1
        if edge_count != size - 1:
            raise ValueError(f"a tree on {size} nodes has {size - 1} edges, got {edge_count}")

        self.size = size
        self.root = root
        levels = max(1, (size - 1).bit_length())
        self._levels = levels
        depth = [-1] * size
        depth[root] = 0
        # up[node][j] is the ancestor 2**j steps above node; the root is its own ancestor.
        up = [[root] * levels for _ in range(size)]
        stack = [root]
        while stack:
            node = stack.pop()
            ancestors = up[node]
            for j in range(1, levels):
                ancestors[j] = up[ancestors[j - 1]][j - 1]
            for child in adjacency[node]:
                if depth[child] < 0:
                    depth[child] = depth[node] + 1
                    up[child][0] = node
                    stack.append(child)
        if min(depth) < 0:
            raise ValueError("edges do not connect every node to the root")
        self._depth = depth
        self._up = up

    def depth(self, node: int) -> int:
        """Number of edges between ``node`` and the root."""
        _check_node(node, self.size)
        return self._depth[node]

    def lca(self, u: int, v: int) -> int:
        """Return the lowest common ancestor of ``u`` and ``v``."""
        _check_node(u, self.size)
        _check_node(v, self.size)
        depth, up = self._depth, self._up
        if depth[u] < depth[v]:
            u, v = v, u
        for j in reversed(range(self._levels)):
            if depth[up[u][j]] >= depth[v]:
                u = up[u][j]
        if u == v:
            return u
        for j in reversed(range(self._levels)):
            if up[u][j] != up[v][j]:
                u = up[u][j]
                v = up[v][j]
        return up[u][0]

    def distance(self, u: int, v: int) -> int:
        """Return the number of edges on the path between ``u`` and ``v``."""
        ancestor = self.lca(u, v)
        return self._depth[u] + self._depth[v] - 2 * self._depth[ancestor]

    def meeting_point(self, r: int, u: int, v: int) -> int:
        """Return the node minimising the total distance to ``r``, ``u`` and ``v``.

        The candidates are the pairwise lowest common ancestors; ties go to the
        smallest node number.
        """
        candidates = {self.lca(r, u), self.lca(r, v), self.lca(u, v)}
        return min(
            candidates,
            key=lambda x: (self.distance(x, v) + self.distance(x, u) + self.distance(x, r), x),
        )


class Digraph:
    """A directed graph on vertices ``0..vertices-1`` with adjacency lists."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        self.vertices = vertices
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def add_edge(self, v: int, w: int) -> None:
        """Add an edge from ``v`` to ``w``."""
        _check_node(v, self.vertices)
        _check_node(w, self.vertices)
        self._adjacency[v].append(w)

    def topological_sort(self) -> list[int]:
        """Return vertices in reverse depth-first finishing order.

        Searches start from vertices in increasing order and follow edges in
        the order they were added.
        """
        visited = [False] * self.vertices
        finished: list[int] = []
        for start in range(self.vertices):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._adjacency[start]))]
            while stack:
                node, successors = stack[-1]
                for nxt in successors:
                    if not visited[nxt]:
                        visited[nxt] = True
                        stack.append((nxt, iter(self._adjacency[nxt])))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        finished.reverse()
        return finished