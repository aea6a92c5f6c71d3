"""
Adjacency between quads.

Two quads are adjacent when they share a border segment of positive
length. When the x-ranges of a pair overlap only the vertical condition is
evaluated (one quad's bottom row directly above the other's top row); the
horizontal condition is checked only for pairs whose x-ranges are
disjoint. Pairs overlapping in both ranges without touching vertically are
therefore reported as not adjacent.
"""

from typing import List, Sequence

from .mesher import Quad


def ranges_overlap(l1: int, r1: int, l2: int, r2: int) -> bool:
    """Overlap test for inclusive integer ranges [l1, r1] and [l2, r2]."""
    return r1 >= l2 and l1 <= r2


def quads_adjacent(lhs: Quad, rhs: Quad) -> bool:
    if ranges_overlap(lhs.x0, lhs.x1, rhs.x0, rhs.x1):
        return lhs.y1 + 1 == rhs.y0 or rhs.y1 + 1 == lhs.y0
    if ranges_overlap(lhs.y0, lhs.y1, rhs.y0, rhs.y1):
        return lhs.x1 + 1 == rhs.x0 or rhs.x1 + 1 == lhs.x0
    return False


def build_adjacency(quads: Sequence[Quad]) -> List[List[int]]:
    """
    Build the adjacency list of a mesh.

    Args:
        quads: Quads in mesh order

    Returns:
        adj[i] lists the indices of quads adjacent to quad i, ascending
    """
    quad_count = len(quads)
    adj: List[List[int]] = [[] for _ in range(quad_count)]
    for i in range(quad_count):
        for j in range(quad_count):
            if i != j and quads_adjacent(quads[i], quads[j]):
                adj[i].append(j)
    return adj


def edge_count(adj: Sequence[Sequence[int]]) -> int:
    """Number of undirected edges in a symmetric adjacency list."""
    return sum(len(neighbors) for neighbors in adj) // 2
