# -*- coding: utf-8 -*-
"""Contains the functions to compute maximum matchings of bipartite graphs given as edge lists.

All functions take an iterable of ``(left, right)`` edges. The vertices only need to be hashable, and the
left and right part are separate, i.e. ``(1, 1)`` is a valid edge between two different vertices.

>>> edges = [(0, 10), (0, 11), (0, 12), (1, 11), (2, 12)]
>>> matching(edges)
[(0, 10), (1, 11), (2, 12)]
>>> matching_size(edges)
3

The bounded variants stop as soon as the matching is larger than the bound, which is enough to decide whether
the maximum matching exceeds a certain size:

>>> bounded_matching_size(edges, 1)
2

The ``_mapped`` variants return a `MappedMatching`, which only stores the integer indices of the matched edges
together with the tables to look up the original vertices.
"""
import logging
from typing import Dict, Generic, Hashable, Iterable, List, Optional, Sequence, Tuple, TypeVar, Union, overload

from .hopcroft_karp import HopcroftKarp
from .index import IndexedGraph, VertexIndex

__all__ = [
    'MappedMatching', 'matching', 'matching_mapped', 'matching_size', 'bounded_matching', 'bounded_matching_mapped',
    'bounded_matching_size'
]

logger = logging.getLogger(__name__)

TLeft = TypeVar('TLeft', bound=Hashable)
TRight = TypeVar('TRight', bound=Hashable)

Edge = Tuple[TLeft, TRight]


class MappedMatching(Generic[TLeft, TRight], Sequence[Tuple[TLeft, TRight]]):
    """A matching stored as pairs of vertex indices.

    It behaves like a read-only list of ``(left, right)`` edges, but the vertex pairs are only looked up in the
    vertex indices when they are accessed.

    >>> result = matching_mapped([('a', 'x'), ('b', 'x'), ('b', 'y')])
    >>> result.index_pairs
    [(0, 0), (1, 1)]
    >>> result[1]
    ('b', 'y')
    >>> result.left.index('b')
    1

    Attributes:
        index_pairs (List[Tuple[int, int]]):
            The matched edges as ``(left index, right index)``, ordered by the left index.
        left (VertexIndex[TLeft]):
            The index of the left vertices.
        right (VertexIndex[TRight]):
            The index of the right vertices.
    """

    __slots__ = ('index_pairs', 'left', 'right')

    def __init__(
            self, index_pairs: List[Tuple[int, int]], left: VertexIndex[TLeft], right: VertexIndex[TRight]
    ) -> None:
        self.index_pairs = index_pairs
        self.left = left
        self.right = right

    @overload
    def __getitem__(self, index: int) -> Edge:
        pass  # pragma: no cover

    @overload
    def __getitem__(self, index: slice) -> List[Edge]:
        pass  # pragma: no cover

    def __getitem__(self, index: Union[int, slice]) -> Union[Edge, List[Edge]]:
        if isinstance(index, slice):
            return [self._edge(pair) for pair in self.index_pairs[index]]
        return self._edge(self.index_pairs[index])

    def __len__(self) -> int:
        return len(self.index_pairs)

    def __eq__(self, other):
        if isinstance(other, MappedMatching):
            return list(self) == list(other)
        elif isinstance(other, list):
            return list(self) == other
        else:
            return NotImplemented

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, list(self))

    def as_dict(self) -> Dict[TLeft, TRight]:
        """Returns the matching as a dictionary from left to right vertices."""
        return dict(self)

    def _edge(self, pair: Tuple[int, int]) -> Edge:
        left, right = pair
        return self.left[left], self.right[right]


def _solve(edges: Iterable[Edge], bound: Optional[int]=None) -> Tuple[IndexedGraph, HopcroftKarp]:
    if bound is not None and bound < 0:
        raise ValueError("The bound must not be negative")
    graph = IndexedGraph(edges)
    logger.debug("Matching %r", graph)
    engine = HopcroftKarp(graph.adjacency, len(graph.right))
    engine.run(bound)
    return graph, engine


def matching(edges: Iterable[Edge]) -> List[Edge]:
    """Finds a maximum matching in the bipartite graph given by its edges.

    Args:
        edges: The edges of the graph as ``(left, right)`` pairs. Duplicates are ignored.

    Returns:
        The edges of a maximum matching, ordered by the first occurrence of their left vertex in ``edges``.
        If there are multiple maximum matchings, any one of them may be returned.
    """
    graph, engine = _solve(edges)
    return graph.from_indices(engine.pairs())


def matching_mapped(edges: Iterable[Edge]) -> MappedMatching:
    """Finds a maximum matching like `matching`, but returns it as a `MappedMatching`."""
    graph, engine = _solve(edges)
    return MappedMatching(list(engine.pairs()), graph.left, graph.right)


def matching_size(edges: Iterable[Edge]) -> int:
    """Returns the size of a maximum matching in the bipartite graph given by its edges."""
    _, engine = _solve(edges)
    return engine.size


def bounded_matching(edges: Iterable[Edge], bound: int) -> List[Edge]:
    """Finds a matching that is either maximum or larger than the given bound.

    The search stops as soon as the matching has more than ``bound`` edges. Hence, the result is a maximum matching
    if the maximum matching has at most ``bound`` edges. Otherwise, it is the first matching found with more than
    ``bound`` edges, which need neither be maximum nor have exactly ``bound + 1`` edges.

    Args:
        edges: The edges of the graph as ``(left, right)`` pairs.
        bound: The size limit, must not be negative.

    Returns:
        The edges of the matching.

    Raises:
        ValueError: If the bound is negative.
    """
    graph, engine = _solve(edges, bound)
    return graph.from_indices(engine.pairs())


def bounded_matching_mapped(edges: Iterable[Edge], bound: int) -> MappedMatching:
    """Same as `bounded_matching`, but returns a `MappedMatching`."""
    graph, engine = _solve(edges, bound)
    return MappedMatching(list(engine.pairs()), graph.left, graph.right)


def bounded_matching_size(edges: Iterable[Edge], bound: int) -> int:
    """Returns the size of the matching found by `bounded_matching`.

    The result is the size of a maximum matching if that is at most ``bound``, otherwise some number larger
    than ``bound``.
    """
    _, engine = _solve(edges, bound)
    return engine.size
