# -*- coding: utf-8 -*-
"""Contains functions to check matchings independently of how they were computed.

A set of edges is a matching if no vertex is part of more than one of them. A matching is maximum if and only if
there is no augmenting path, i.e. a path alternating between unmatched and matched edges that starts and ends with
an unmatched vertex. `is_maximum_matching` uses this as a certificate:

>>> edges = [(1, 'a'), (1, 'b'), (2, 'a')]
>>> is_maximum_matching([(1, 'a')], edges)
False
>>> find_augmenting_path([(1, 'a')], edges)
[2, 'a', 1, 'b']
>>> is_maximum_matching([(1, 'b'), (2, 'a')], edges)
True
"""
from typing import Hashable, Iterable, List, Optional, Tuple, TypeVar, Union

from multiset import Multiset

from .hopcroft_karp import HopcroftKarp
from .index import IndexedGraph

__all__ = ['is_matching', 'is_maximum_matching', 'find_augmenting_path']

TLeft = TypeVar('TLeft', bound=Hashable)
TRight = TypeVar('TRight', bound=Hashable)

Edge = Tuple[TLeft, TRight]


def is_matching(matching: Iterable[Edge], edges: Optional[Iterable[Edge]]=None) -> bool:
    """Checks whether the given edges form a matching.

    >>> is_matching([(1, 'a'), (2, 'b')])
    True
    >>> is_matching([(1, 'a'), (2, 'a')])
    False

    Args:
        matching: The edges to check.
        edges: If given, every edge of the matching must also be one of these.

    Returns:
        ``True``, iff every left and every right vertex occurs in at most one edge of the matching.
    """
    matching = list(matching)
    left_degrees = Multiset(left for left, _ in matching)
    right_degrees = Multiset(right for _, right in matching)
    if any(left_degrees[left] > 1 or right_degrees[right] > 1 for left, right in matching):
        return False
    if edges is not None:
        edges = set(edges)
        return all(edge in edges for edge in matching)
    return True


def is_maximum_matching(matching: Iterable[Edge], edges: Iterable[Edge]) -> bool:
    """Checks whether the given edges form a maximum matching of the graph given by ``edges``.

    Raises:
        ValueError: If ``matching`` is not a matching with edges from ``edges``.
    """
    return not _seeded_engine(matching, edges)[1].has_augmenting_path()


def find_augmenting_path(matching: Iterable[Edge], edges: Iterable[Edge]) -> Optional[List[Union[TLeft, TRight]]]:
    """Finds a shortest augmenting path for the given matching.

    Returns:
        The vertices on the path, alternating between left and right vertices, starting with an unmatched left
        vertex and ending with an unmatched right vertex. If the matching is maximum, ``None`` is returned.

    Raises:
        ValueError: If ``matching`` is not a matching with edges from ``edges``.
    """
    graph, engine = _seeded_engine(matching, edges)
    path = engine.find_augmenting_path()
    if path is None:
        return None
    return [graph.left[vertex] if i % 2 == 0 else graph.right[vertex] for i, vertex in enumerate(path)]


def _seeded_engine(matching: Iterable[Edge], edges: Iterable[Edge]) -> Tuple[IndexedGraph, HopcroftKarp]:
    graph = IndexedGraph(edges)
    engine = HopcroftKarp(graph.adjacency, len(graph.right))
    for edge in matching:
        try:
            left, right = graph.index_edge(edge)
        except KeyError:
            raise ValueError("The edge {!r} is not part of the graph".format(edge)) from None
        if not graph.has_edge(left, right):
            raise ValueError("The edge {!r} is not part of the graph".format(edge))
        engine.add_pair(left, right)
    return graph, engine
