# -*- coding: utf-8 -*-
"""Contains the dense integer indexing of vertices used by the matching engine.

A `VertexIndex` assigns consecutive integers to hashable vertices in the order in which they are first seen.
An `IndexedGraph` uses two of those, one for each part of the bipartite graph, to turn an arbitrary collection of
edges into integer adjacency lists:

>>> graph = IndexedGraph([('a', 'x'), ('b', 'x'), ('a', 'y')])
>>> graph.adjacency
[[0, 1], [0]]
>>> graph.right[1]
'y'
"""
from typing import Dict, Generic, Hashable, Iterable, Iterator, List, Tuple, TypeVar

__all__ = ['VertexIndex', 'IndexedGraph']

T = TypeVar('T', bound=Hashable)
TLeft = TypeVar('TLeft', bound=Hashable)
TRight = TypeVar('TRight', bound=Hashable)

Edge = Tuple[TLeft, TRight]


class VertexIndex(Generic[T]):
    """Bidirectional mapping between vertices and the integers ``0`` to ``n - 1``.

    Indices are assigned in first-seen order and never change afterwards:

    >>> index = VertexIndex(['c', 'a', 'c', 'b'])
    >>> list(index)
    ['c', 'a', 'b']
    >>> index.index('b')
    2
    """

    __slots__ = ('_indices', '_vertices')

    def __init__(self, vertices: Iterable[T]=()) -> None:
        self._indices = {}  # type: Dict[T, int]
        self._vertices = []  # type: List[T]
        for vertex in vertices:
            self.add(vertex)

    def add(self, vertex: T) -> int:
        """Returns the index of the vertex, assigning the next free index if it has none yet."""
        index = self._indices.get(vertex)
        if index is None:
            index = len(self._vertices)
            self._indices[vertex] = index
            self._vertices.append(vertex)
        return index

    def index(self, vertex: T) -> int:
        """Returns the index of a known vertex.

        Raises:
            KeyError: If the vertex has not been added.
        """
        return self._indices[vertex]

    def vertex(self, index: int) -> T:
        """Returns the vertex for the given index."""
        return self._vertices[index]

    __getitem__ = vertex

    def __contains__(self, vertex) -> bool:
        return vertex in self._indices

    def __iter__(self) -> Iterator[T]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._vertices)


class IndexedGraph(Generic[TLeft, TRight]):
    """The integer adjacency structure of a bipartite graph given by its edges.

    The left and right parts have independent indices, so the same value occurring both as a left and as a right
    vertex denotes two different vertices. Duplicate edges are only stored once. Every edge must be a 2-tuple,
    other pairs like lists or two character strings are rejected.

    Attributes:
        left (VertexIndex[TLeft]):
            The index of the left vertices.
        right (VertexIndex[TRight]):
            The index of the right vertices.
        adjacency (List[List[int]]):
            For every left index, the indices of its right neighbours in the order the edges were given.
        edge_count (int):
            The number of distinct edges.
    """

    __slots__ = ('left', 'right', 'adjacency', 'edge_count')

    def __init__(self, edges: Iterable[Edge]=()) -> None:
        self.left = VertexIndex()  # type: VertexIndex[TLeft]
        self.right = VertexIndex()  # type: VertexIndex[TRight]
        self.adjacency = []  # type: List[List[int]]
        self.edge_count = 0
        seen = set()
        for edge in edges:
            if not isinstance(edge, tuple) or len(edge) != 2:
                raise TypeError("The edge must be a 2-tuple")
            left, right = edge
            left_index = self.left.add(left)
            right_index = self.right.add(right)
            if left_index == len(self.adjacency):
                self.adjacency.append([])
            if (left_index, right_index) not in seen:
                seen.add((left_index, right_index))
                self.adjacency[left_index].append(right_index)
                self.edge_count += 1

    def has_edge(self, left: int, right: int) -> bool:
        """Checks whether the edge between the given left and right index exists."""
        return 0 <= left < len(self.adjacency) and right in self.adjacency[left]

    def index_edge(self, edge: Edge) -> Tuple[int, int]:
        """Translates an edge into its pair of indices.

        Raises:
            KeyError: If one of the vertices is not part of the graph.
        """
        left, right = edge
        return self.left.index(left), self.right.index(right)

    def from_indices(self, pairs: Iterable[Tuple[int, int]]) -> List[Edge]:
        """Translates pairs of indices back into edges of the original vertices."""
        return [(self.left[left], self.right[right]) for left, right in pairs]

    def __repr__(self):
        return '{}(left={:d}, right={:d}, edges={:d})'.format(
            type(self).__name__, len(self.left), len(self.right), self.edge_count
        )
