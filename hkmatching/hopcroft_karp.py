# -*- coding: utf-8 -*-
"""Contains the Hopcroft-Karp matching engine working on integer vertex indices.

The engine alternates two phases until no augmenting path is left:

1. A breadth-first search builds layers of left vertices, starting with all unmatched left vertices, and alternating
   between unmatched and matched edges. It stops expanding once the first layer which reaches an unmatched right
   vertex is known.
2. A depth-first search from every unmatched left vertex looks for augmenting paths that strictly follow these
   layers. Every vertex used by a path or found to be a dead end is removed from the layering, so the paths found
   in one phase are vertex-disjoint.

Each phase takes ``O(E)`` time and there are ``O(sqrt(V))`` phases.

>>> engine = HopcroftKarp([[0, 1], [0], [1]], 2)
>>> engine.run()
2
>>> list(engine.pairs())
[(0, 0), (2, 1)]
"""
import logging
from collections import deque
from typing import Deque, Iterator, List, Optional, Sequence, Tuple

__all__ = ['HopcroftKarp', 'UNMATCHED', 'FAKE_INFINITY']

logger = logging.getLogger(__name__)

UNMATCHED = -1
FAKE_INFINITY = -1


class HopcroftKarp(object):
    """Implementation of the Hopcroft-Karp algorithm on a bipartite graph with integer vertices.

    The left vertices are the integers ``0`` to ``len(adjacency) - 1`` and the right vertices are ``0`` to
    ``right_count - 1``. Use an `.IndexedGraph` to get there from arbitrary vertices.

    The matching is kept as two lists, ``pair_left`` and ``pair_right``, which contain either the index of the
    matched partner or `UNMATCHED`. They are always inverse to each other.
    """

    def __init__(self, adjacency: Sequence[Sequence[int]], right_count: int) -> None:
        """Construct the engine for the bipartite graph given by its adjacency lists.

        Args:
            adjacency: For each left vertex, the list of its right neighbours.
                The lists shall not contain duplicates.
            right_count: The number of right vertices.
        """
        self._adjacency = adjacency
        self._reference_distance = FAKE_INFINITY  # type: int
        self._pair_left = [UNMATCHED] * len(adjacency)  # type: List[int]
        self._pair_right = [UNMATCHED] * right_count  # type: List[int]
        self._dist_left = [FAKE_INFINITY] * len(adjacency)  # type: List[int]
        self._size = 0

    @property
    def size(self) -> int:
        """The number of edges in the current matching."""
        return self._size

    @property
    def pair_left(self) -> Sequence[int]:
        return tuple(self._pair_left)

    @property
    def pair_right(self) -> Sequence[int]:
        return tuple(self._pair_right)

    def pairs(self) -> Iterator[Tuple[int, int]]:
        """Yields the matched ``(left, right)`` index pairs ordered by the left index."""
        for left, right in enumerate(self._pair_left):
            if right != UNMATCHED:
                yield left, right

    def add_pair(self, left: int, right: int) -> None:
        """Adds an edge to the current matching, e.g. to continue from a known matching.

        Raises:
            ValueError: If the edge is not in the graph or one of its vertices is already matched.
        """
        if not 0 <= left < len(self._adjacency) or right not in self._adjacency[left]:
            raise ValueError("The edge ({:d}, {:d}) is not part of the graph".format(left, right))
        if self._pair_left[left] != UNMATCHED or self._pair_right[right] != UNMATCHED:
            raise ValueError("The edge ({:d}, {:d}) shares a vertex with the matching".format(left, right))
        self._swap_lr(left, right)
        self._size += 1

    def run(self, bound: Optional[int]=None) -> int:
        """Augments the matching until it is maximum.

        Args:
            bound: If given, stop as soon as the matching has more than ``bound`` edges.

        Returns:
            The size of the final matching.
        """
        phases = 0
        while not self._exceeds(bound):
            augmentations = self.phase(bound)
            if augmentations == 0:
                break
            phases += 1
        logger.debug("Finished after %d phases with a matching of size %d", phases, self._size)
        return self._size

    def phase(self, bound: Optional[int]=None) -> int:
        """Runs a single round of BFS layering and DFS augmentation.

        Args:
            bound: If given, stop the round as soon as the matching has more than ``bound`` edges.

        Returns:
            The number of augmenting paths applied in this round. Zero means that the matching is maximum.
        """
        if not self._bfs_hopcroft_karp():
            return 0
        augmentations = 0
        for left in range(len(self._adjacency)):
            if self._pair_left[left] != UNMATCHED:
                continue
            if self._dfs_hopcroft_karp(left):
                augmentations += 1
                self._size += 1
                if self._exceeds(bound):
                    logger.debug("Matching size %d exceeds the bound %d, stopping early", self._size, bound)
                    break
        logger.debug(
            "Phase with shortest augmenting path length %d applied %d paths, matching size is %d",
            2 * self._reference_distance - 1, augmentations, self._size
        )
        return augmentations

    def has_augmenting_path(self) -> bool:
        """Checks whether the current matching can still be augmented, i.e. whether it is not maximum."""
        return self._bfs_hopcroft_karp()

    def find_augmenting_path(self) -> Optional[List[int]]:
        """Finds a shortest augmenting path for the current matching without applying it.

        Returns:
            The path as alternating left and right indices, starting with an unmatched left vertex
            and ending with an unmatched right vertex, or ``None`` if the matching is maximum.
        """
        if not self._bfs_hopcroft_karp():
            return None
        for left in range(len(self._adjacency)):
            if self._pair_left[left] == UNMATCHED:
                path = self._search(left)
                if path is not None:
                    lefts, rights = path
                    return [vertex for pair in zip(lefts, rights) for vertex in pair]
        return None  # pragma: no cover

    def _exceeds(self, bound: Optional[int]) -> bool:
        return bound is not None and self._size > bound

    def _bfs_hopcroft_karp(self) -> bool:
        vertex_queue = deque()  # type: Deque[int]
        for left_vertex, right_vertex in enumerate(self._pair_left):
            if right_vertex == UNMATCHED:
                vertex_queue.append(left_vertex)
                self._dist_left[left_vertex] = 0
            else:
                self._dist_left[left_vertex] = FAKE_INFINITY
        self._reference_distance = FAKE_INFINITY
        while vertex_queue:
            left_vertex = vertex_queue.popleft()
            distance = self._dist_left[left_vertex]
            if distance >= self._reference_distance != FAKE_INFINITY:
                continue
            for right_vertex in self._adjacency[left_vertex]:
                other_left = self._pair_right[right_vertex]
                if other_left == UNMATCHED:
                    if self._reference_distance == FAKE_INFINITY:
                        self._reference_distance = distance + 1
                elif self._dist_left[other_left] == FAKE_INFINITY:
                    self._dist_left[other_left] = distance + 1
                    vertex_queue.append(other_left)
        return self._reference_distance != FAKE_INFINITY

    def _swap_lr(self, left: int, right: int) -> None:
        self._pair_left[left] = right
        self._pair_right[right] = left

    def _dfs_hopcroft_karp(self, left: int) -> bool:
        path = self._search(left)
        if path is None:
            return False
        lefts, rights = path
        for left_vertex, right_vertex in zip(lefts, rights):
            self._swap_lr(left_vertex, right_vertex)
            self._dist_left[left_vertex] = FAKE_INFINITY
        return True

    def _search(self, root: int) -> Optional[Tuple[List[int], List[int]]]:
        # Explicit stack, augmenting paths can be longer than the recursion limit.
        # lefts[i] is entered through rights[i - 1], which is currently matched to it.
        lefts = [root]
        rights = []  # type: List[int]
        neighbours = [iter(self._adjacency[root])]
        while lefts:
            left = lefts[-1]
            next_distance = self._dist_left[left] + 1
            for right in neighbours[-1]:
                other_left = self._pair_right[right]
                if other_left == UNMATCHED:
                    if next_distance == self._reference_distance:
                        rights.append(right)
                        return lefts, rights
                elif self._dist_left[other_left] == next_distance:
                    rights.append(right)
                    lefts.append(other_left)
                    neighbours.append(iter(self._adjacency[other_left]))
                    break
            else:
                # Dead end for the rest of this phase
                self._dist_left[left] = FAKE_INFINITY
                lefts.pop()
                neighbours.pop()
                if rights:
                    rights.pop()
        return None
