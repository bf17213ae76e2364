# -*- coding: utf-8 -*-
import logging
from typing import Dict

from hypothesis import given
import pytest

from hkmatching.hopcroft_karp import FAKE_INFINITY, UNMATCHED, HopcroftKarp
from hkmatching.index import IndexedGraph

from .utils import assert_valid_matching, chain_edges, edge_lists, reference_matching_size


def engine_for(edges):
    graph = IndexedGraph(edges)
    return graph, HopcroftKarp(graph.adjacency, len(graph.right))


def assert_consistent(engine):
    for left, right in enumerate(engine.pair_left):
        if right != UNMATCHED:
            assert engine.pair_right[right] == left
    for right, left in enumerate(engine.pair_right):
        if left != UNMATCHED:
            assert engine.pair_left[left] == right
    assert engine.size == sum(1 for right in engine.pair_left if right != UNMATCHED)


class TestHopcroftKarp:
    """
    Testing the implementation of the Hopcroft Karp algorithm.
    """

    @pytest.mark.parametrize(
        '   graph,                                                                  expected_size',
        [
            ({0: ["v0", "v1"], 1: ["v0", "v4"], 2: ["v2", "v3"], 3: ["v0", "v4"], 4: ["v0", "v3"]},     5),
            ({'A': [1, 2], 'B': [2, 3], 'C': [2], 'D': [3, 4, 5, 6], 'E': [4, 7], 'F': [7], 'G': [7]},  6),
            ({1: ['a', 'c'], 2: ['a', 'c'], 3: ['c', 'b'], 4: ['e']},                                   4),
            ({'A': [3, 4], 'B': [3, 4], 'C': [3], 'D': [1, 5, 7], 'E': [1, 2, 7], 'F': [2, 8], 'G': [6],
              'H': [2, 4, 8]},                                                                          7),
        ]
    )  # yapf: disable
    def test_hopcroft_karp(self, graph: Dict, expected_size: int):
        edges = [(left, right) for left, rights in graph.items() for right in rights]
        indexed, engine = engine_for(edges)

        assert engine.run() == expected_size
        assert engine.size == expected_size
        assert_consistent(engine)
        assert_valid_matching(indexed.from_indices(engine.pairs()), edges)

    def test_empty_graph(self):
        engine = HopcroftKarp([], 0)

        assert engine.run() == 0
        assert list(engine.pairs()) == []
        assert not engine.has_augmenting_path()

    def test_phases(self):
        # The first phase matches i to i + 1 greedily, leaving the last left vertex free
        n = 10
        _, engine = engine_for(chain_edges(n))

        assert engine.phase() == n - 1
        assert engine.phase() == 1
        assert engine.phase() == 0
        assert engine.size == n
        assert_consistent(engine)

    def test_long_augmenting_path(self):
        n = 5000
        edges = chain_edges(n)
        indexed, engine = engine_for(edges)

        assert engine.run() == n
        assert_valid_matching(indexed.from_indices(engine.pairs()), edges)

    def test_paths_in_one_phase_are_vertex_disjoint(self):
        # Both free left vertices 1 and 2 can only augment through left vertex 0
        edges = [(0, 'a'), (0, 'b'), (1, 'a'), (2, 'a')]
        _, engine = engine_for(edges)
        engine.add_pair(0, 0)

        assert engine.phase() == 1
        assert engine.size == 2
        assert engine.phase() == 0
        assert_consistent(engine)

    def test_bound(self):
        edges = [(i, i) for i in range(10)]
        _, engine = engine_for(edges)

        assert engine.run(bound=3) == 4
        assert engine.run(bound=3) == 4
        assert engine.run() == 10

    def test_bound_above_maximum(self):
        _, engine = engine_for([(0, 0), (1, 0), (2, 0)])

        assert engine.run(bound=5) == 1

    def test_add_pair(self):
        _, engine = engine_for([(0, 'a'), (0, 'b'), (1, 'a')])
        engine.add_pair(0, 0)

        assert engine.size == 1
        assert engine.pair_left == (0, UNMATCHED)
        assert engine.pair_right == (0, UNMATCHED)
        assert engine.has_augmenting_path()
        assert engine.run() == 2
        assert sorted(engine.pairs()) == [(0, 1), (1, 0)]

    @pytest.mark.parametrize('left, right', [(0, 1), (2, 0), (0, 5)])
    def test_add_pair_not_in_graph(self, left, right):
        _, engine = engine_for([(0, 'a'), (1, 'a'), (1, 'b')])
        with pytest.raises(ValueError):
            engine.add_pair(left, right)

    def test_add_pair_conflict(self):
        _, engine = engine_for([(0, 'a'), (1, 'a'), (0, 'b')])
        engine.add_pair(0, 0)

        with pytest.raises(ValueError):
            engine.add_pair(1, 0)

        with pytest.raises(ValueError):
            engine.add_pair(0, 1)

    def test_find_augmenting_path(self):
        _, engine = engine_for([(0, 'a'), (0, 'b'), (1, 'a')])
        engine.add_pair(0, 0)

        assert engine.find_augmenting_path() == [1, 0, 0, 1]
        assert engine.size == 1

        engine.run()

        assert engine.find_augmenting_path() is None

    def test_distances_after_bfs(self):
        _, engine = engine_for([(0, 'a'), (0, 'b'), (1, 'a'), (2, 'c')])
        engine.add_pair(0, 0)
        engine.add_pair(2, 2)

        assert engine.has_augmenting_path()
        assert engine._dist_left == [1, 0, FAKE_INFINITY]
        assert engine._reference_distance == 2

    def test_logging(self, caplog):
        caplog.set_level(logging.DEBUG, logger='hkmatching.hopcroft_karp')
        _, engine = engine_for(chain_edges(3))
        engine.run()

        assert 'Finished after 2 phases with a matching of size 3' in caplog.text

    @given(edge_lists())
    def test_maximum(self, edges):
        indexed, engine = engine_for(edges)
        while engine.phase():
            assert_consistent(engine)

        assert engine.size == reference_matching_size(edges)
        assert not engine.has_augmenting_path()
        assert_valid_matching(indexed.from_indices(engine.pairs()), edges)
