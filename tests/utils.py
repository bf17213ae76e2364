# -*- coding: utf-8 -*-
import hypothesis.strategies as st


def edge_lists(max_vertices=6, max_size=25):
    """Strategy for small random edge lists, possibly with duplicates."""
    vertices = st.integers(min_value=0, max_value=max_vertices - 1)
    return st.lists(st.tuples(vertices, vertices), max_size=max_size)


def reference_matching_size(edges):
    """Maximum matching size computed with simple augmenting paths (Kuhn's algorithm)."""
    adjacency = {}
    for left, right in edges:
        adjacency.setdefault(left, set()).add(right)
    owner = {}

    def try_assign(left, visited):
        for right in adjacency[left]:
            if right not in visited:
                visited.add(right)
                if right not in owner or try_assign(owner[right], visited):
                    owner[right] = left
                    return True
        return False

    return sum(1 for left in adjacency if try_assign(left, set()))


def assert_valid_matching(result, edges):
    edges = set(edges)
    lefts = [left for left, _ in result]
    rights = [right for _, right in result]
    assert len(set(lefts)) == len(lefts), "Left vertex matched twice in {!r}".format(result)
    assert len(set(rights)) == len(rights), "Right vertex matched twice in {!r}".format(result)
    for edge in result:
        assert edge in edges, "Matching contains the edge {!r} which is not in the graph".format(edge)


def chain_edges(n):
    """A graph whose second phase needs an augmenting path through all ``n`` left vertices."""
    edges = []
    for i in range(n):
        if i + 1 < n:
            edges.append((i, i + 1))
        edges.append((i, i))
    return edges
