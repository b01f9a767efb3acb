"""
Unit tests for the grid graph and node model.
"""

import math

import numpy as np
import pytest

from gridpath.errors import InvalidDimensions, InvalidLayout, OutOfBounds
from gridpath.graph import Graph, NodeKind, octile_distance


def coords(nodes) -> list[tuple[int, int]]:
    return [node.coord for node in nodes]


class TestBuild:
    """Test graph construction."""

    def test_node_coordinates_match_position(self, open_graph):
        """Every node should sit at its own coordinates."""
        for x in range(open_graph.width):
            for y in range(open_graph.height):
                node = open_graph.node_at(x, y)
                assert (node.x, node.y) == (x, y)

    def test_node_count(self, open_graph):
        """A 5x5 graph should own 25 nodes."""
        assert len(open_graph) == 25
        assert open_graph.open_count() == 25

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3), (0, 0)])
    def test_non_positive_dimensions_raise(self, width, height):
        """Non-positive sizes should raise InvalidDimensions."""
        with pytest.raises(InvalidDimensions):
            Graph.build(width, height)

    def test_invalid_dimensions_is_value_error(self):
        """InvalidDimensions should be catchable as ValueError."""
        with pytest.raises(ValueError):
            Graph.build(0, 3)

    def test_kind_at_callback(self):
        """kind_at may return NodeKind values or blocked flags."""
        graph = Graph.build(3, 2, lambda x, y: NodeKind.BLOCKED if x == 1 else NodeKind.OPEN)
        assert graph.node_at(1, 0).is_blocked
        assert graph.node_at(1, 1).is_blocked
        assert not graph.node_at(0, 0).is_blocked

        flags = Graph.build(3, 2, lambda x, y: y == 1)
        assert flags.blocked_count() == 3

    def test_from_mask(self):
        """from_mask should block cells where the mask is True."""
        mask = np.zeros((4, 3), dtype=bool)
        mask[2, 1] = True
        graph = Graph.from_mask(mask)

        assert (graph.width, graph.height) == (4, 3)
        assert graph.node_at(2, 1).is_blocked
        assert np.array_equal(graph.blocked_mask(), mask)

    def test_from_mask_rejects_1d(self):
        """A one-dimensional mask is not a board."""
        with pytest.raises(InvalidLayout):
            Graph.from_mask(np.zeros(5, dtype=bool))

    def test_fresh_nodes_are_unvisited(self, open_graph):
        """New nodes should start with infinite cost and no predecessor."""
        for node in open_graph:
            assert math.isinf(node.g_cost)
            assert node.priority == 0
            assert node.predecessor is None


class TestAccessors:
    """Test arena accessors and bounds checks."""

    def test_node_at_out_of_bounds(self, open_graph):
        """node_at outside the grid should raise OutOfBounds."""
        with pytest.raises(OutOfBounds):
            open_graph.node_at(5, 0)
        with pytest.raises(OutOfBounds):
            open_graph.node_at(0, -1)

    def test_out_of_bounds_is_index_error(self, open_graph):
        """OutOfBounds should be catchable as IndexError."""
        with pytest.raises(IndexError):
            open_graph.node_at(-1, -1)

    def test_index_round_trip(self, open_graph):
        """node_by_index(index_of(x, y)) should be node_at(x, y)."""
        index = open_graph.index_of(3, 2)
        assert open_graph.node_by_index(index) is open_graph.node_at(3, 2)

    def test_node_by_index_out_of_range(self, open_graph):
        """Indices outside the arena should raise OutOfBounds."""
        with pytest.raises(OutOfBounds):
            open_graph.node_by_index(25)

    def test_contains_own_nodes_only(self, open_graph):
        """A graph should only contain its own node objects."""
        other = Graph.build(5, 5)
        assert open_graph.node_at(1, 1) in open_graph
        assert other.node_at(1, 1) not in open_graph


class TestAdjacency:
    """Test neighbor lists and blocking."""

    def test_neighbor_order_north_east_south_west(self, open_graph):
        """Neighbors should come back in N, E, S, W order."""
        assert coords(open_graph.neighbors_of(2, 2)) == [(2, 3), (3, 2), (2, 1), (1, 2)]

    def test_corner_has_two_neighbors(self, open_graph):
        """Out-of-bounds neighbors should be skipped."""
        assert coords(open_graph.neighbors_of(0, 0)) == [(0, 1), (1, 0)]
        assert coords(open_graph.neighbors_of(4, 4)) == [(4, 3), (3, 4)]

    def test_no_self_or_diagonal_neighbors(self, open_graph):
        """Neighbors should be exactly one orthogonal step away."""
        for node in open_graph:
            for neighbor in node.neighbors:
                assert neighbor is not node
                assert abs(neighbor.x - node.x) + abs(neighbor.y - node.y) == 1

    def test_blocked_cell_dropped_everywhere(self, open_graph):
        """After blocking a cell no neighbor list should contain it."""
        open_graph.set_blocked(2, 2, True)
        blocked = open_graph.node_at(2, 2)

        for node in open_graph:
            assert blocked not in node.neighbors
        assert coords(open_graph.neighbors_of(2, 3)) == [(2, 4), (3, 3), (1, 3)]

    def test_unblocking_restores_neighbors(self, open_graph):
        """Toggling a cell back should restore every orthogonal edge."""
        before = {node.coord: coords(node.neighbors) for node in open_graph}

        open_graph.set_blocked(2, 2, True)
        open_graph.set_blocked(2, 2, False)

        after = {node.coord: coords(node.neighbors) for node in open_graph}
        assert after == before

    def test_neighbors_never_blocked(self):
        """neighbors_of should never return a blocked node."""
        graph = Graph.build(6, 6, lambda x, y: (x + y) % 3 == 0)
        for node in graph:
            for neighbor in graph.neighbors_of(node.x, node.y):
                assert neighbor.kind == NodeKind.OPEN

    def test_set_blocked_out_of_bounds(self, open_graph):
        """set_blocked outside the grid should raise OutOfBounds."""
        with pytest.raises(OutOfBounds):
            open_graph.set_blocked(7, 7, True)

    def test_toggle_blocked(self, open_graph):
        """toggle_blocked should flip the cell and report the new kind."""
        assert open_graph.toggle_blocked(1, 1) == NodeKind.BLOCKED
        assert open_graph.node_at(1, 1).is_blocked
        assert open_graph.toggle_blocked(1, 1) == NodeKind.OPEN
        assert not open_graph.node_at(1, 1).is_blocked

    def test_neighbors_of_returns_copy(self, open_graph):
        """Mutating the returned list should not change adjacency."""
        open_graph.neighbors_of(2, 2).clear()
        assert len(open_graph.neighbors_of(2, 2)) == 4


class TestDistance:
    """Test the octile distance estimate."""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ((0, 0), (0, 0), 0.0),
            ((0, 0), (0, 1), 1.0),
            ((0, 0), (3, 0), 3.0),
            ((0, 0), (1, 1), 1.4),
            ((0, 0), (3, 1), 3.4),
            ((4, 4), (0, 0), 5.6),
        ],
    )
    def test_octile_values(self, open_graph, a, b, expected):
        """distance = 1.4 * min + (max - min)."""
        node_a = open_graph.node_at(*a)
        node_b = open_graph.node_at(*b)
        assert open_graph.distance(node_a, node_b) == pytest.approx(expected)

    def test_symmetric(self, open_graph):
        """Distance should not depend on argument order."""
        a, b = open_graph.node_at(0, 3), open_graph.node_at(4, 1)
        assert open_graph.distance(a, b) == open_graph.distance(b, a)

    def test_never_exceeds_manhattan(self):
        """The estimate should never overestimate orthogonal hop count."""
        for dx in range(6):
            for dy in range(6):
                assert octile_distance(dx, dy) <= dx + dy + 1e-9


class TestReset:
    """Test board and search-state resets."""

    def _dirty(self, graph):
        for node in graph:
            node.g_cost = 3.0
            node.priority = 7.0
            node.predecessor = 0

    def test_reset_all_clears_layout(self, open_graph):
        """reset_all should clear search state and open every cell."""
        open_graph.set_blocked(1, 1, True)
        self._dirty(open_graph)

        open_graph.reset_all()

        assert open_graph.blocked_count() == 0
        assert open_graph.node_at(1, 1) in open_graph.node_at(1, 2).neighbors
        for node in open_graph:
            assert math.isinf(node.g_cost)
            assert node.priority == 0
            assert node.predecessor is None

    def test_reset_search_state_keeps_layout(self, open_graph):
        """reset_search_state_only should leave blocked cells in place."""
        open_graph.set_blocked(1, 1, True)
        self._dirty(open_graph)

        open_graph.reset_search_state_only()

        assert open_graph.node_at(1, 1).is_blocked
        for node in open_graph:
            assert math.isinf(node.g_cost)
            assert node.predecessor is None
