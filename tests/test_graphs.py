import pytest

from algosuite.graphs import (
    can_finish,
    check_if_prerequisite,
    closest_meeting_node,
    count_paths,
    eventual_safe_nodes,
    find_min_height_trees,
    find_order,
    largest_path_value,
    max_target_nodes,
    max_target_nodes_parity,
    snakes_and_ladders,
)

ACYCLIC = [
    (4, [[1, 0], [2, 0], [3, 1], [3, 2]]),
    (3, []),
    (5, [[4, 3], [3, 2], [2, 1], [1, 0]]),
]
CYCLIC = [
    (2, [[1, 0], [0, 1]]),
    (3, [[0, 1], [1, 2], [2, 0]]),
]


@pytest.mark.parametrize("count, prerequisites", ACYCLIC)
def test_find_order_is_valid_topological_order(count, prerequisites):
    order = find_order(count, prerequisites)
    assert sorted(order) == list(range(count))
    position = {course: i for i, course in enumerate(order)}
    for course, prerequisite in prerequisites:
        assert position[prerequisite] < position[course]


@pytest.mark.parametrize("count, prerequisites", ACYCLIC)
def test_can_finish_acyclic(count, prerequisites):
    assert can_finish(count, prerequisites) is True


@pytest.mark.parametrize("count, prerequisites", CYCLIC)
def test_cycles_block_everything(count, prerequisites):
    assert can_finish(count, prerequisites) is False
    assert find_order(count, prerequisites) == []


def test_min_height_trees_single_node():
    assert find_min_height_trees(1, []) == [0]


def test_min_height_trees_star_centre():
    centre = 3
    edges = [[centre, leaf] for leaf in (0, 1, 2, 4, 5)]
    assert find_min_height_trees(6, edges) == [centre]


def test_min_height_trees_two_nodes():
    assert sorted(find_min_height_trees(2, [[0, 1]])) == [0, 1]


def test_eventual_safe_nodes_closed_under_successors():
    graph = [[1, 2], [2, 3], [5], [0], [5], [], []]
    safe = eventual_safe_nodes(graph)
    assert safe == sorted(safe)
    assert set(safe) >= {node for node, out in enumerate(graph) if not out}
    for node in safe:
        assert all(target in safe for target in graph[node])
    # nodes 0, 1 and 3 lie on a cycle
    assert not {0, 1, 3} & set(safe)


def test_snakes_and_ladders_worked_example():
    board = [
        [-1, -1, -1, -1, -1, -1],
        [-1, -1, -1, -1, -1, -1],
        [-1, -1, -1, -1, -1, -1],
        [-1, 35, -1, -1, 13, -1],
        [-1, -1, -1, -1, -1, -1],
        [-1, 15, -1, -1, -1, -1],
    ]
    assert snakes_and_ladders(board) == 4


def test_snakes_and_ladders_single_square():
    assert snakes_and_ladders([[-1]]) == 0


def test_snakes_and_ladders_ladder_never_hurts():
    empty = [[-1] * 6 for _ in range(6)]
    with_ladder = [row[:] for row in empty]
    # square 2 sits in the bottom row, second column
    with_ladder[5][1] = 36
    assert snakes_and_ladders(with_ladder) <= snakes_and_ladders(empty)
    assert snakes_and_ladders(with_ladder) == 1


def test_check_if_prerequisite_transitive():
    result = check_if_prerequisite(3, [[0, 1], [1, 2]], [[0, 2], [2, 0], [1, 2]])
    assert result == [True, False, True]


def test_check_if_prerequisite_without_prerequisites():
    queries = [[0, 1], [1, 0], [0, 0]]
    assert check_if_prerequisite(2, [], queries) == [False] * len(queries)


def test_largest_path_value_cycle():
    assert largest_path_value("ab", [[0, 1], [1, 0]]) == -1


def test_largest_path_value_single_colour_chain():
    colors = "aaaa"
    edges = [[0, 1], [1, 2], [2, 3]]
    assert largest_path_value(colors, edges) == len(colors)


def test_largest_path_value_lone_node():
    assert largest_path_value("z", []) == 1


def test_count_paths_worked_example():
    roads = [
        [0, 6, 7], [0, 1, 2], [1, 2, 3], [1, 3, 3], [6, 3, 3],
        [3, 5, 1], [6, 5, 1], [2, 5, 1], [0, 4, 5], [4, 6, 2],
    ]
    assert count_paths(7, roads) == 4


def test_count_paths_single_route():
    assert count_paths(3, [[0, 1, 5], [1, 2, 5], [0, 2, 100]]) == 1


def test_closest_meeting_node_same_start():
    assert closest_meeting_node([1, 2, -1], 1, 1) == 1


def test_closest_meeting_node_unreachable():
    assert closest_meeting_node([-1, -1], 0, 1) == -1


def test_closest_meeting_node_tie_prefers_smaller_index():
    assert closest_meeting_node([1, 0], 0, 1) == 0


def test_max_target_nodes_zero_distance_counts_self():
    edges1 = [[0, 1], [1, 2]]
    edges2 = [[0, 1]]
    assert max_target_nodes(edges1, edges2, 0) == [1] * (len(edges1) + 1)


def test_max_target_nodes_large_k_reaches_everything():
    edges1 = [[0, 1], [0, 2], [2, 3]]
    edges2 = [[0, 1], [1, 2]]
    n, m = len(edges1) + 1, len(edges2) + 1
    assert max_target_nodes(edges1, edges2, 10) == [n + m] * n


def test_max_target_nodes_monotone_in_k():
    edges1 = [[0, 1], [0, 2], [2, 3], [2, 4]]
    edges2 = [[0, 1], [0, 2], [0, 3], [2, 7], [1, 4], [4, 5], [4, 6]]
    previous = max_target_nodes(edges1, edges2, 0)
    for k in range(1, 6):
        current = max_target_nodes(edges1, edges2, k)
        assert all(a <= b for a, b in zip(previous, current))
        previous = current


def test_max_target_nodes_parity_two_nodes():
    assert max_target_nodes_parity([[0, 1]], []) == [2, 2]


def test_max_target_nodes_parity_same_class_same_value():
    edges1 = [[0, 1], [0, 2], [2, 3], [2, 4]]
    edges2 = [[0, 1], [0, 2], [0, 3], [2, 7], [1, 4], [4, 5], [4, 6]]
    result = max_target_nodes_parity(edges1, edges2)
    assert len(result) == len(edges1) + 1
    # nodes 0, 3, 4 share a parity; nodes 1, 2 share the other
    assert result[0] == result[3] == result[4]
    assert result[1] == result[2]
    assert all(value <= len(edges1) + len(edges2) + 2 for value in result)