from functools import reduce
from itertools import accumulate, pairwise
from operator import xor

import pytest

from contestkit.weekly306_314 import (
    MaxSegmentTree,
    edge_score,
    find_array,
    hardest_worker,
    largest_local,
    length_of_lis,
    min_groups,
    most_frequent_even,
    partition_string,
    robot_with_string,
    smallest_number,
)


@pytest.mark.parametrize("n", [3, 4, 6])
def test_largest_local_increasing_grid(n):
    grid = [[i * n + j for j in range(n)] for i in range(n)]
    result = largest_local(grid)
    assert len(result) == n - 2
    for i, row in enumerate(result):
        assert row == grid[i + 2][2:]


def test_largest_local_entries_dominate_windows():
    grid = [[9, 9, 8, 1], [5, 6, 2, 6], [8, 2, 6, 4], [6, 2, 2, 2]]
    result = largest_local(grid)
    for i, row in enumerate(result):
        for j, value in enumerate(row):
            window = [v for r in grid[i:i + 3] for v in r[j:j + 3]]
            assert value in window
            assert all(value >= v for v in window)


def test_largest_local_too_small():
    assert largest_local([[1, 2], [3, 4]]) == []


def test_edge_score_example():
    assert edge_score([1, 0, 0, 0, 0, 7, 7, 5]) == 7


def test_edge_score_tie_prefers_smaller_node():
    assert edge_score([2, 0, 0, 2]) == 0


def test_edge_score_single_target():
    edges = [3, 3, 3, 3]
    assert edge_score(edges) == edges[0]


def test_edge_score_empty():
    assert edge_score([]) == -1


@pytest.mark.parametrize("pattern", ["", "I", "D", "IIIDIDDD", "DDD", "IDID", "DDIIDI"])
def test_smallest_number_follows_pattern(pattern):
    result = smallest_number(pattern)
    assert sorted(result) == [str(d) for d in range(1, len(pattern) + 2)]
    shape = "".join("I" if b > a else "D" for a, b in pairwise(result))
    assert shape == pattern


def test_smallest_number_examples():
    assert smallest_number("IIIDIDDD") == "123549876"
    assert smallest_number("DDD") == "4321"


def test_smallest_number_all_increasing_is_sorted():
    result = smallest_number("IIII")
    assert result == "".join(sorted(result))


def test_smallest_number_invalid_pattern():
    with pytest.raises(ValueError):
        smallest_number("IX")


def test_most_frequent_even_tie_prefers_smaller():
    assert most_frequent_even([4, 4, 2, 2]) == 2


def test_most_frequent_even_picks_frequent():
    assert most_frequent_even([4, 4, 4, 9, 2, 2, 8]) == 4


def test_most_frequent_even_none():
    assert most_frequent_even([1, 3, 5]) == -1


def test_partition_string_examples():
    assert partition_string("abacaba") == 4
    assert partition_string("ssssss") == len("ssssss")


def test_partition_string_unique_letters_need_one_part():
    assert partition_string("abcdef") == partition_string("z")


def test_partition_string_repeated_letter():
    text = "qqqqq"
    assert partition_string(text) == len(text)


def test_min_groups_example():
    assert min_groups([[5, 10], [6, 8], [1, 5], [2, 3], [1, 10]]) == 3


def test_min_groups_disjoint():
    assert min_groups([[1, 3], [5, 6], [8, 10], [11, 13]]) == min_groups([[1, 2]])


def test_min_groups_identical_intervals():
    intervals = [[1, 5]] * 4
    assert min_groups(intervals) == len(intervals)


def test_min_groups_touching_endpoints_counted_disjoint():
    assert min_groups([[1, 5], [5, 8]]) == min_groups([[1, 4]])


def test_min_groups_point_interval():
    assert min_groups([[2, 2]]) == min_groups([[1, 9]])


def test_segment_tree_empty_and_updates():
    tree = MaxSegmentTree(10)
    assert tree.query(0, 9) == 0
    assert tree.query(5, 2) == 0
    tree.update(3, 7)
    tree.update(8, 4)
    assert tree.query(0, 9) == 7
    assert tree.query(4, 9) == 4
    assert tree.query(3, 3) == 7
    tree.update(3, 1)
    assert tree.query(0, 9) == 4


def test_segment_tree_out_of_range():
    tree = MaxSegmentTree(4)
    with pytest.raises(IndexError):
        tree.update(4, 1)
    with pytest.raises(IndexError):
        tree.query(0, 4)


def test_segment_tree_needs_positive_size():
    with pytest.raises(ValueError):
        MaxSegmentTree(0)


def test_length_of_lis_examples():
    assert length_of_lis([4, 2, 1, 4, 3, 4, 5, 8, 15], 3) == 5
    assert length_of_lis([7, 4, 5, 1, 8, 12, 4, 7], 5) == 4
    assert length_of_lis([1, 5], 1) == 1


def test_length_of_lis_consecutive_run():
    nums = list(range(1, 10))
    assert length_of_lis(nums, 1) == len(nums)


def test_length_of_lis_decreasing():
    assert length_of_lis([9, 7, 5, 3], 10) == length_of_lis([9], 10)


def test_length_of_lis_empty():
    assert length_of_lis([], 3) == 0


def test_hardest_worker_examples():
    assert hardest_worker(10, [[0, 3], [2, 5], [0, 9], [1, 15]]) == 1
    assert hardest_worker(26, [[1, 1], [3, 7], [2, 12], [7, 17]]) == 3
    assert hardest_worker(2, [[0, 10], [1, 20]]) == 0


def test_hardest_worker_empty():
    with pytest.raises(ValueError):
        hardest_worker(3, [])


@pytest.mark.parametrize("pref", [[5, 2, 0, 3, 1], [13], [0, 0, 0], [1, 2, 4, 8, 16]])
def test_find_array_round_trip(pref):
    arr = find_array(pref)
    assert len(arr) == len(pref)
    assert list(accumulate(arr, xor)) == pref
    assert reduce(xor, arr) == pref[-1]


def test_find_array_empty():
    with pytest.raises(ValueError):
        find_array([])


def test_robot_with_string_examples():
    assert robot_with_string("zza") == "azz"
    assert robot_with_string("bac") == "abc"
    assert robot_with_string("bdda") == "addb"


@pytest.mark.parametrize("s", ["", "a", "abc", "cba", "bydizfve", "mmmnna"])
def test_robot_with_string_is_permutation(s):
    result = robot_with_string(s)
    assert sorted(result) == sorted(s)
    assert result <= s or result == s


def test_robot_with_string_sorted_input_unchanged():
    s = "aabbcdd"
    assert robot_with_string(s) == s