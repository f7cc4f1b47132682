import pytest

from algokit.heaps import find_kth_largest, max_k_elements, min_groups, smallest_chair


@pytest.mark.parametrize("k", [1, 2, 4, 9])
def test_find_kth_largest(k):
    nums = [3, 2, 3, 1, 2, 4, 5, 5, 6]
    assert find_kth_largest(nums, k) == sorted(nums, reverse=True)[k - 1]


def test_find_kth_largest_errors():
    with pytest.raises(ValueError):
        find_kth_largest([1, 2], 0)
    with pytest.raises(ValueError):
        find_kth_largest([], 1)


def test_smallest_chair_example():
    assert smallest_chair([[1, 4], [2, 3], [4, 6]], 1) == 1


def test_smallest_chair_all_overlapping_uses_every_chair():
    times = [[3, 20], [1, 15], [2, 30], [5, 25]]
    chairs = [smallest_chair(times, i) for i in range(len(times))]
    assert sorted(chairs) == list(range(len(times)))


def test_smallest_chair_reuses_freed_chair():
    times = [[1, 2], [2, 3], [3, 4]]
    chairs = {smallest_chair(times, i) for i in range(len(times))}
    assert len(chairs) == 1


def test_smallest_chair_unknown_friend():
    with pytest.raises(ValueError):
        smallest_chair([[1, 2]], 5)


def test_max_k_elements_single_step_is_max():
    nums = [4, 19, 7, 2]
    assert max_k_elements(nums, 1) == max(nums)


def test_min_groups_example():
    assert min_groups([[5, 10], [6, 8], [1, 5], [2, 3], [1, 10]]) == 3


def test_min_groups_identical_and_touching():
    same = [[2, 9]] * 5
    assert min_groups(same) == len(same)
    touching = [[1, 5], [5, 8]]
    assert min_groups(touching) == len(touching)


def test_min_groups_shift_invariant():
    intervals = [[1, 3], [2, 6], [8, 10], [9, 12], [4, 4]]
    shifted = [[a + 100, b + 100] for a, b in intervals]
    assert min_groups(shifted) == min_groups(intervals)
    assert min_groups([[1, 2], [4, 5], [7, 8]]) == min_groups([[1, 2]])