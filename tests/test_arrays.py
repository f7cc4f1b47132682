import pytest

from algokit.arrays import (
    can_arrange,
    chalk_replacer,
    decrypt,
    divide_players,
    find_length_of_shortest_subarray,
    longest_square_streak,
    longest_subarray,
    max_matrix_sum,
    maximum_beauty,
    maximum_subarray_sum,
    min_subarray,
    minimized_maximum,
    missing_rolls,
    spiral_matrix,
)
from algokit.nodes import build_linked_list


def _is_sorted(values):
    return all(a <= b for a, b in zip(values, values[1:]))


def _removal_leaves_sorted(arr, length):
    return any(
        _is_sorted(arr[:i] + arr[i + length:]) for i in range(len(arr) - length + 1)
    )


def test_can_arrange_true_for_pairs_with_divisible_sums():
    assert can_arrange([1, 2, 3, 4, 5, 10, 6, 7, 8, 9], 5) is True


def test_can_arrange_false_when_pairs_do_not_fit():
    assert can_arrange([1, 2, 3, 4, 5, 6], 10) is False


def test_can_arrange_handles_negative_values():
    assert can_arrange([-1, 1, -7, 7], 3) is True


def test_can_arrange_odd_zero_remainders():
    assert can_arrange([5, 1, 4], 5) is False


def test_shortest_subarray_sorted_input_needs_nothing():
    assert find_length_of_shortest_subarray([1, 2, 3]) == 0


def test_shortest_subarray_worked_example():
    assert find_length_of_shortest_subarray([1, 2, 3, 10, 4, 2, 3, 5]) == 3


def test_shortest_subarray_strictly_decreasing():
    arr = [5, 4, 3, 2, 1]
    assert find_length_of_shortest_subarray(arr) == len(arr) - 1


@pytest.mark.parametrize(
    "arr,expected",
    [([1, 2, 3, 10, 4, 2, 3, 5], 3), ([6, 3, 10, 11, 15, 20, 13, 3, 18, 12], 8)],
)
def test_shortest_subarray_removal_leaves_sorted(arr, expected):
    length = find_length_of_shortest_subarray(arr)
    assert length == expected
    assert _removal_leaves_sorted(arr, length) is True
    assert _removal_leaves_sorted(arr, length - 1) is False


def test_min_subarray_already_divisible():
    assert min_subarray([1, 2, 3], 3) == 0


def test_min_subarray_impossible():
    assert min_subarray([1, 2, 3], 7) == -1


def test_min_subarray_worked_example():
    assert min_subarray([3, 1, 4, 2], 6) == 1


@pytest.mark.parametrize("nums,p", [([6, 3, 5, 2], 9), ([8, 32, 31, 18, 34, 20, 21, 13], 7)])
def test_min_subarray_removal_makes_sum_divisible(nums, p):
    length = min_subarray(nums, p)
    assert 0 < length < len(nums)
    assert any(
        (sum(nums) - sum(nums[i:i + length])) % p == 0
        for i in range(len(nums) - length + 1)
    )


def test_decrypt_zero_key_gives_zeros():
    assert decrypt([2, 4, 9, 3], 0) == [0, 0, 0, 0]


def test_decrypt_worked_example():
    assert decrypt([5, 7, 1, 4], 3) == [12, 10, 16, 13]


@pytest.mark.parametrize("k", [1, 2, 3, -1, -2, -3])
def test_decrypt_total_counts_each_value_abs_k_times(k):
    code = [2, 4, 9, 3]
    assert sum(decrypt(code, k)) == abs(k) * sum(code)


def test_decrypt_negative_key_single_step_is_previous_value():
    code = [2, 4, 9, 3]
    assert decrypt(code, -1) == [code[-1]] + code[:-1]


def test_chalk_replacer_worked_example():
    assert chalk_replacer([5, 1, 5], 22) == 0


def test_chalk_replacer_is_periodic_in_total():
    chalk = [3, 4, 1, 2]
    for k in range(0, 30):
        assert chalk_replacer(chalk, k) == chalk_replacer(chalk, k + sum(chalk))


def test_chalk_replacer_index_satisfies_prefix_bound():
    chalk = [3, 4, 1, 2]
    for k in range(sum(chalk)):
        i = chalk_replacer(chalk, k)
        assert sum(chalk[:i]) <= k < sum(chalk[: i + 1])


def test_max_matrix_sum_even_negatives_gives_abs_total():
    matrix = [[1, -1], [-1, 1]]
    assert max_matrix_sum(matrix) == sum(abs(x) for row in matrix for x in row)


def test_max_matrix_sum_odd_negatives_loses_smallest():
    matrix = [[1, 2, 3], [-1, -2, -3], [1, 2, 3]]
    total = sum(abs(x) for row in matrix for x in row)
    assert max_matrix_sum(matrix) == total - 2


def test_missing_rolls_reaches_mean():
    rolls, mean, n = [1, 5, 6], 3, 4
    result = missing_rolls(rolls, mean, n)
    assert len(result) == n
    assert all(1 <= v <= 6 for v in result)
    assert sum(rolls) + sum(result) == mean * (n + len(rolls))


def test_missing_rolls_impossible():
    assert missing_rolls([1, 2, 3, 4], 6, 4) == []


def test_minimized_maximum_worked_example():
    assert minimized_maximum(6, [11, 6]) == 3


@pytest.mark.parametrize("n,quantities", [(6, [11, 6]), (7, [15, 10, 10]), (1, [100000])])
def test_minimized_maximum_is_least_feasible(n, quantities):
    x = minimized_maximum(n, quantities)
    assert sum(-(-q // x) for q in quantities) <= n
    if x > 1:
        assert sum(-(-q // (x - 1)) for q in quantities) > n


def test_maximum_beauty_worked_example():
    items = [[1, 2], [3, 2], [2, 4], [5, 6], [3, 5]]
    assert maximum_beauty(items, [1, 2, 3, 4, 5, 6]) == [2, 4, 5, 5, 6, 6]


def test_maximum_beauty_nothing_affordable_gives_zero():
    assert maximum_beauty([[10, 1000]], [5]) == [0]


def test_maximum_beauty_monotone_in_limit():
    items = [[4, 7], [1, 3], [9, 20], [2, 2], [6, 8]]
    result = maximum_beauty(items, list(range(12)))
    assert _is_sorted(result)
    assert result[-1] == max(b for _, b in items)


def test_spiral_matrix_pads_with_minus_one():
    head = build_linked_list([0, 1, 2])
    assert spiral_matrix(1, 4, head) == [[0, 1, 2, -1]]


def test_spiral_matrix_three_by_three():
    head = build_linked_list(range(1, 10))
    assert spiral_matrix(3, 3, head) == [[1, 2, 3], [8, 9, 4], [7, 6, 5]]


def test_spiral_matrix_uses_every_value_once():
    values = list(range(15))
    matrix = spiral_matrix(3, 5, build_linked_list(values))
    assert sorted(v for row in matrix for v in row) == values
    assert matrix[0] == values[:5]


def test_spiral_matrix_empty_list():
    assert spiral_matrix(2, 2, None) == [[-1, -1], [-1, -1]]


def test_longest_subarray_worked_example():
    assert longest_subarray([1, 2, 3, 3, 2, 2]) == 2


def test_longest_subarray_all_equal():
    nums = [7, 7, 7, 7]
    assert longest_subarray(nums) == len(nums)


def test_longest_subarray_empty_raises():
    with pytest.raises(ValueError):
        longest_subarray([])


def test_maximum_subarray_sum_worked_example():
    assert maximum_subarray_sum([1, 5, 4, 2, 9, 9, 9], 3) == 15


def test_maximum_subarray_sum_no_distinct_window():
    assert maximum_subarray_sum([4, 4, 4], 3) == 0


def test_maximum_subarray_sum_single_width_is_max():
    nums = [3, 8, 1, 8, 2]
    assert maximum_subarray_sum(nums, 1) == max(nums)


def test_maximum_subarray_sum_full_width_distinct():
    nums = [3, 8, 1, 2]
    assert maximum_subarray_sum(nums, len(nums)) == sum(nums)


def test_divide_players_worked_example():
    assert divide_players([3, 2, 5, 1, 3, 4]) == 22


def test_divide_players_two_players():
    assert divide_players([3, 4]) == 3 * 4


def test_divide_players_impossible():
    assert divide_players([1, 1, 2, 3]) == -1


def test_divide_players_empty_raises():
    with pytest.raises(ValueError):
        divide_players([])


def test_longest_square_streak_worked_example():
    assert longest_square_streak([4, 3, 6, 16, 8, 2]) == 3


def test_longest_square_streak_none():
    assert longest_square_streak([2, 3, 5, 6, 7]) == -1


def test_longest_square_streak_full_chain():
    nums = [256, 2, 16, 4]
    assert longest_square_streak(nums) == len(nums)