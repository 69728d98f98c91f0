import pytest

from dsakit.dynamic import matrix_chain_order, minimal_badness


def _left_to_right_cost(dims):
    total = 0
    rows = dims[0]
    for k in range(1, len(dims) - 1):
        total += rows * dims[k] * dims[k + 1]
    return total


def test_known_chain():
    assert matrix_chain_order([1, 2, 3, 4]) == 18


def test_single_matrix_costs_nothing():
    assert matrix_chain_order([10, 20]) == 0


def test_two_matrices_have_one_order():
    assert matrix_chain_order([2, 3, 4]) == 2 * 3 * 4


@pytest.mark.parametrize(
    "dims", [[40, 20, 30, 10, 30], [10, 20, 30, 40, 30], [5, 4, 6, 2, 7, 3]]
)
def test_not_worse_than_sequential(dims):
    assert matrix_chain_order(dims) <= _left_to_right_cost(dims)


@pytest.mark.parametrize("dims", [[40, 20, 30, 10, 30], [5, 4, 6, 2, 7, 3]])
def test_reversed_chain_has_same_cost(dims):
    assert matrix_chain_order(dims) == matrix_chain_order(list(reversed(dims)))


@pytest.mark.parametrize("dims", [[], [3]])
def test_too_few_dimensions(dims):
    with pytest.raises(ValueError):
        matrix_chain_order(dims)


def test_negative_dimension_rejected():
    with pytest.raises(ValueError):
        matrix_chain_order([2, -3, 4])


def test_permutation_has_no_badness():
    assert minimal_badness([3, 1, 5, 2, 4]) == 0


def test_everyone_wants_first():
    assert minimal_badness([1, 1, 1]) == 3


def test_order_does_not_matter():
    ranks = [7, 3, 3, 1, 2, 7, 6]
    assert minimal_badness(ranks) == minimal_badness(sorted(ranks, reverse=True))


def test_empty_field():
    assert minimal_badness([]) == 0


def test_invalid_rank():
    with pytest.raises(ValueError):
        minimal_badness([1, 0, 2])