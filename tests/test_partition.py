import pytest

from mcpi.errors import InvalidInputWarning
from mcpi.partition import partition, validate_input


@pytest.mark.parametrize("total", [0, 1, 7, 100, 1_000_003])
@pytest.mark.parametrize("workers", [1, 2, 3, 4, 16])
def test_shares_sum_to_total(total, workers):
    shares = partition(total, workers)
    assert len(shares) == workers
    assert sum(shares) == total
    assert shares[:-1] == [total // workers] * (workers - 1)
    assert shares[-1] == total // workers + total % workers


def test_seven_points_three_workers():
    assert partition(7, 3) == [2, 2, 3]


def test_fewer_points_than_workers():
    assert partition(2, 4) == [0, 0, 0, 2]


def test_zero_points():
    assert partition(0, 4) == [0, 0, 0, 0]


def test_no_workers():
    with pytest.raises(ValueError):
        partition(10, 0)


def test_validate_non_positive():
    with pytest.warns(InvalidInputWarning, match="must be positive"):
        assert not validate_input(0, 4)
    with pytest.warns(InvalidInputWarning):
        assert not validate_input(-5, 1)


def test_validate_fewer_points_than_workers():
    with pytest.warns(InvalidInputWarning, match="fewer points"):
        assert validate_input(3, 4)


def test_validate_ok(recwarn):
    assert validate_input(100, 4)
    assert len(recwarn) == 0
