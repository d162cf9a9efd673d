import pytest

from gridslam import vector_util as vu


def test_sum_vector_matches_builtin():
    values = [1.5, 2.0, -3.25, 4.0]
    assert vu.sum_vector(values) == pytest.approx(sum(values))
    assert vu.sum_vector(values, 10.0) == pytest.approx(sum(values) + 10.0)
    assert vu.sum_vector([], 0) == 0


def test_add_to_each_element_round_trip():
    values = [1.0, -2.0, 3.5]
    shifted = vu.add_to_each_element(values, 2.5)
    assert len(shifted) == len(values)
    assert vu.add_to_each_element(shifted, -2.5) == pytest.approx(values)
    assert values == [1.0, -2.0, 3.5]


def test_multiply_each_element_round_trip():
    values = [1.0, -2.0, 3.5]
    scaled = vu.multiply_each_element(values, 4.0)
    assert vu.multiply_each_element(scaled, 0.25) == pytest.approx(values)


def test_add_vector_elements():
    a1 = [1, 2, 3]
    a2 = [10, 20, 30, 40]
    result = vu.add_vector_elements(a1, a2)
    assert len(result) == len(a1)
    assert [r - y for r, y in zip(result, a2)] == a1


def test_add_vector_elements_rejects_short_second():
    with pytest.raises(ValueError):
        vu.add_vector_elements([1, 2, 3], [1, 2])


def test_min_element_default_zero_floor():
    assert vu.min_element([3, 5, 7]) == 0
    assert vu.min_element([3, -5, 7]) == -5
    assert vu.min_element([3, 5, 7], 100) == 3
    assert vu.min_element([], 4) == 4