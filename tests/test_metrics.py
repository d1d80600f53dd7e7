import math

import pytest

from algoritma.metrics import mean_squared_error


def test_source_example():
    predicted = [1.5, 5.1, 7.3, 7.7, 8.0, 3.9]
    actual = [2.5, 3.4, 7.0, 7.4, 7.8, 3.9]
    assert mean_squared_error(predicted, actual) == pytest.approx(0.685)


def test_length_mismatch_raises():
    with pytest.raises(ValueError, match="same"):
        mean_squared_error([7.5, 4.5, 3.2], [7.1, 5.5])


def test_identical_sequences_have_zero_error():
    values = [1.0, -2.5, 3.25, 100.0]
    assert mean_squared_error(values, values) == 0.0


def test_symmetric():
    a = [1.0, 2.0, 3.0, 4.5]
    b = [0.5, 2.5, 1.0, 4.0]
    assert mean_squared_error(a, b) == pytest.approx(mean_squared_error(b, a))


def test_constant_offset():
    a = [1.0, 2.0, 3.0]
    b = [x + 2.0 for x in a]
    assert mean_squared_error(a, b) == pytest.approx(4.0)


def test_empty_is_nan():
    result = mean_squared_error([], [])
    assert isinstance(result, float)
    assert math.isnan(result)
    assert str(result) == "nan"