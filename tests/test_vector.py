import math

import numpy as np
import pytest

from rayfast import Vector3d


def test_of_and_from_iterable():
    v = Vector3d.of(1, 2, 3)
    assert v == (1.0, 2.0, 3.0)
    assert all(type(c) is float for c in v)
    assert Vector3d.from_iterable(np.array([1.0, 2.0, 3.0])) == v


@pytest.mark.parametrize("values", [(), (1.0, 2.0), (1.0, 2.0, 3.0, 4.0)])
def test_from_iterable_wrong_size(values):
    with pytest.raises(ValueError):
        Vector3d.from_iterable(values)


def test_arithmetic():
    a = Vector3d.of(1, 2, 3)
    b = Vector3d.of(0.5, -1, 2)
    assert a + b == (1.5, 1.0, 5.0)
    assert a - b == (0.5, 3.0, 1.0)
    assert a * 2 == (2.0, 4.0, 6.0)
    assert 2 * a == (2.0, 4.0, 6.0)
    assert a.dot(b) == pytest.approx(0.5 - 2.0 + 6.0)
    assert Vector3d.of(3, 4, 0).length() == pytest.approx(5.0)
    assert math.isclose(Vector3d.of(1, 1, 1).length(), math.sqrt(3))
