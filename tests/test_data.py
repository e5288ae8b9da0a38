import numpy as np
import pytest

from gmmem import generate_sample, tutorial_sample, tutorial_initial_model
from gmmem.utils import check_random_state


def test_generate_sample_concatenates_groups():
    data = generate_sample([0.0, 100.0], [1.0, 1.0], [30, 20], random_state=0)

    assert data.shape == (50,)
    assert np.all(data[:30] < 50) and np.all(data[30:] > 50)


def test_tutorial_sample_is_reproducible():
    a = tutorial_sample(random_state=7)
    b = tutorial_sample(random_state=np.random.RandomState(7))

    np.testing.assert_array_equal(a, b)
    assert a.shape == (100,)
    assert abs(np.mean(a[:50])) < 0.3
    assert abs(np.mean(a[50:]) - 2.0) < 0.2


def test_tutorial_initial_model():
    model = tutorial_initial_model()

    np.testing.assert_array_equal(model.weights, [0.5, 0.5])
    np.testing.assert_array_equal(model.means, [-1.0, 0.0])
    np.testing.assert_array_equal(model.stddevs, [0.2, 0.2])


def test_check_random_state():
    rng = np.random.RandomState(0)

    assert check_random_state(rng) is rng
    assert isinstance(check_random_state(None), np.random.RandomState)
    with pytest.raises(ValueError):
        check_random_state("seed")
