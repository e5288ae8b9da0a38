import numpy as np
import pytest

from gmmem import MixtureModel, tutorial_sample, tutorial_initial_model


@pytest.fixture
def sample():
    return tutorial_sample(random_state=0)


@pytest.fixture
def initial_model():
    return tutorial_initial_model()


MODELS = [
    MixtureModel([0.5, 0.5], [-1.0, 0.0], [0.2, 0.2]),
    MixtureModel([0.3, 0.7], [0.0, 2.0], [0.4, 0.2]),
    MixtureModel([0.9, 0.1], [1.0, 1.5], [1.0, 0.5]),
    MixtureModel([0.2, 0.5, 0.3], [-0.5, 1.0, 2.5], [0.3, 0.6, 0.3]),
]


@pytest.fixture(params=MODELS, ids=lambda m: repr(m))
def model(request):
    return request.param


@pytest.fixture
def rng():
    return np.random.RandomState(1234)
