import numpy as np
import pytest

from gmmem import MixtureModel, InvalidParameters, probability
from gmmem.distribution import NormalDistribution


@pytest.mark.parametrize('weights, means, stddevs', [
    ([0.5, 0.5], [0.0], [1.0, 1.0]),
    ([], [], []),
    ([0.5, 0.6], [0.0, 1.0], [1.0, 1.0]),
    ([1.5, -0.5], [0.0, 1.0], [1.0, 1.0]),
    ([0.5, 0.5], [0.0, 1.0], [1.0, -1.0]),
    ([0.5, 0.5], [0.0, np.inf], [1.0, 1.0]),
    ([[0.5, 0.5]], [0.0, 1.0], [1.0, 1.0]),
])
def test_invalid_parameters_are_rejected(weights, means, stddevs):
    with pytest.raises(InvalidParameters):
        MixtureModel(weights, means, stddevs)


def test_weights_within_tolerance_are_accepted():
    model = MixtureModel([1.0 / 3, 1.0 / 3, 1.0 / 3], [0.0, 1.0, 2.0], [1.0, 1.0, 1.0])

    assert model.n_components == 3


def test_unchecked_models_still_need_matching_lengths():
    MixtureModel([0.9, 0.9], [0.0, 1.0], [0.0, 1.0], check=False)

    with pytest.raises(InvalidParameters):
        MixtureModel([0.5, 0.5], [0.0, 1.0], [1.0], check=False)


def test_model_is_read_only(initial_model):
    with pytest.raises(ValueError):
        initial_model.means[0] = 5.0

    assert initial_model.means[0] == -1.0


def test_model_does_not_alias_its_inputs():
    means = np.array([0.0, 1.0])
    model = MixtureModel([0.5, 0.5], means, [1.0, 1.0])
    means[0] = 3.0

    assert model.means[0] == 0.0


def test_with_parameter_returns_a_new_model(initial_model):
    moved = initial_model.with_parameter('means', 1, 2.0)

    np.testing.assert_array_equal(moved.means, [-1.0, 2.0])
    np.testing.assert_array_equal(initial_model.means, [-1.0, 0.0])
    np.testing.assert_array_equal(moved.stddevs, initial_model.stddevs)

    # a single weight can be swept without renormalizing
    heavy = initial_model.with_parameter('weights', 0, 0.9)
    np.testing.assert_array_equal(heavy.weights, [0.9, 0.5])


@pytest.mark.parametrize('name, component', [('sigma', 0), ('means', 2), ('means', -1)])
def test_with_parameter_checks_its_arguments(initial_model, name, component):
    with pytest.raises(InvalidParameters):
        initial_model.with_parameter(name, component, 1.0)


def test_replace_validates_on_request(initial_model):
    with pytest.raises(InvalidParameters):
        initial_model.replace(check=True, weights=[0.2, 0.2])
    with pytest.raises(InvalidParameters):
        initial_model.replace(variances=[1.0, 1.0])


def test_components_and_from_components(initial_model):
    components = initial_model.components

    assert components == [NormalDistribution(-1.0, 0.2), NormalDistribution(0.0, 0.2)]
    assert MixtureModel.from_components(initial_model.weights, components) == initial_model

    with pytest.raises(InvalidParameters):
        MixtureModel.from_components([1.0], components)


def test_density_integrates_to_one():
    model = MixtureModel([0.3, 0.7], [0.0, 2.0], [0.4, 0.2])
    x, dx = np.linspace(-5.0, 7.0, 24001, retstep=True)

    assert np.sum(model.density(x)) * dx == pytest.approx(1.0, abs=1e-6)
    assert probability(0.0, model)[0] == pytest.approx(model.density([0.0])[0])


def test_variances(initial_model):
    np.testing.assert_allclose(initial_model.variances, [0.04, 0.04])


def test_rvs_is_reproducible():
    model = MixtureModel([0.3, 0.7], [0.0, 2.0], [0.4, 0.2])

    a = model.rvs(500, random_state=3)
    b = model.rvs(500, random_state=3)

    np.testing.assert_array_equal(a, b)
    assert a.shape == (500,)
    assert 0.5 < np.mean(a) < 2.0


def test_repr(initial_model):
    assert repr(initial_model) == "0.5*Norm[μ=-1, σ=0.2] + 0.5*Norm[μ=0, σ=0.2]"


def test_equality_and_hash(initial_model):
    same = MixtureModel([0.5, 0.5], [-1.0, 0.0], [0.2, 0.2])

    assert same == initial_model
    assert hash(same) == hash(initial_model)
    assert initial_model != initial_model.with_parameter('means', 0, -0.5)
