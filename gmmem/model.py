# coding=utf-8
import numpy as np

from .distribution import NormalDistribution
from .utils import check_random_state
from .exceptions import InvalidParameters

PARAMETERS = ('weights', 'means', 'stddevs')
WEIGHT_TOLERANCE = 1e-9


def as_sample(data):
    """Coerce data to a read-only 1D float array, the form every EM operation works on."""

    if not hasattr(data, '__len__'):
        data = [data]

    sample = np.array(data, dtype=float)

    if sample.ndim != 1:
        raise InvalidParameters("Expect 1D data, got an array of shape %s" % (sample.shape,))
    if sample.shape[0] == 0:
        raise InvalidParameters("Expect at least one data point")
    if not np.all(np.isfinite(sample)):
        raise InvalidParameters("Data contains non-finite values")

    sample.setflags(write=False)
    return sample


def _frozen(values, name):
    arr = np.array(values, dtype=float)
    if arr.ndim != 1:
        raise InvalidParameters("%s must be a 1D sequence" % name)
    arr.setflags(write=False)
    return arr


class MixtureModel(object):
    """A univariate Gaussian mixture :math:`p(x) = \\sum_j \\pi_j N(x|\\mu_j, \\sigma_j)`.

    Models are immutable. Use :meth:`replace` or :meth:`with_parameter` to derive a new one.

    :param weights: mixture proportions, non-negative and summing to one
    :param means: component means
    :param stddevs: component standard deviations, all positive
    :param check: validate the parameters. Pass False to build raw parameter vectors,
        e.g. for sweeping a single weight or for models estimated from data.
    """

    def __init__(self, weights, means, stddevs, check=True):
        self._weights = _frozen(weights, 'weights')
        self._means = _frozen(means, 'means')
        self._stddevs = _frozen(stddevs, 'stddevs')

        if not (len(self._weights) == len(self._means) == len(self._stddevs)):
            raise InvalidParameters("Need matching number of weights, means and stddevs!")
        if len(self._weights) == 0:
            raise InvalidParameters("Need at least one component!")

        if check:
            self.validate()

    @classmethod
    def from_components(cls, weights, distributions, check=True):
        """Build a model from weights and a list of :class:`NormalDistribution`."""

        if len(weights) != len(distributions):
            raise InvalidParameters("Need matching number of weights and distributions!")

        return cls(weights,
                   [d.get_mu() for d in distributions],
                   [d.get_sigma() for d in distributions],
                   check=check)

    def validate(self):
        """Raise :class:`InvalidParameters` unless the parameters describe a proper mixture."""

        for name in PARAMETERS:
            if not np.all(np.isfinite(getattr(self, name))):
                raise InvalidParameters("%s contain non-finite values" % name)

        if np.any(self._weights < 0):
            raise InvalidParameters("weights must be non-negative, got %s" % (list(self._weights),))
        if abs(np.sum(self._weights) - 1.0) > WEIGHT_TOLERANCE:
            raise InvalidParameters("weights must sum to 1, got %.12g" % np.sum(self._weights))
        if np.any(self._stddevs <= 0):
            raise InvalidParameters("stddevs must be positive, got %s" % (list(self._stddevs),))

        return self

    @property
    def weights(self):
        return self._weights

    @property
    def means(self):
        return self._means

    @property
    def stddevs(self):
        return self._stddevs

    @property
    def variances(self):
        return self._stddevs ** 2

    @property
    def n_components(self):
        return len(self._weights)

    @property
    def components(self):
        return [NormalDistribution(mu, sigma) for mu, sigma in zip(self._means, self._stddevs)]

    def replace(self, check=False, **params):
        """Return a copy with some of weights, means and stddevs replaced."""

        unknown = set(params) - set(PARAMETERS)
        if unknown:
            raise InvalidParameters("Unknown parameter(s): %s" % ", ".join(sorted(unknown)))

        values = dict((name, getattr(self, name)) for name in PARAMETERS)
        values.update(params)

        return MixtureModel(check=check, **values)

    def with_parameter(self, name, component, value):
        """Return a copy where a single entry, e.g. ``means[1]``, is set to value.

        The result is not validated, so sweeping a weight on its own is allowed.
        """

        if name not in PARAMETERS:
            raise InvalidParameters("Unknown parameter %r, expected one of %s" % (name, ", ".join(PARAMETERS)))
        if not 0 <= component < self.n_components:
            raise InvalidParameters("Component %d out of range for %d components" % (component, self.n_components))

        values = np.array(getattr(self, name))
        values[component] = value

        return self.replace(**{name: values})

    def component_densities(self, data):
        """Return the (N x K) matrix of component densities :math:`N(x_i|\\mu_j, \\sigma_j)`."""

        data = np.asarray(data, dtype=float)

        densities = np.empty((data.shape[0], self.n_components))
        for d, dist in enumerate(self.components):
            densities[:, d] = dist.density(data)

        return densities

    def joint_densities(self, data):
        """Return the (N x K) matrix :math:`\\pi_j N(x_i|\\mu_j, \\sigma_j)`."""

        return self._weights[np.newaxis, :] * self.component_densities(data)

    def density(self, data):
        """Compute the mixture density for data"""

        if not hasattr(data, '__len__'):
            data = [data]

        return np.sum(self.joint_densities(np.asarray(data, dtype=float)), axis=1)

    def rvs(self, size=1, random_state=None):
        """Draw size points from the mixture."""

        rng = check_random_state(random_state)

        labels = rng.choice(self.n_components, size=size, p=self._weights)
        return rng.normal(loc=self._means[labels], scale=self._stddevs[labels])

    def __eq__(self, other):
        if not isinstance(other, MixtureModel):
            return NotImplemented
        return all(np.array_equal(getattr(self, name), getattr(other, name)) for name in PARAMETERS)

    def __hash__(self):
        return hash(tuple(tuple(getattr(self, name)) for name in PARAMETERS))

    def __repr__(self):
        return " + ".join("{w:.3g}*{d}".format(w=w, d=d) for w, d in zip(self._weights, self.components))


def probability(data, model):
    """Compute the probability for data of the mixture density model"""

    return model.density(data)
