# coding=utf-8
import numpy as np
import scipy.stats

from .distribution import Distribution
from ..exceptions import DegenerateModel


class NormalDistribution(Distribution):
    """Univariate normal distribution with parameters (mu, sigma)."""

    def __init__(self, mu, sigma):
        self._mu = float(mu)
        self._sigma = float(sigma)

    @property
    def mu(self):
        return self._mu

    @property
    def sigma(self):
        return self._sigma

    def _check_sigma(self):
        if not self._sigma > 0:
            raise DegenerateModel("normal density is undefined for sigma=%g" % self._sigma)

    def log_density(self, data):
        assert(len(data.shape) == 1), "Expect 1D data!"
        self._check_sigma()

        return scipy.stats.norm.logpdf(data, loc=self._mu, scale=self._sigma)

    def density(self, data):
        assert(len(data.shape) == 1), "Expect 1D data!"
        self._check_sigma()

        return scipy.stats.norm.pdf(data, loc=self._mu, scale=self._sigma)

    @classmethod
    def estimate_parameters(cls, data, weights):
        assert(len(data.shape) == 1), "Expect 1D data!"

        wsum = np.sum(weights)

        mu = np.sum(weights * data) / wsum
        sigma = np.sqrt(np.sum(weights * (data - mu) ** 2) / wsum)

        return cls(mu, sigma)

    def __eq__(self, other):
        if not isinstance(other, NormalDistribution):
            return NotImplemented
        return self._mu == other._mu and self._sigma == other._sigma

    def __hash__(self):
        return hash((self._mu, self._sigma))

    def __repr__(self):
        return "Norm[μ={mu:.4g}, σ={sigma:.4g}]".format(mu=self._mu, sigma=self._sigma)

    def get_mu(self):
        return self._mu

    def get_sigma(self):
        return self._sigma
