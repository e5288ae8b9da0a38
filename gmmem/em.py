import numpy as np

from collections import namedtuple
from enum import Enum

from .utils import check_random_state
from .distribution import NormalDistribution
from .exceptions import (DegenerateModel, EMStateError, InvalidParameters,
                         ResponsibilityUnderflow, ZeroResponsibilityMass)
from .model import MixtureModel, as_sample
from .progress import logged_simple_progress

from logging import getLogger
logger = getLogger(__name__)

ROW_TOLERANCE = 1e-8

FitResult = namedtuple('FitResult', ['model', 'log_likelihood', 'iterations', 'converged', 'history'])


class EMState(Enum):
    INITIALIZED = 'initialized'
    E_STEP_DONE = 'e-step done'
    M_STEP_DONE = 'm-step done'
    CONVERGED   = 'converged'
    STOPPED     = 'stopped'


def _check_responsibilities(responsibilities, n_data, n_components=None):
    resp = np.asarray(responsibilities, dtype=float)

    if resp.ndim != 2 or resp.shape[0] != n_data:
        raise InvalidParameters("Expect a (%d x K) responsibility matrix, got shape %s" % (n_data, resp.shape))
    if n_components is not None and resp.shape[1] != n_components:
        raise InvalidParameters("Expect responsibilities for %d components, got %d" % (n_components, resp.shape[1]))
    if not np.all(np.isfinite(resp)) or np.any(resp < 0) or np.any(resp > 1):
        raise InvalidParameters("Responsibilities must lie in [0, 1]")
    if np.any(np.abs(np.sum(resp, axis=1) - 1.0) > ROW_TOLERANCE):
        raise InvalidParameters("Responsibilities of every point must sum to 1")

    return resp


def log_likelihood(data, model):
    """Compute the log-likelihood :math:`\\sum_i \\log \\sum_j \\pi_j N(x_i|\\mu_j, \\sigma_j)` of data.

    :raises DegenerateModel: when a component has a non-positive stddev or the mixture density
        of any point is not positive
    """

    data = as_sample(data)

    with np.errstate(divide='ignore', invalid='ignore'):
        p = model.density(data)

    bad = ~(p > 0) | ~np.isfinite(p)
    if np.any(bad):
        raise DegenerateModel("mixture density is not positive for %d point(s), first at index %d"
                              % (np.sum(bad), np.flatnonzero(bad)[0]))

    return float(np.sum(np.log(p)))


def e_step(data, model):
    """Compute the (N x K) responsibility matrix of model for data.

    The responsibilities are the naive ratio of joint densities to the mixture density,
    so a point that every component assigns zero density raises :class:`ResponsibilityUnderflow`.
    """

    data = as_sample(data)

    if np.any(model.weights < 0):
        raise InvalidParameters("weights must be non-negative, got %s" % (list(model.weights),))

    joint = model.joint_densities(data)
    denominator = np.sum(joint, axis=1)

    overflow = np.flatnonzero(~np.isfinite(denominator))
    if overflow.size > 0:
        raise DegenerateModel("mixture density is not finite for %d point(s), first at index %d"
                              % (overflow.size, overflow[0]))

    underflow = np.flatnonzero(~(denominator > 0))
    if underflow.size > 0:
        raise ResponsibilityUnderflow(underflow)

    return joint / denominator[:, np.newaxis]


def m_step(data, responsibilities):
    """Re-estimate mixture weights, means and stddevs from responsibilities.

    Returns a new, unvalidated :class:`MixtureModel`; a component fitted to a single point has
    a zero stddev.

    :raises ZeroResponsibilityMass: when a component received no responsibility at all
    """

    data = as_sample(data)
    resp = _check_responsibilities(responsibilities, data.shape[0])

    mass = np.sum(resp, axis=0)
    for d in range(resp.shape[1]):
        if mass[d] == 0:
            raise ZeroResponsibilityMass(d)

    distributions = [NormalDistribution.estimate_parameters(data, resp[:, d]) for d in range(resp.shape[1])]
    weights = mass / data.shape[0]

    return MixtureModel.from_components(weights, distributions, check=False)


def lower_bound(data, model, responsibilities):
    """Evaluate the EM lower bound of the log-likelihood at model.

    .. math::
        \\mathcal{L} = \\sum_{i,j} R_{ij} \\log \\frac{\\pi_j N(x_i|\\mu_j, \\sigma_j)}{R_{ij}}

    Terms with :math:`R_{ij} = 0` contribute exactly zero. The bound touches the
    log-likelihood at the model the responsibilities were computed from.
    """

    data = as_sample(data)
    resp = _check_responsibilities(responsibilities, data.shape[0], model.n_components)

    joint = model.joint_densities(data)

    support = resp > 0
    if np.any(~(joint[support] > 0)):
        raise DegenerateModel("joint density vanishes where responsibility is positive")
    if np.any(~np.isfinite(joint[support])):
        raise DegenerateModel("joint density is not finite where responsibility is positive")

    return float(np.sum(resp[support] * (np.log(joint[support]) - np.log(resp[support]))))


class EMFitter(object):
    """Explicit state of an EM run: the sample, the current model and its responsibilities.

    One iteration is :meth:`expectation` followed by :meth:`maximization`. Every M-step
    replaces ``model`` by a new :class:`MixtureModel` and appends its log-likelihood to
    ``history``, which starts with the log-likelihood of the initial model.

    :param data: 1D sample, kept unchanged for the whole fit
    :param model: the initial :class:`MixtureModel`, validated on entry
    :param reinitialize_empty: re-seed components without responsibility mass at a random
        data point instead of raising :class:`ZeroResponsibilityMass`
    :param random_state: seed or :class:`numpy.random.RandomState` for re-seeding
    """

    def __init__(self, data, model, reinitialize_empty=False, random_state=None):
        self.sample = as_sample(data)
        self.model = model.validate()
        self.responsibilities = None
        self.state = EMState.INITIALIZED
        self.iteration = 0
        self.history = [log_likelihood(self.sample, model)]

        self.reinitialize_empty = reinitialize_empty
        self._rng = check_random_state(random_state)

        logger.debug("initial model %s, log-likelihood %f" % (self.model, self.history[0]))

    @property
    def log_likelihood(self):
        return self.history[-1]

    def expectation(self):
        if self.state == EMState.E_STEP_DONE:
            raise EMStateError("E-step already done, run the M-step first")

        self.responsibilities = e_step(self.sample, self.model)
        self.state = EMState.E_STEP_DONE

        return self.responsibilities

    def maximization(self):
        if self.state != EMState.E_STEP_DONE:
            raise EMStateError("M-step needs responsibilities, state is '%s'" % self.state.value)

        try:
            model = m_step(self.sample, self.responsibilities)
        except ZeroResponsibilityMass as e:
            if not self.reinitialize_empty:
                raise
            logger.warning("component %d lost all responsibility mass at iteration %d, reinitializing."
                           % (e.component, self.iteration + 1))
            model = self._reinitialized_m_step()

        ll = log_likelihood(self.sample, model)

        self.model = model
        self.history.append(ll)
        self.iteration += 1
        self.state = EMState.M_STEP_DONE

        return model

    def iterate(self):
        if self.state != EMState.E_STEP_DONE:
            self.expectation()
        return self.maximization()

    def _reinitialized_m_step(self):
        n_data = self.sample.shape[0]
        mass = np.sum(self.responsibilities, axis=0)
        empty = mass == 0

        # empty columns are all zero, so the remaining rows still sum to one
        partial = m_step(self.sample, self.responsibilities[:, ~empty])

        weights = np.empty(len(mass))
        means = np.empty(len(mass))
        stddevs = np.empty(len(mass))

        weights[~empty], means[~empty], stddevs[~empty] = partial.weights, partial.means, partial.stddevs

        spread = np.std(self.sample)
        weights[empty] = 1.0 / n_data
        means[empty] = self.sample[self._rng.randint(n_data, size=np.sum(empty))]
        stddevs[empty] = spread if spread > 0 else 1.0

        return MixtureModel(weights / np.sum(weights), means, stddevs, check=False)

    def result(self):
        return FitResult(self.model, self.log_likelihood, self.iteration,
                         self.state == EMState.CONVERGED, list(self.history))

    def run(self, max_iterations=100, tol=1e-8, tol_iters=1, progress_callback=logged_simple_progress):
        """Iterate until convergence or until max_iterations more iterations were done.

        :param max_iterations: The maximum number of iterations to compute for.
        :type max_iterations: int

        :param tol: The minimum relative increase in log-likelihood after tol_iters iterations.
            None runs exactly max_iterations iterations.
        :type tol: float or None

        :param tol_iters: The number of iterations to go back in comparing log-likelihood change
        :type tol_iters: int

        :param progress_callback: A function to call to report progress after every iteration.
        :type progress_callback: function or None

        :rtype: :class:`FitResult`
        """

        if tol_iters < 1:
            raise InvalidParameters("tol_iters must be at least 1")

        converged = False
        start = self.iteration

        while self.iteration - start < max_iterations:
            self.iterate()

            if progress_callback:
                progress_callback(self.iteration, self.model, self.log_likelihood)

            if tol is not None and len(self.history) > tol_iters:
                previous = self.history[-1 - tol_iters]
                if self.log_likelihood - previous <= tol * abs(previous):
                    converged = True
                    break

        self.state = EMState.CONVERGED if converged else EMState.STOPPED

        if converged:
            logger.info("EM converged after %d iterations, log-likelihood %f." % (self.iteration, self.log_likelihood))
        else:
            logger.info("EM stopped after %d iterations, log-likelihood %f." % (self.iteration, self.log_likelihood))

        return self.result()


def em(data, model, max_iterations=100, tol=1e-8, tol_iters=1, progress_callback=logged_simple_progress,
       reinitialize_empty=False, random_state=None):
    """Fit a univariate Gaussian mixture using the Expectation-Maximization (EM) algorithm.

    :param data: The data to fit the mixture for. Can be an array-like or a :class:`numpy.ndarray`
    :type data: numpy.ndarray

    :param model: The initial mixture.
    :type model: :class:`gmmem.MixtureModel`

    See :meth:`EMFitter.run` for the stopping rule and :class:`EMFitter` for the remaining options.

    :rtype: :class:`FitResult` (model, log_likelihood, iterations, converged, history)
    """

    fitter = EMFitter(data, model, reinitialize_empty=reinitialize_empty, random_state=random_state)
    return fitter.run(max_iterations=max_iterations, tol=tol, tol_iters=tol_iters,
                      progress_callback=progress_callback)
