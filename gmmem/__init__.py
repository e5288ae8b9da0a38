"""
Expectation-Maximization fitting of univariate Gaussian mixtures, one inspectable step at a time.
"""


from . import distribution
from ._version import __version__
from .exceptions import (EMError, InvalidParameters, DegenerateModel, ResponsibilityUnderflow,
                         ZeroResponsibilityMass, EMStateError)
from .model import MixtureModel, probability
from .progress import simple_progress, logged_simple_progress
from .em import log_likelihood, e_step, m_step, lower_bound, em, EMFitter, EMState, FitResult
from .data import generate_sample, tutorial_sample, tutorial_initial_model
from .sweep import sweep_parameter, sweep_grid
