# coding=utf-8
from logging import getLogger
logger = getLogger(__name__)


def format_progress(iteration, model, log_likelihood):
    return "iteration {iteration:4d} (log-likelihood={log_likelihood:.5e}): p(x|Φ) = {model}".format(
        iteration=iteration,
        log_likelihood=log_likelihood,
        model=model
    )


def simple_progress(iteration, model, log_likelihood):
    """A simple progress callback to use with gmmem.em"""

    print(format_progress(iteration, model, log_likelihood))


def logged_simple_progress(iteration, model, log_likelihood):
    """The default progress callback of gmmem.em, reports through logging"""

    logger.info(format_progress(iteration, model, log_likelihood))
