import numpy as np

from .model import MixtureModel
from .utils import check_random_state

from logging import getLogger
logger = getLogger(__name__)

# two well separated clusters and a poor starting point, as used throughout the tutorial
TUTORIAL_MEANS   = (0.0, 2.0)
TUTORIAL_STDDEVS = (0.4, 0.2)
TUTORIAL_SIZES   = (50, 50)


def generate_sample(means, stddevs, sizes, random_state=None):
    """Concatenate sizes[j] draws from N(means[j], stddevs[j]) for every j."""

    assert len(means) == len(stddevs) == len(sizes), "Need matching number of means, stddevs and sizes!"

    rng = check_random_state(random_state)

    data = np.concatenate([rng.normal(loc=mu, scale=sigma, size=n) for mu, sigma, n in zip(means, stddevs, sizes)])
    logger.debug("generated %d points from %d gaussians." % (data.shape[0], len(means)))

    return data


def tutorial_sample(random_state=None):
    return generate_sample(TUTORIAL_MEANS, TUTORIAL_STDDEVS, TUTORIAL_SIZES, random_state=random_state)


def tutorial_initial_model():
    return MixtureModel([0.5, 0.5], [-1.0, 0.0], [0.2, 0.2])
