import numbers
import numpy as np


def check_random_state(seed):
    """Turn None, an int or a RandomState into a :class:`numpy.random.RandomState`."""

    if seed is None or isinstance(seed, (numbers.Integral, np.integer)):
        return np.random.RandomState(seed)
    if isinstance(seed, np.random.RandomState):
        return seed
    raise ValueError("%r cannot be used to seed a numpy.random.RandomState instance" % (seed,))
