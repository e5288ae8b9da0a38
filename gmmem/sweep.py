import numpy as np
import pandas as pd

from .em import log_likelihood, lower_bound
from .model import as_sample

from logging import getLogger
logger = getLogger(__name__)


def sweep_parameter(data, model, parameter, component, values, responsibilities=None):
    """Evaluate the log-likelihood while a single parameter of model varies.

    All other parameters are held at their values in model. When responsibilities are
    given, the lower bound built from them is evaluated at the same points, which is how
    the bound is compared to the log-likelihood it touches.

    :param parameter: one of 'weights', 'means', 'stddevs'
    :param component: index of the component whose parameter varies
    :param values: the values to evaluate at
    :rtype: pandas.DataFrame with columns value, log_likelihood and optionally lower_bound
    """

    data = as_sample(data)
    values = np.asarray(values, dtype=float)

    rows = []
    for v in values:
        m = model.with_parameter(parameter, component, v)
        row = {"value": v, "log_likelihood": log_likelihood(data, m)}
        if responsibilities is not None:
            row['lower_bound'] = lower_bound(data, m, responsibilities)
        rows.append(row)

    columns = ['value', 'log_likelihood'] + (['lower_bound'] if responsibilities is not None else [])
    logger.debug("swept %s[%d] over %d values." % (parameter, component, len(values)))

    return pd.DataFrame(rows, columns=columns)


def sweep_grid(data, model, parameter_x, component_x, values_x, parameter_y, component_y, values_y):
    """Evaluate the log-likelihood on a grid of two parameters.

    :rtype: pandas.DataFrame indexed by values_y with one column per value of values_x
    """

    data = as_sample(data)

    table = np.empty((len(values_y), len(values_x)))
    for i, vy in enumerate(values_y):
        m_y = model.with_parameter(parameter_y, component_y, vy)
        for j, vx in enumerate(values_x):
            table[i, j] = log_likelihood(data, m_y.with_parameter(parameter_x, component_x, vx))

    return pd.DataFrame(table,
                        index=pd.Index(values_y, name="%s[%d]" % (parameter_y, component_y)),
                        columns=pd.Index(values_x, name="%s[%d]" % (parameter_x, component_x)))
