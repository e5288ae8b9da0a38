import numpy as np
import matplotlib as mpl
mpl.use('Agg')
import matplotlib.pyplot as plt

from logging import getLogger
logger = getLogger(__name__)


def rgb(r,g,b):

    return [ r/255, g/255, b/255 ]

# tab10 colours, one per component
COLORS = [rgb(31,119,180), rgb(214,39,40), rgb(44,160,44), rgb(255,127,14), rgb(148,103,189)]
GRAY   = rgb(127,127,127)


def _color(d):
    return COLORS[d % len(COLORS)]


def _save(fig_path):
    plt.savefig(fig_path, bbox_inches="tight", transparent=True)
    plt.close()
    logger.info("Figure %s was made." % fig_path)


def plot_mixture(fig_path, data, model, title=None, n_points=400, bins=30):
    data = np.asarray(data, dtype=float)

    span = np.max(data) - np.min(data)
    margin = max(span * 0.2, 3 * np.max(model.stddevs))
    x = np.linspace(np.min(data) - margin, np.max(data) + margin, n_points)

    plt.hist(data, histtype='stepfilled', bins=bins, color=GRAY, alpha=0.4, density=True)
    for d, (w, dist) in enumerate(zip(model.weights, model.components)):
        plt.plot(x, w * dist.density(x), color=_color(d), linestyle='dashed', label=r'$\pi_%d N(x|\mu_%d,\sigma_%d)$' % (d, d, d))
    plt.plot(x, model.density(x), color='black', linewidth=2, label='mixture')
    plt.plot(data, np.zeros_like(data), '|', color='black', alpha=0.5)

    plt.grid(True)
    plt.xlabel('x')
    plt.ylabel('Probability density')
    plt.legend(loc='upper left')
    if title:
        plt.title(title)

    _save(fig_path)


def plot_responsibilities(fig_path, data, responsibilities, title=None):
    data = np.asarray(data, dtype=float)
    resp = np.asarray(responsibilities, dtype=float)

    for d in range(resp.shape[1]):
        plt.scatter(data, resp[:, d], s=12, color=_color(d), alpha=0.7, label=r'$R_{i%d}$' % d)

    plt.grid(True)
    plt.ylim(-0.05, 1.05)
    plt.xlabel('x')
    plt.ylabel('Responsibility')
    plt.legend(loc='center right')
    if title:
        plt.title(title)

    _save(fig_path)


def plot_sweep(fig_path, sweep, label, current=None, updated=None, title=None):
    """Plot the log-likelihood (and lower bound, if present) of a parameter sweep.

    :param sweep: pandas.DataFrame as returned by gmmem.sweep.sweep_parameter
    :param current: parameter value the lower bound was built at, marked in red
    :param updated: parameter value after the M-step, marked in green
    """

    plt.plot(sweep['value'], sweep['log_likelihood'], color='black', linewidth=2, label='log-likelihood')
    if 'lower_bound' in sweep.columns:
        plt.plot(sweep['value'], sweep['lower_bound'], color=_color(0), linestyle='dashed', label='lower bound')

    ymin, ymax = plt.gca().get_ylim()
    if current is not None:
        plt.axvline(x=current, linestyle='dotted', linewidth=2, color=_color(1), alpha=0.8)
        plt.text(current, ymin + (ymax - ymin) * 0.05, r'$\theta_{old}$', color=_color(1))
    if updated is not None:
        plt.axvline(x=updated, linestyle='dotted', linewidth=2, color=_color(2), alpha=0.8)
        plt.text(updated, ymin + (ymax - ymin) * 0.1, r'$\theta_{new}$', color=_color(2))

    plt.grid(True)
    plt.xlabel(label)
    plt.ylabel('Log-likelihood')
    plt.legend(loc='lower right')
    if title:
        plt.title(title)

    _save(fig_path)


def plot_history(fig_path, history, title=None):
    plt.plot(np.arange(len(history)), history, marker='o', color='black')

    plt.grid(True)
    plt.xlabel('Iteration')
    plt.ylabel('Log-likelihood')
    if title:
        plt.title(title)

    _save(fig_path)
