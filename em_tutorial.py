'''
   Usage:
      em_tutorial.py [options]

      Try 'em_tutorial.py -h' for more information.

    Purpose: walks through one Expectation-Maximization iteration for a
             two-component Gaussian mixture on synthetic 1D data and
             draws the figures that go with each step.
'''
import sys, os, argparse
import logging
import numpy as np

from gmmem       import (__version__, EMError, EMFitter, em, tutorial_sample, tutorial_initial_model,
                         sweep_parameter, lower_bound)
from gmmem.plot  import plot_mixture, plot_responsibilities, plot_sweep, plot_history

logger = logging.getLogger(__name__)


def setup_logging(log_path):
    ### logging conf ###
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    fh = logging.FileHandler(log_path, 'w')
    sh = logging.StreamHandler()
    sh.setLevel(logging.INFO)

    formatter = logging.Formatter('%(module)s:%(asctime)s:%(lineno)d:%(levelname)s:%(message)s')
    fh.setFormatter(formatter)
    sh.setFormatter(formatter)

    root.addHandler(sh)
    root.addHandler(fh)
    #####################

    return [sh, fh]


def run_tutorial(args):
    figs = os.path.join(args.out, "figs")
    if not os.path.isdir(figs):
        os.makedirs(figs, exist_ok=True)

    data  = tutorial_sample(random_state=args.seed)
    model = tutorial_initial_model()

    fitter = EMFitter(data, model)
    logger.info("Initial model %s, log-likelihood %f" % (model, fitter.log_likelihood))
    plot_mixture(os.path.join(figs, "initial_model.png"), data, model, title="Initial model")

    # one illustrated iteration
    resp = fitter.expectation()
    logger.info("Lower bound at the initial model %f" % lower_bound(data, model, resp))
    plot_responsibilities(os.path.join(figs, "responsibilities.png"), data, resp, title="E-step")

    new_model = fitter.maximization()
    logger.info("After one iteration %s, log-likelihood %f" % (new_model, fitter.log_likelihood))
    plot_mixture(os.path.join(figs, "updated_model.png"), data, new_model, title="After one EM iteration")

    for d in range(model.n_components):
        values = np.linspace(-2.0, 3.0, args.sweep_points)
        sweep = sweep_parameter(data, model, 'means', d, values, responsibilities=resp)
        sweep.to_csv(os.path.join(args.out, "sweep_mean%d.tsv" % d), sep='\t', index=False)
        plot_sweep(os.path.join(figs, "sweep_mean%d.png" % d), sweep, r'$\mu_%d$' % d,
                   current=model.means[d], updated=new_model.means[d])

    history = list(fitter.history)
    if args.n_iter > 0:
        result = em(data, new_model, max_iterations=args.n_iter)
        logger.info("Final model %s, log-likelihood %f after %d more iterations (converged: %s)"
                    % (result.model, result.log_likelihood, result.iterations, result.converged))
        history += result.history[1:]
        plot_mixture(os.path.join(figs, "final_model.png"), data, result.model, title="Final model")

    plot_history(os.path.join(figs, "log_likelihood.png"), history)

    return history


def command_run(args):
    if args.sweep_points < 2:
        print("Error: --sweep_points needs to be 2 or higher.", file=sys.stderr)
        sys.exit(1)
    if args.n_iter < 0:
        print("Error: -n/--n_iter cannot be negative.", file=sys.stderr)
        sys.exit(1)

    if not os.path.isdir(args.out):
        os.makedirs(args.out, exist_ok=True)

    handlers = setup_logging(os.path.join(args.out, "em_tutorial.log"))
    logger.info("Cmd: %s" % " ".join(sys.argv))

    try:
        run_tutorial(args)
    except EMError as e:
        logger.error("EM failed: %s" % e)
        sys.exit(1)
    finally:
        for h in handlers:
            logging.getLogger().removeHandler(h)
            h.close()


def build_parser():
    parser = argparse.ArgumentParser(
        description="A step by step walk-through of EM for a 1D Gaussian mixture.",
        add_help=True,
    )
    parser.add_argument('-v', '--version', action='version', version='%(prog)s ' + __version__)
    parser.add_argument('-o', '--output', help='path for output directory', dest='out', required=True)
    parser.add_argument('-s', '--seed', help='seed for the synthetic sample [Default is 0].', type=int, dest='seed', default=0)
    parser.add_argument('-n', '--n_iter', help='the number of EM iterations after the illustrated one [Default is 0].', type=int, dest='n_iter', default=0)
    parser.add_argument('--sweep_points', help='the number of points of each parameter sweep [Default is 200].', type=int, dest='sweep_points', default=200)
    parser.set_defaults(handler=command_run)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    args.handler(args)


if __name__ == "__main__":
    main()
