import logging
import os

import pandas as pd
import pytest

import em_tutorial


def test_tutorial_writes_figures_and_sweeps(tmp_path):
    em_tutorial.main(['-o', str(tmp_path), '-s', '0', '-n', '5', '--sweep_points', '25'])

    figs = tmp_path / "figs"
    for name in ["initial_model.png", "responsibilities.png", "updated_model.png", "final_model.png",
                 "sweep_mean0.png", "sweep_mean1.png", "log_likelihood.png"]:
        assert (figs / name).is_file()

    sweep = pd.read_csv(str(tmp_path / "sweep_mean0.tsv"), sep='\t')
    assert list(sweep.columns) == ['value', 'log_likelihood', 'lower_bound']
    assert len(sweep) == 25

    assert "log-likelihood" in (tmp_path / "em_tutorial.log").read_text(encoding='utf-8')


def test_tutorial_releases_log_handlers(tmp_path):
    before = list(logging.getLogger().handlers)
    em_tutorial.main(['-o', str(tmp_path), '--sweep_points', '5'])

    assert logging.getLogger().handlers == before
    assert not os.path.isfile(str(tmp_path / "figs" / "final_model.png"))


@pytest.mark.parametrize('argv', [['--sweep_points', '1'], ['-n', '-2']])
def test_tutorial_rejects_bad_options(tmp_path, argv):
    with pytest.raises(SystemExit) as excinfo:
        em_tutorial.main(['-o', str(tmp_path)] + argv)

    assert excinfo.value.code == 1


def test_output_is_required():
    with pytest.raises(SystemExit):
        em_tutorial.main([])
