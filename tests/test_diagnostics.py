import matplotlib.pyplot as plt
import numpy as np

from BayesMNL.diagnostics import plot_trace_hist, plot_corner


def test_trace_hist_layout():
    samples = np.random.default_rng(1).normal(size=(500, 3))
    fig = plot_trace_hist(samples, labels=['a', 'b', 'c'], burn_in=100, truths=[0., 0., 0.])
    assert len(fig.axes) == 6
    assert fig.axes[0].get_ylabel() == 'a'
    # trace starts after burn-in
    assert fig.axes[0].lines[0].get_xdata()[0] == 100
    plt.close(fig)


def test_trace_hist_single_parameter():
    fig = plot_trace_hist(np.zeros(50) + np.arange(50))
    assert len(fig.axes) == 2
    plt.close(fig)


def test_corner_figure():
    samples = np.random.default_rng(2).normal(size=(1000, 2))
    fig = plot_corner(samples, labels=['a', 'b'], truths=[0., 0.], burn_in=100)
    assert len(fig.axes) == 4
    plt.close(fig)
