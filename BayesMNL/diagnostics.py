'''Trace plots, histograms and corner plots of a draw history.'''


import numpy as np
import matplotlib.pyplot as plt
import corner


# one row per parameter: trace on the left, histogram on the right
def plot_trace_hist(samples, labels=None, burn_in=0, truths=None, bins=50):
    samples = np.asarray(samples, dtype=float)
    if samples.ndim == 1:
        samples = samples[:, None]
    chain = samples[burn_in:]
    n_samples, n_params = chain.shape

    if labels is None:
        labels = [f'x[{i}]' for i in range(n_params)]

    fig, axes = plt.subplots(nrows=n_params, ncols=2, figsize=(12, 2.5 * n_params), squeeze=False)
    steps = np.arange(burn_in, burn_in + n_samples)
    for i in range(n_params):
        axes[i, 0].plot(steps, chain[:, i], linewidth=0.6, color='C0')
        axes[i, 0].set_ylabel(labels[i])
        axes[i, 1].hist(chain[:, i], bins=bins, density=True, color='C0', alpha=0.7)
        if truths is not None:
            axes[i, 0].axhline(truths[i], color='C1')
            axes[i, 1].axvline(truths[i], color='C1')
    axes[-1, 0].set_xlabel('iteration')
    axes[-1, 1].set_xlabel('value')
    fig.tight_layout()
    return fig


def plot_corner(samples, labels=None, truths=None, burn_in=0):
    samples = np.asarray(samples, dtype=float)[burn_in:]
    return corner.corner(samples, labels=labels, truths=truths, show_titles=True)
