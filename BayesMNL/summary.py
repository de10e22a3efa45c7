'''Posterior summaries computed from a draw history.'''


import numpy as np


def summarize(samples, burn_in=0, cred_level=0.95):
    """
    Per-parameter posterior mean, standard deviation and equal-tailed credible interval.

    Parameters
    ----------
    samples : array-like, shape (num_samples, ndim)
        Draw history, e.g. ``chain.get_samples()``.
    burn_in : int
        Number of leading draws to discard.
    cred_level : float
        Probability mass inside the credible interval.

    Returns
    -------
    dict
        Arrays ``mean``, ``std``, ``lower``, ``upper`` of length ``ndim``,
        plus ``num_samples`` kept after burn-in.
    """
    samples = np.asarray(samples, dtype=float)
    if samples.ndim == 1:
        samples = samples[:, None]
    if burn_in < 0 or burn_in >= samples.shape[0]:
        raise ValueError(f'burn-in of {burn_in} leaves no draws out of {samples.shape[0]}')
    if not 0. < cred_level < 1.:
        raise ValueError(f'credible level must be in (0, 1), got {cred_level}')

    kept = samples[burn_in:]
    tail = 100. * (1. - cred_level) / 2.
    return {'mean': np.mean(kept, axis=0),
            'std': np.std(kept, axis=0, ddof=1) if kept.shape[0] > 1 else np.zeros(kept.shape[1]),
            'lower': np.percentile(kept, tail, axis=0),
            'upper': np.percentile(kept, 100. - tail, axis=0),
            'num_samples': kept.shape[0]}


def format_summary(summary, labels=None, truths=None, cred_level=0.95):
    ndim = summary['mean'].shape[0]
    if labels is None:
        labels = [f'x[{i}]' for i in range(ndim)]
    pct = round(100 * cred_level)

    header = f'{"parameter":<12}{"mean":>10}{"sd":>10}{f"{pct}% lower":>12}{f"{pct}% upper":>12}'
    if truths is not None:
        truths = np.asarray(truths, dtype=float)
        header += f'{"true":>10}'
    lines = [header, '-' * len(header)]
    for i, label in enumerate(labels):
        line = (f'{label:<12}{summary["mean"][i]:>10.4f}{summary["std"][i]:>10.4f}'
                f'{summary["lower"][i]:>12.4f}{summary["upper"][i]:>12.4f}')
        if truths is not None:
            line += f'{truths[i]:>10.4f}'
        lines.append(line)
    return '\n'.join(lines)
