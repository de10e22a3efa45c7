import matplotlib
matplotlib.use('Agg')

import jax.random as jr
import numpy as np
import pytest


@pytest.fixture
def random_calls(monkeypatch):
    '''Record every call into jax.random made while the test runs.'''
    calls = []
    for name in ('PRNGKey', 'split', 'normal', 'uniform'):
        original = getattr(jr, name)

        def counted(*args, _original=original, _name=name, **kwargs):
            calls.append(_name)
            return _original(*args, **kwargs)

        monkeypatch.setattr(jr, name, counted)
    return calls


@pytest.fixture
def std_normal_lnpost():
    def lnpost(x):
        return -0.5 * np.sum(x**2.)
    return lnpost
