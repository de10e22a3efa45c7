import numpy as np

from BayesMNL import MHMCMC
from BayesMNL.chain_io import save_chain, load_chain


def test_round_trip(tmp_path, std_normal_lnpost):
    chain = MHMCMC.run([0.5, -0.5], std_normal_lnpost, [1., 1.], 300, random_seed=3)
    path = tmp_path / 'chain.h5'
    save_chain(path, chain, labels=['a', 'b'])

    loaded, labels = load_chain(path)
    np.testing.assert_array_equal(loaded.get_samples(), chain.get_samples())
    np.testing.assert_array_equal(loaded.get_lnposts(), chain.get_lnposts())
    np.testing.assert_array_equal(loaded.x0, chain.x0)
    assert loaded.accept_count == chain.accept_count
    assert loaded.reject_count == chain.reject_count
    assert loaded.num_iterations == 300
    assert loaded.complete
    assert labels == ['a', 'b']


def test_truncated_status_survives(tmp_path, std_normal_lnpost):
    chain = MHMCMC.run([0.], std_normal_lnpost, [1.], 300, random_seed=3, stop_check=lambda i: i == 10)
    path = tmp_path / 'chain.h5'
    save_chain(path, chain)

    loaded, labels = load_chain(path)
    assert loaded.status == 'truncated'
    assert loaded.num_samples == 10
    assert labels is None
