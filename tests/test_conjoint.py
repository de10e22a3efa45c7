import numpy as np
import pytest

from simulate_data.conjoint import sim_conjoint, default_betas
from simulate_data.data_structure import Conjoint_Data, load_conjoint_csv


@pytest.fixture(scope='module')
def data():
    return sim_conjoint(default_betas, num_respondents=100, num_tasks=10, num_alts=3, random_seed=123)


def test_layout(data):
    assert data.Nrows == 3000
    assert data.Ntasks == 1000
    assert data.Nresp == 100
    assert data.X.shape == (3000, 4)
    assert list(data.feature_names) == ['brand_N', 'brand_P', 'ad_yes', 'price']
    assert np.all(data.y.reshape(-1, 3).sum(axis=1) == 1)


def test_attribute_levels(data):
    assert set(np.unique(data.brand)) <= {'N', 'P', 'H'}
    assert set(np.unique(data.price)) <= set(range(8, 33, 4))
    # brand dummies never both on
    assert np.all(data.X[:, 0] + data.X[:, 1] <= 1.)
    np.testing.assert_array_equal(data.X[:, 3], data.price)
    assert sum(data.brand_shares.values()) == pytest.approx(1.)


def test_choices_follow_utility(data):
    chosen = data.choice == 1
    assert data.price[chosen].mean() < data.price[~chosen].mean()
    assert data.X[chosen, 2].mean() < data.X[~chosen, 2].mean()
    assert data.brand_shares['N'] > data.brand_shares['H']


def test_seed_reproducible():
    a = sim_conjoint(num_respondents=5, random_seed=1)
    b = sim_conjoint(num_respondents=5, random_seed=1)
    np.testing.assert_array_equal(a.X, b.X)
    np.testing.assert_array_equal(a.y, b.y)


def test_rows_sorted_by_respondent_and_task():
    data = Conjoint_Data(resp=[2, 1, 1, 2], task=[1, 1, 1, 1], brand=['N', 'P', 'H', 'H'],
                         ad=['No', 'Yes', 'No', 'No'], price=[8, 12, 16, 20], choice=[0, 1, 0, 1], num_alts=2)
    np.testing.assert_array_equal(data.resp, [1, 1, 2, 2])
    np.testing.assert_array_equal(data.price, [12., 16., 8., 20.])
    np.testing.assert_array_equal(data.X[0], [0., 1., 1., 12.])


def test_two_choices_in_task_rejected():
    with pytest.raises(ValueError):
        Conjoint_Data(resp=[1, 1], task=[1, 1], brand=['N', 'P'], ad=['No', 'No'],
                      price=[8, 8], choice=[1, 1], num_alts=2)


def test_unknown_brand_rejected():
    with pytest.raises(ValueError):
        Conjoint_Data(resp=[1, 1], task=[1, 1], brand=['N', 'X'], ad=['No', 'No'],
                      price=[8, 8], choice=[1, 0], num_alts=2)


def test_incomplete_task_rejected():
    with pytest.raises(ValueError):
        Conjoint_Data(resp=[1, 1, 1], task=[1, 1, 2], brand=['N', 'P', 'H'], ad=['No', 'No', 'No'],
                      price=[8, 8, 8], choice=[1, 0, 1], num_alts=3)


def test_load_csv(tmp_path):
    path = tmp_path / 'conjoint_data.csv'
    path.write_text('resp,task,choice,brand,ad,price\n'
                    '1,1,1,"N","Yes",28\n'
                    '1,1,0,"H","Yes",16\n'
                    '1,1,0,"P","Yes",16\n'
                    '1,2,0,N,No,32\n'
                    '1,2,1,P,Yes,16\n'
                    '1,2,0,P,Yes,24\n')
    data = load_conjoint_csv(path)
    assert data.Ntasks == 2
    np.testing.assert_array_equal(data.X[0], [1., 0., 1., 28.])
    np.testing.assert_array_equal(data.X[3], [1., 0., 0., 32.])
    np.testing.assert_array_equal(data.y, [1., 0., 0., 0., 1., 0.])


def test_load_csv_missing_column(tmp_path):
    path = tmp_path / 'bad.csv'
    path.write_text('resp,task,choice,brand,price\n1,1,1,N,8\n')
    with pytest.raises(ValueError):
        load_conjoint_csv(path, num_alts=1)
