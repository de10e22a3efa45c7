'''Class structure for conjoint choice data.'''


import numpy as np


BRANDS = np.array(['N', 'P', 'H'])  # Netflix, Prime, Hulu (baseline)
ADS = np.array(['Yes', 'No'])  # No is baseline
FEATURE_NAMES = np.array(['brand_N', 'brand_P', 'ad_yes', 'price'])


class Conjoint_Data:

    def __init__(self, resp, task, brand, ad, price, choice, num_alts=3):
        # one row per alternative shown, ordered by respondent then task
        order = np.lexsort((np.arange(len(resp)), np.asarray(task), np.asarray(resp)))
        self.resp = np.asarray(resp, dtype=int)[order]
        self.task = np.asarray(task, dtype=int)[order]
        self.brand = np.asarray(brand, dtype=str)[order]
        self.ad = np.asarray(ad, dtype=str)[order]
        self.price = np.asarray(price, dtype=float)[order]
        self.choice = np.asarray(choice, dtype=int)[order]
        self.num_alts = num_alts

        if not np.all(np.isin(self.brand, BRANDS)):
            raise ValueError(f'unknown brand codes {np.setdiff1d(self.brand, BRANDS)}')
        if not np.all(np.isin(self.ad, ADS)):
            raise ValueError(f'unknown ad codes {np.setdiff1d(self.ad, ADS)}')
        if not np.all(np.isin(self.choice, [0, 1])):
            raise ValueError('choice must be coded 0 / 1')

        # every (respondent, task) must show num_alts alternatives with a single choice
        self.Nrows = self.resp.shape[0]
        if self.Nrows == 0 or self.Nrows % self.num_alts != 0:
            raise ValueError(f'{self.Nrows} rows cannot be split into tasks of {self.num_alts} alternatives')
        self.Ntasks = self.Nrows // self.num_alts
        task_ids = np.stack((self.resp, self.task), axis=1).reshape(self.Ntasks, self.num_alts, 2)
        if not np.all(task_ids == task_ids[:, :1]):
            raise ValueError(f'each task must show exactly {self.num_alts} alternatives')
        choices_per_task = self.choice.reshape(self.Ntasks, self.num_alts).sum(axis=1)
        if not np.all(choices_per_task == 1):
            raise ValueError('each task must have exactly one chosen alternative')
        self.Nresp = np.unique(self.resp).shape[0]

        # dummy-coded design matrix and choice indicators
        self.feature_names = FEATURE_NAMES
        self.X = np.column_stack(((self.brand == 'N').astype(float),
                                  (self.brand == 'P').astype(float),
                                  (self.ad == 'Yes').astype(float),
                                  self.price))
        self.y = self.choice.astype(float)

        # share of tasks won by each brand
        chosen = self.brand[self.choice == 1]
        self.brand_shares = {b: np.mean(chosen == b) for b in BRANDS}


def load_conjoint_csv(path, num_alts=3):
    table = np.genfromtxt(path, delimiter=',', names=True, dtype=None, encoding='utf-8')
    table = np.atleast_1d(table)
    for column in ('resp', 'task', 'choice', 'brand', 'ad', 'price'):
        if column not in table.dtype.names:
            raise ValueError(f'{path} has no {column!r} column')
    # codes may be quoted, as written by R's write.csv
    brand = np.char.strip(table['brand'].astype(str), '"')
    ad = np.char.strip(table['ad'].astype(str), '"')
    return Conjoint_Data(table['resp'], table['task'], brand, ad,
                         table['price'], table['choice'], num_alts=num_alts)
