'''Class structure for a single Metropolis-Hastings chain. Holds the current state
and its log-posterior value, and records one draw per iteration. The initial point
is kept apart from the draws, so after iteration i the state equals samples[i].'''


import numpy as np


COMPLETE = 'complete'
TRUNCATED = 'truncated'


class Chain:


    def __init__(self, x0, lnpost0, num_iterations=None):
        # initial point in parameter space and log-posterior value
        self.x0 = np.array(x0, dtype=float)
        self.lnpost0 = float(lnpost0)
        self.ndim = self.x0.shape[0]

        # number of iterations the chain was configured for
        self.num_iterations = num_iterations

        # draw history and log-posterior trace
        self.samples = []
        self.lnposts = []

        # current state of chain
        self.state = self.x0
        self.lnpost = self.lnpost0

        # acceptance bookkeeping
        self.accept_count = 0
        self.reject_count = 0
        self.status = TRUNCATED


    # record accepted proposal
    def accept(self, new_state, new_lnpost):
        self.accept_count += 1
        self.add_sample(new_state, new_lnpost)


    # rejected proposal re-records the current state
    def reject(self):
        self.reject_count += 1
        self.add_sample(self.state, self.lnpost)


    # add sample to chain
    def add_sample(self, sample, lnpost):
        self.state = sample
        self.samples.append(self.state)
        self.lnpost = lnpost
        self.lnposts.append(self.lnpost)


    def finish(self):
        if self.num_iterations is None or len(self.samples) == self.num_iterations:
            self.status = COMPLETE
        else:
            self.status = TRUNCATED


    @property
    def complete(self):
        return self.status == COMPLETE


    @property
    def num_samples(self):
        return len(self.samples)


    @property
    def acceptance_rate(self):
        total = self.accept_count + self.reject_count
        if total == 0:
            return np.nan
        return self.accept_count / total


    # draw history as an array, optionally without a burn-in prefix
    def get_samples(self, burn_in=0):
        if len(self.samples) == 0:
            return np.zeros((0, self.ndim))
        return np.array(self.samples)[burn_in:]


    def get_lnposts(self, burn_in=0):
        return np.array(self.lnposts, dtype=float)[burn_in:]
