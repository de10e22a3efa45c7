'''Jump proposals for MCMC.'''


import numpy as np
import jax.random as jr




# Gaussian random walk with a fixed standard deviation per parameter
class GaussianJump:

    def __init__(self, scales, random_seed):
        self.scales = np.array(scales, dtype=float)
        self.ndim = self.scales.shape[0]
        self.random_seed = random_seed

        # one key owned by this proposal, split into independent streams
        # for the steps and for the accept / reject uniforms
        self.key = jr.PRNGKey(random_seed)
        self.step_key, self.uniform_key = jr.split(self.key)

        self.steps = None
        self.uniforms = None


    # draw every step and uniform for a run of num_iterations
    def draw(self, num_iterations):
        unit_steps = jr.normal(self.step_key, shape=(num_iterations, self.ndim))
        self.steps = np.asarray(unit_steps, dtype=float) * self.scales
        self.uniforms = np.asarray(jr.uniform(self.uniform_key, shape=(num_iterations,)), dtype=float)
        return self.steps, self.uniforms


    # propose new state for given iteration
    def Gaussian_jump(self, state, iteration):
        return state + self.steps[iteration]


    # log q(state | new_state) - log q(new_state | state), exactly zero for this symmetric walk
    def log_proposal_ratio(self, state, new_state):
        return self.step_lnpdf(new_state, state) - self.step_lnpdf(state, new_state)


    # log-density of stepping from state to new_state
    def step_lnpdf(self, state, new_state):
        z = (np.asarray(new_state) - np.asarray(state)) / self.scales
        return np.sum(-0.5 * z**2. - np.log(self.scales) - 0.5 * np.log(2. * np.pi))
