'''Class structure for the multinomial logit choice model. Class contains prior, likelihood,
and posterior methods, maximum likelihood estimation, and parameter labels.'''


import warnings

from jax import jit, hessian
import jax.numpy as jnp
import numpy as np
from scipy.optimize import minimize
from scipy.special import logsumexp
from scipy.stats import norm

from BayesMNL import functions as f


# BFGS options; gtol well above float64 round-off in the log-likelihood
default_ML_options = {'gtol': 1e-3}

# prior standard deviations: wide for binary attributes, narrow for price
default_prior_stdevs = np.array([5., 5., 5., 1.])


class MNL_Model:

    def __init__(self, X, y, num_alts, prior_stdevs=default_prior_stdevs, labels=None):

        self.X = jnp.array(X)  # design matrix, one row per alternative shown
        self.y = jnp.array(y)  # 1 for chosen alternative, else 0
        self.num_alts = num_alts  # alternatives per choice task

        # attributes of design
        self.Nrows, self.ndim = self.X.shape
        if self.y.shape[0] != self.Nrows:
            raise ValueError(f'{self.y.shape[0]} choices for {self.Nrows} design rows')
        if self.Nrows % self.num_alts != 0:
            raise ValueError(f'{self.Nrows} rows cannot be split into tasks of {self.num_alts} alternatives')
        self.Ntasks = self.Nrows // self.num_alts
        self.Y = self.y.reshape(self.Ntasks, self.num_alts)

        # float64 copies for the optimizer
        self.X64 = np.asarray(X, dtype=float)
        self.Y64 = np.asarray(y, dtype=float).reshape(self.Ntasks, self.num_alts)

        # independent Gaussian prior on each coefficient
        self.prior_stdevs = jnp.array(np.asarray(prior_stdevs, dtype=float))
        if self.prior_stdevs.shape != (self.ndim,):
            raise ValueError(f'{self.prior_stdevs.shape} prior standard deviations for {self.ndim} coefficients')
        if np.any(np.asarray(self.prior_stdevs) <= 0.):
            raise ValueError('prior standard deviations must be positive')

        # parameter labels for plotting
        if labels is None:
            labels = [rf'$\beta_{{{i}}}$' for i in range(self.ndim)]
        self.labels = np.array(labels)

        # priors, likelihood, and posterior
        self.fast_lnprior = jit(self.lnprior)
        self.fast_lnlike = jit(self.lnlikelihood)
        self.fast_lnpost = jit(self.lnposterior)


    @classmethod
    def from_data(cls, data, prior_stdevs=default_prior_stdevs):
        return cls(data.X, data.y, data.num_alts, prior_stdevs=prior_stdevs, labels=data.feature_names)


    # Gaussian prior
    def lnprior(self, beta):
        return f.fast_Gaussian_lnpdf(beta, self.prior_stdevs)


    # likelihood
    def lnlikelihood(self, beta):
        utilities = (self.X @ beta).reshape(self.Ntasks, self.num_alts)
        return jnp.sum(self.Y * f.fast_MNL_log_probs(utilities))


    # posterior
    def lnposterior(self, beta):
        return self.fast_lnprior(beta) + self.fast_lnlike(beta)


    # choice probabilities for each task
    def choice_probs(self, beta):
        utilities = (self.X @ jnp.asarray(beta)).reshape(self.Ntasks, self.num_alts)
        return jnp.exp(f.fast_MNL_log_probs(utilities))


    # negative log-likelihood and its gradient in float64, for the optimizer
    def neg_lnlike_and_grad(self, beta):
        utilities = (self.X64 @ beta).reshape(self.Ntasks, self.num_alts)
        log_probs = utilities - logsumexp(utilities, axis=1, keepdims=True)
        residual = self.Y64 - np.exp(log_probs) * self.Y64.sum(axis=1, keepdims=True)
        return -np.sum(self.Y64 * log_probs), -self.X64.T @ residual.ravel()


    # maximum likelihood estimate with standard errors from the observed Fisher information
    def fit_ML(self, x0=None, cred_level=0.95, options=None):
        if x0 is None:
            x0 = np.zeros(self.ndim)
        if options is None:
            options = default_ML_options

        res = minimize(self.neg_lnlike_and_grad, np.asarray(x0, dtype=float), jac=True,
                       method='BFGS', options=options)
        if not res.success:
            warnings.warn(f'maximum likelihood fit did not converge: {res.message}', RuntimeWarning)

        self.beta_ML = np.asarray(res.x, dtype=float)
        self.Fisher = np.asarray(-hessian(self.lnlikelihood)(jnp.asarray(self.beta_ML)), dtype=float)
        self.cov_ML = np.linalg.inv(self.Fisher)
        self.stderr_ML = np.sqrt(np.diag(self.cov_ML))

        z = norm.ppf(0.5 + cred_level / 2.)
        self.lower_ML = self.beta_ML - z * self.stderr_ML
        self.upper_ML = self.beta_ML + z * self.stderr_ML
        return res
