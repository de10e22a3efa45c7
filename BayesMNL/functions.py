'''Store commonly used functions.'''


from jax import jit
import jax.numpy as jnp
from jax.scipy.special import logsumexp



# log choice probabilities of multinomial logit, input utilities shaped (tasks, alternatives)
def MNL_log_probs(utilities):
    return utilities - logsumexp(utilities, axis=1, keepdims=True)

fast_MNL_log_probs = jit(MNL_log_probs)


# independent zero-mean Gaussian log-density summed over parameters
def Gaussian_lnpdf(x, stdevs):
    z = x / stdevs
    return jnp.sum(-0.5 * z**2. - jnp.log(stdevs) - 0.5 * jnp.log(2. * jnp.pi))

fast_Gaussian_lnpdf = jit(Gaussian_lnpdf)
