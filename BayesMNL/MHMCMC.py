'''Script does random-walk Metropolis-Hastings MCMC.'''


import numbers

import numpy as np

from BayesMNL.chains import Chain
from BayesMNL.jumps import GaussianJump
from BayesMNL.errors import InvalidConfigurationError, InvalidStartError, EvaluationError




# seeds map one-to-one onto 32-bit PRNG keys
MAX_SEED = 2**32


# check inputs before any random numbers are drawn
def check_configuration(x0, proposal_scales, num_iterations, random_seed):

    if x0.ndim != 1 or x0.shape[0] < 1:
        raise InvalidConfigurationError(f'initial parameters must be a non-empty vector, got shape {x0.shape}')
    if not np.all(np.isfinite(x0)):
        raise InvalidConfigurationError('initial parameters must be finite')
    if proposal_scales.ndim != 1 or proposal_scales.shape[0] != x0.shape[0]:
        raise InvalidConfigurationError(f'{proposal_scales.shape[0] if proposal_scales.ndim == 1 else proposal_scales.shape} '
                                        f'proposal scales given for {x0.shape[0]} parameters')
    if not np.all(np.isfinite(proposal_scales)) or np.any(proposal_scales <= 0.):
        raise InvalidConfigurationError(f'proposal scales must be positive and finite, got {proposal_scales}')
    if isinstance(num_iterations, bool) or not isinstance(num_iterations, numbers.Integral):
        raise InvalidConfigurationError(f'number of iterations must be an integer, got {num_iterations!r}')
    if num_iterations < 1:
        raise InvalidConfigurationError(f'number of iterations must be at least 1, got {num_iterations}')
    if isinstance(random_seed, bool) or not isinstance(random_seed, numbers.Integral):
        raise InvalidConfigurationError(f'random seed must be an integer, got {random_seed!r}')
    if not 0 <= random_seed < MAX_SEED:
        raise InvalidConfigurationError(f'random seed must be in [0, 2**32), got {random_seed}')


# evaluate caller's log-posterior and coerce to a float
def evaluate_lnpost(lnpost_func, x):
    return float(lnpost_func(x))


def run(initial_parameters,
        log_posterior,
        proposal_scales,
        num_iterations,
        random_seed,
        stop_check=None,
        verbose=False):

    try:
        x0 = np.array(initial_parameters, dtype=float)
        scales = np.array(proposal_scales, dtype=float)
    except (TypeError, ValueError) as err:
        raise InvalidConfigurationError(f'parameters and proposal scales must be real vectors: {err}') from err
    check_configuration(x0, scales, num_iterations, random_seed)

    # starting point must have positive posterior density
    try:
        lnpost0 = evaluate_lnpost(log_posterior, x0)
    except Exception as err:
        raise InvalidStartError(f'log-posterior failed at initial parameters {x0}: {err}') from err
    if not np.isfinite(lnpost0):
        raise InvalidStartError(f'log-posterior is {lnpost0} at initial parameters {x0}')

    # initialize chain and proposal
    chain = Chain(x0, lnpost0, num_iterations=num_iterations)
    jump = GaussianJump(scales, random_seed)
    _, uniforms = jump.draw(num_iterations)

    # main MCMC loop
    for i in range(num_iterations):

        # cooperative cancellation between iterations
        if stop_check is not None and stop_check(i):
            break

        # update progress
        if verbose and i % max(num_iterations // 1000, 1) == 0:
            print(f'{round(i / num_iterations * 100, 3)}%', end='\r')

        # propose jump and evaluate posterior at new point
        new_state = jump.Gaussian_jump(chain.state, i)
        try:
            new_lnpost = evaluate_lnpost(log_posterior, new_state)
        except Exception as err:
            raise EvaluationError(f'log-posterior failed at iteration {i}: {err}',
                                  iteration=i, state=new_state) from err
        if np.isnan(new_lnpost) or new_lnpost == np.inf:
            raise EvaluationError(f'log-posterior returned {new_lnpost} at iteration {i}',
                                  iteration=i, state=new_state)

        # zero posterior density is never accepted
        if new_lnpost == -np.inf:
            chain.reject()
            continue

        # acceptance probability, capped at one
        log_acc_ratio = new_lnpost - chain.lnpost + jump.log_proposal_ratio(chain.state, new_state)
        accept_prob = np.exp(min(log_acc_ratio, 0.))

        # accept or reject
        if uniforms[i] < accept_prob:
            chain.accept(new_state, new_lnpost)
        else:
            chain.reject()

    chain.finish()

    if verbose:
        print(f'Jump acceptance rate: {chain.acceptance_rate}')
        if not chain.complete:
            print(f'Stopped after {chain.num_samples} of {num_iterations} iterations')

    return chain
