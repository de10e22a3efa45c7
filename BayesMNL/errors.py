'''Exceptions raised by the Metropolis-Hastings sampler.'''


class SamplerError(Exception):
    '''Base class for sampler failures.'''


class InvalidConfigurationError(SamplerError):
    '''Sampler inputs are inconsistent (dimensions, iteration count, proposal scales).'''


class InvalidStartError(SamplerError):
    '''Log-posterior is not finite at the initial parameter vector.'''


class EvaluationError(SamplerError):
    '''Log-posterior raised, or returned something other than a number or -inf, mid-run.'''

    def __init__(self, message, iteration=None, state=None):
        super().__init__(message)
        self.iteration = iteration
        self.state = state
