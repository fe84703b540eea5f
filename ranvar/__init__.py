from .special import log_gamma
from .variates import std_gamma, gamma_sample, chisquare_sample, beta_sample, poisson_sample, cauchy_sample, \
    student_t_sample
from .sources import make_rng, check_source
from .exceptions import InvalidParameterError
from .distributions import Gamma, ChiSquare, Beta, Poisson, Cauchy, StudentT
