from .gamma import std_gamma, gamma_sample, chisquare_sample, gamma_method, GAMMA_METHODS
from .beta import beta_sample, beta_method, BETA_METHODS
from .poisson import poisson_sample, poisson_method, POISSON_METHODS
from .cauchy import cauchy_sample
from .student_t import student_t_sample
