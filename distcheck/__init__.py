from distcheck.checks import (
    PROB_TOL,
    ProbCase,
    check_probability,
    generate_samples,
    check_mean,
    check_cov,
)
from distcheck.reporting import Reporter, CheckFailure
from distcheck.distributions import (
    Prober,
    Meaner,
    Cover,
    Rander,
    Distribution,
    MvNormal,
    Uniform,
)
