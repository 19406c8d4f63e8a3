# checks.py
"""
Cross-checks between a distribution's analytic quantities and their exact or
Monte Carlo counterparts.

Every check takes a `Reporter` as its first argument and reports each
mismatch to it instead of raising, so all mismatches in one call are seen.

Typical use inside a test::

    x = np.empty((100_000, dist.dim))
    generate_samples(x, dist)
    check_mean(reporter, 0, x, dist, 1e-2)
    check_cov(reporter, 0, x, dist, 1e-2)
    reporter.raise_for_failures()
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

import numpy as np

from .custom_types import Array
from .compare import (
    equal,
    equal_approx,
    matrix_equal,
    matrix_equal_approx,
    is_symmetric,
    format_matrix,
)
from .distributions.distribution import Prober, Meaner, Cover, Rander
from .reporting import Reporter
from . import stats

__all__ = [
    "PROB_TOL",
    "ProbCase",
    "check_probability",
    "generate_samples",
    "check_mean",
    "check_cov",
]

logger = logging.getLogger(__name__)

# Absolute tolerance for closed-form densities.
PROB_TOL = 1e-14


@dataclass(frozen=True)
class ProbCase:
    """A point and the log density `dist` is expected to report there."""
    dist: Prober
    loc: Sequence[float]
    log_prob: float


def check_probability(t: Reporter, cases: Iterable[ProbCase], *, tol: float = PROB_TOL) -> None:
    for case in cases:
        log_prob = case.dist.log_prob(case.loc)
        if math.fabs(log_prob - case.log_prob) > tol:
            t.error(f"LogProb mismatch: want: {case.log_prob}, got: {log_prob}")
        want = math.exp(case.log_prob)
        prob = case.dist.prob(case.loc)
        if math.fabs(prob - want) > tol:
            t.error(f"Prob mismatch: want: {want}, got: {prob}")


def generate_samples(x: Array, r: Rander) -> None:
    """Fill every row of `x` in place with one draw from `r`."""
    for i in range(x.shape[0]):
        r.rand(x[i])


def check_mean(t: Reporter, case: Any, x: Array, m: Meaner, tol: float) -> None:
    logger.debug("checking mean, case %s, %d samples", case, x.shape[0])
    mean = m.mean(None)

    # Check that the answer is identical when using None or a buffer.
    mean2 = np.zeros(len(mean))
    m.mean(mean2)
    if not equal(mean, mean2):
        t.error(f"Mean mismatch when providing nil and slice. Case {case}")

    # Check that the mean matches the samples.
    mean_est = stats.column_means(x)
    if not equal_approx(mean, mean_est, tol):
        t.error(f"Returned mean and sample mean mismatch. Case {case}. Empirical {mean_est}, returned {mean}")


def check_cov(t: Reporter, case: Any, x: Array, c: Cover, tol: float) -> None:
    logger.debug("checking covariance, case %s, %d samples", case, x.shape[0])
    cov = c.cov(None)
    if not is_symmetric(cov):
        t.error(f"Cov is not symmetric. Case {case}.\n{format_matrix(cov)}")

    n = cov.shape[0]
    cov2 = np.zeros((n, n))
    c.cov(cov2)
    if not matrix_equal(cov, cov2):
        t.error(f"Cov mismatch when providing nil and matrix. Case {case}")

    cov3 = np.empty((0, 0))
    c.cov(cov3)
    if not matrix_equal(cov, cov3):
        t.error(f"Cov mismatch when providing zero matrix. Case {case}")

    # Check that the covariance matrix matches the samples.
    cov_est = stats.covariance_matrix(x)
    if not matrix_equal_approx(cov_est, cov, tol):
        t.error(
            f"Return cov and sample cov mismatch. Case {case}.\n"
            f"Got:\n{format_matrix(cov)}\nWant:\n{format_matrix(cov_est)}"
        )
