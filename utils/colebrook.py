"""
Turbulent friction factor correlations.

Provides the explicit Swamee-Jain correlation and a bounded Newton solver for the
implicit Colebrook-White relation, seeded with Swamee-Jain.
"""

import math
import logging
from typing import NamedTuple

from .constants import COLEBROOK_TOLERANCE, COLEBROOK_MAX_ITER

logger = logging.getLogger("friction-loss-mcp.colebrook")

LN10 = math.log(10.0)


class ColebrookSolution(NamedTuple):
    """Outcome of a Colebrook-White solve."""
    friction_factor: float
    iterations: int
    converged: bool


def swamee_jain(re: float, relative_roughness: float) -> float:
    """
    Explicit Darcy friction factor using the Swamee-Jain (1976) correlation.

    f = 0.25 / [log10(ε/D/3.7 + 5.74/Re^0.9)]^2

    Args:
        re: Reynolds number (> 0)
        relative_roughness: Relative roughness ε/D (>= 0)

    Returns:
        Darcy friction factor
    """
    log_term = math.log10(relative_roughness / 3.7 + 5.74 / re ** 0.9)
    return 0.25 / log_term ** 2


def colebrook_white(
    re: float,
    relative_roughness: float,
    tolerance: float = COLEBROOK_TOLERANCE,
    max_iter: int = COLEBROOK_MAX_ITER,
) -> ColebrookSolution:
    """
    Solve the Colebrook-White equation for the Darcy friction factor.

        1/√f = -2·log10( (ε/D)/3.7 + 2.51/(Re·√f) )

    Newton's method is applied to g(x) = x + 2·log10(a + b·x) with x = 1/√f,
    a = (ε/D)/3.7 and b = 2.51/Re. The iteration stops when the change in f
    drops below `tolerance` or after `max_iter` steps. Hitting the cap is not
    an error: the best estimate is returned with converged=False.

    Args:
        re: Reynolds number (> 0)
        relative_roughness: Relative roughness ε/D (>= 0)
        tolerance: Absolute stopping criterion on |Δf|
        max_iter: Maximum number of Newton steps

    Returns:
        ColebrookSolution(friction_factor, iterations, converged)
    """
    a = relative_roughness / 3.7
    b = 2.51 / re

    f = swamee_jain(re, relative_roughness)
    x = 1.0 / math.sqrt(f)

    for iteration in range(1, max_iter + 1):
        arg = a + b * x
        g = x + 2.0 * math.log10(arg)
        dg = 1.0 + 2.0 * b / (LN10 * arg)
        x_next = x - g / dg

        # log10 argument must stay positive
        if x_next <= 0.0 or a + b * x_next <= 0.0:
            logger.warning(
                "Colebrook iteration left its domain at Re=%.6g, eD=%.6g; returning f=%.8g",
                re, relative_roughness, f,
            )
            return ColebrookSolution(f, iteration, False)

        f_next = 1.0 / (x_next * x_next)
        delta = abs(f_next - f)
        x, f = x_next, f_next
        if delta < tolerance:
            logger.debug("Colebrook converged in %d iterations: f=%.10g", iteration, f)
            return ColebrookSolution(f, iteration, True)

    logger.warning(
        "Colebrook iteration did not converge in %d iterations at Re=%.6g, eD=%.6g; "
        "returning best estimate f=%.8g",
        max_iter, re, relative_roughness, f,
    )
    return ColebrookSolution(f, max_iter, False)
