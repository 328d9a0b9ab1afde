"""
Core math modules для XIRR

Численные алгоритмы: IEEE-754 safeguards и solver метода Ньютона.
"""

# Numerical Safeguards
from xirr.core.math.numerical_safeguards import (
    ieee_divide,
    ieee_pow,
    is_valid_float,
)

# Solver
from xirr.core.math.solver import (
    DAYS_PER_YEAR,
    DEFAULT_GUESS,
    GUESS_SWEEP_START,
    GUESS_SWEEP_STEP,
    GUESS_SWEEP_STOP,
    MAX_COMPUTE_WITH_GUESS_ITERATIONS,
    MAX_ERROR,
    compute,
    compute_with_guess,
    dxirr,
    guess_sweep,
    validate_payments,
    xirr,
)

__all__ = [
    # Numerical Safeguards
    "ieee_divide",
    "ieee_pow",
    "is_valid_float",
    # Solver — Constants
    "DAYS_PER_YEAR",
    "DEFAULT_GUESS",
    "GUESS_SWEEP_START",
    "GUESS_SWEEP_STEP",
    "GUESS_SWEEP_STOP",
    "MAX_COMPUTE_WITH_GUESS_ITERATIONS",
    "MAX_ERROR",
    # Solver — Functions
    "compute",
    "compute_with_guess",
    "dxirr",
    "guess_sweep",
    "validate_payments",
    "xirr",
]
