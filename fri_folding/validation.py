"""
Parameter Validator
===================

Checks a FoldingConfig before any search starts. Every failure names
the offending field and its value.

Functions:
    validate_config -- raise on the first violated constraint

License: MIT
"""

from fri_folding.core import MAX_DOMAIN_BITS, is_power_of_two
from fri_folding.cost import CostModel
from fri_folding.errors import (
    InvalidParameterError,
    NoFeasibleStrategyError,
    ArithmeticOverflowError,
)


def _require_power_of_two(name, value):
    if not is_power_of_two(value):
        raise InvalidParameterError(
            name, value, "must be a positive power of two")


def validate_config(config):
    """Validate a folding configuration.

    Parameters
    ----------
    config : FoldingConfig

    Returns
    -------
    FoldingConfig
        The same object, unchanged.

    Raises
    ------
    InvalidParameterError
        A field is not an integer, not a power of two where one is
        required, a non-positive query count or threshold,
        max_arity < 2, or a cost_model that is not a CostModel.
    ArithmeticOverflowError
        initial_degree_bound * blowup_factor exceeds 2**MAX_DOMAIN_BITS.
    NoFeasibleStrategyError
        terminal_threshold does not divide the initial domain size,
        which for a power-of-two domain also covers a threshold that
        is not a power of two.
    """
    _require_power_of_two("initial_degree_bound", config.initial_degree_bound)
    _require_power_of_two("blowup_factor", config.blowup_factor)

    q = config.num_queries
    if not isinstance(q, int) or isinstance(q, bool) or q < 1:
        raise InvalidParameterError("num_queries", q, "must be an integer >= 1")

    if config.max_arity is not None:
        _require_power_of_two("max_arity", config.max_arity)
        if config.max_arity < 2:
            raise InvalidParameterError(
                "max_arity", config.max_arity, "must be >= 2")

    if config.cost_model is not None and not isinstance(
            config.cost_model, CostModel):
        raise InvalidParameterError(
            "cost_model", config.cost_model, "must be a CostModel or None")

    t = config.terminal_threshold
    if not isinstance(t, int) or isinstance(t, bool) or t < 1:
        raise InvalidParameterError(
            "terminal_threshold", t, "must be a positive integer")

    domain = config.initial_domain_size
    if domain > 2 ** MAX_DOMAIN_BITS:
        raise ArithmeticOverflowError(
            "initial domain size {} exceeds 2**{}".format(
                domain, MAX_DOMAIN_BITS))

    # Divisors of a power of two are powers of two.
    if domain % t:
        raise NoFeasibleStrategyError(
            "terminal_threshold", config.terminal_threshold,
            "does not divide initial domain size {}".format(domain))

    return config
