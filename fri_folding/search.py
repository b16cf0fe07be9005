"""
Strategy Search Engine
======================

Finds the arity sequence that minimizes the estimated FRI proof size.

best(size) is the cheapest way to fold `size` points down to the
terminal threshold. It is filled bottom-up over the exponent
k = log2(size / terminal_threshold), so the table has one row per
reachable size and no call-stack recursion is needed:

    best(threshold) = terminal_cost(threshold)
    best(size)      = min over r of round_cost(size, r) + best(size / r)

Arities are scanned in increasing order and only a strict improvement
replaces the incumbent, so among equal-cost arities the smallest wins.

Functions:
    search                   -- memoized search on raw sizes
    enumerate_strategies     -- every valid arity sequence (brute force)
    exhaustive_search        -- reference search over enumerate_strategies
    compute_optimal_strategy -- validated entry point returning StrategyResult
    optimal_strategy_for     -- same, from a FoldingConfig

License: MIT
"""

import numpy as np

from fri_folding.core import (
    FoldingConfig,
    StrategyResult,
    INT64_MAX,
    MAX_DOMAIN_BITS,
    MAX_EXHAUSTIVE_BITS,
    DEFAULT_TERMINAL_THRESHOLD,
    is_power_of_two,
    log2_exact,
    strategy_steps,
)
from fri_folding.cost import (
    round_cost,
    step_cost,
    terminal_cost,
    estimate_strategy_cost,
)
from fri_folding.errors import (
    InvalidParameterError,
    NoFeasibleStrategyError,
    ArithmeticOverflowError,
)
from fri_folding.validation import validate_config


def _folding_bits(initial_domain_size, terminal_threshold):
    """log2(initial_domain_size / terminal_threshold), or raise if not exact."""
    if terminal_threshold <= 0 or initial_domain_size <= 0:
        raise NoFeasibleStrategyError(
            "terminal_threshold", terminal_threshold,
            "sizes must be positive")
    if initial_domain_size % terminal_threshold:
        raise NoFeasibleStrategyError(
            "terminal_threshold", terminal_threshold,
            "does not divide initial domain size {}".format(
                initial_domain_size))
    ratio = initial_domain_size // terminal_threshold
    if not is_power_of_two(ratio):
        raise NoFeasibleStrategyError(
            "terminal_threshold", terminal_threshold,
            "initial domain size {} is not a power-of-two multiple".format(
                initial_domain_size))
    return log2_exact(ratio)


def _max_arity_bits(max_arity, k_total):
    """Largest usable arity exponent, 0 when max_arity is 1."""
    if max_arity is None:
        return k_total
    if not is_power_of_two(max_arity):
        raise InvalidParameterError(
            "max_arity", max_arity, "must be a positive power of two")
    return min(log2_exact(max_arity), k_total)


def _check_range(value, size):
    if value > INT64_MAX:
        raise ArithmeticOverflowError(
            "cost {} at domain size {} exceeds the int64 range".format(
                value, size))


def search(initial_domain_size, terminal_threshold, max_arity, num_queries,
           cost_model=None, verbose=False):
    """Minimum-cost folding strategy by bottom-up dynamic programming.

    Parameters
    ----------
    initial_domain_size : int
    terminal_threshold : int
        Size at which folding stops.
    max_arity : int or None
        Largest folding factor allowed, a power of two. None allows any.
    num_queries : int
    cost_model : CostModel or None
    verbose : bool

    Returns
    -------
    (int, tuple of int)
        Total estimated cost and the arities, first round first.

    Raises
    ------
    InvalidParameterError
        max_arity is not a power of two.
    NoFeasibleStrategyError
        The threshold is not reachable with the allowed arities.
    ArithmeticOverflowError
        A size or an accumulated cost does not fit in int64.
    """
    k_total = _folding_bits(initial_domain_size, terminal_threshold)
    if initial_domain_size > 2 ** MAX_DOMAIN_BITS:
        raise ArithmeticOverflowError(
            "initial domain size {} exceeds 2**{}".format(
                initial_domain_size, MAX_DOMAIN_BITS))

    max_bits = _max_arity_bits(max_arity, k_total)
    if k_total > 0 and max_bits == 0:
        raise NoFeasibleStrategyError(
            "max_arity", max_arity,
            "no arity >= 2 available to fold {} down to {}".format(
                initial_domain_size, terminal_threshold))

    # Row k holds best(terminal_threshold * 2**k).
    cost = np.zeros(k_total + 1, dtype=np.int64)
    choice = np.zeros(k_total + 1, dtype=np.int64)

    base = terminal_cost(terminal_threshold, cost_model)
    _check_range(base, terminal_threshold)
    cost[0] = base

    for k in range(1, k_total + 1):
        size = terminal_threshold << k
        best = None
        best_bits = 0
        for j in range(1, min(k, max_bits) + 1):
            candidate = (round_cost(size, 1 << j, num_queries, cost_model)
                         + int(cost[k - j]))
            if best is None or candidate < best:
                best = candidate
                best_bits = j
        _check_range(best, size)
        cost[k] = best
        choice[k] = best_bits
        if verbose:
            print("    size={}: arity {} -> cost {}".format(
                size, 1 << best_bits, best))

    arities = []
    k = k_total
    while k > 0:
        j = int(choice[k])
        arities.append(1 << j)
        k -= j

    return int(cost[k_total]), tuple(arities)


def enumerate_strategies(initial_domain_size, terminal_threshold,
                         max_arity=None):
    """Yield every valid arity sequence in lexicographic order.

    Raises InvalidParameterError when the folding ratio exceeds
    2**MAX_EXHAUSTIVE_BITS.
    """
    k_total = _folding_bits(initial_domain_size, terminal_threshold)
    if k_total > MAX_EXHAUSTIVE_BITS:
        raise InvalidParameterError(
            "initial_domain_size", initial_domain_size,
            "too large for exhaustive enumeration (ratio above 2**{})".format(
                MAX_EXHAUSTIVE_BITS))
    max_bits = _max_arity_bits(max_arity, k_total)

    def _compositions(remaining):
        if remaining == 0:
            yield ()
            return
        for j in range(1, min(remaining, max_bits) + 1):
            for rest in _compositions(remaining - j):
                yield (1 << j,) + rest

    return _compositions(k_total)


def exhaustive_search(initial_domain_size, terminal_threshold, max_arity,
                      num_queries, cost_model=None):
    """Brute-force counterpart of `search`, for small domains.

    Evaluates every sequence from enumerate_strategies and keeps the
    first minimum, i.e. the lexicographically smallest optimal
    sequence, which is also what `search` returns.
    """
    best_cost = None
    best_arities = None
    for arities in enumerate_strategies(
            initial_domain_size, terminal_threshold, max_arity):
        c = estimate_strategy_cost(initial_domain_size, arities, num_queries,
                                   terminal_threshold, cost_model)
        if best_cost is None or c < best_cost:
            best_cost = c
            best_arities = arities

    if best_arities is None:
        raise NoFeasibleStrategyError(
            "max_arity", max_arity,
            "no arity >= 2 available to fold {} down to {}".format(
                initial_domain_size, terminal_threshold))
    return best_cost, best_arities


def _build_result(config, total, arities):
    steps = strategy_steps(config.initial_domain_size, arities)
    return StrategyResult(
        total_estimated_field_elements=total,
        arities=arities,
        initial_domain_size=config.initial_domain_size,
        terminal_threshold=config.terminal_threshold,
        num_queries=config.num_queries,
        round_costs=tuple(step_cost(s, config.num_queries, config.cost_model)
                          for s in steps),
        terminal_cost=terminal_cost(config.terminal_threshold,
                                    config.cost_model),
    )


def optimal_strategy_for(config, verbose=False):
    """Validate `config` and return its optimal StrategyResult."""
    validate_config(config)
    if verbose:
        print("  Searching folding strategy: domain {} -> {}, "
              "{} queries, max arity {}".format(
                  config.initial_domain_size, config.terminal_threshold,
                  config.num_queries, config.effective_max_arity()))

    total, arities = search(
        config.initial_domain_size, config.terminal_threshold,
        config.effective_max_arity(), config.num_queries,
        cost_model=config.cost_model, verbose=verbose)

    result = _build_result(config, total, arities)
    if verbose:
        print("  Optimal arities {} ({} rounds), {} field elements".format(
            list(arities), result.num_rounds, total))
    return result


def compute_optimal_strategy(initial_degree_bound, blowup_factor, num_queries,
                             max_arity=None,
                             terminal_threshold=DEFAULT_TERMINAL_THRESHOLD,
                             cost_model=None, verbose=False):
    """Compute the folding strategy minimizing the estimated proof size.

    Parameters
    ----------
    initial_degree_bound : int
        Power of two.
    blowup_factor : int
        Power of two; the initial domain has
        initial_degree_bound * blowup_factor points.
    num_queries : int
        Verifier queries, >= 1.
    max_arity : int or None, optional
        Largest folding factor (power of two >= 2). None allows any
        arity up to the whole folding ratio; pass 16 to reproduce the
        usual fixed cap of 16.
    terminal_threshold : int, optional
        Domain size at which the remaining polynomial is sent directly
        (default 1).
    cost_model : CostModel or None, optional
        Term weights (default unit weights).
    verbose : bool, optional

    Returns
    -------
    StrategyResult

    Raises
    ------
    InvalidParameterError, NoFeasibleStrategyError, ArithmeticOverflowError
    """
    config = FoldingConfig(
        initial_degree_bound=initial_degree_bound,
        blowup_factor=blowup_factor,
        num_queries=num_queries,
        max_arity=max_arity,
        terminal_threshold=terminal_threshold,
        cost_model=cost_model,
    )
    return optimal_strategy_for(config, verbose=verbose)
