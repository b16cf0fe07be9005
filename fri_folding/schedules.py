"""
Fixed-Arity Schedules
=====================

Baseline strategies that fold by one constant arity every round, as
most FRI implementations do, and a comparison of those baselines
against the optimal strategy.

Functions:
    num_rounds           -- rounds needed at a constant arity
    fixed_arity_schedule -- baseline StrategyResult for one arity
    compare_strategies   -- optimal vs. baselines, ranked by cost

License: MIT
"""

from fri_folding.core import is_power_of_two, log2_exact
from fri_folding.errors import InvalidParameterError
from fri_folding.search import (
    _build_result,
    _folding_bits,
    optimal_strategy_for,
)
from fri_folding.validation import validate_config


def _fixed_arities(k_total, arity_bits):
    arities = [1 << arity_bits] * (k_total // arity_bits)
    if k_total % arity_bits:
        # final short round lands exactly on the threshold
        arities.append(1 << (k_total % arity_bits))
    return tuple(arities)


def num_rounds(initial_domain_size, terminal_threshold, arity):
    """Number of folding rounds at a constant `arity`, last round possibly smaller."""
    if not is_power_of_two(arity) or arity < 2:
        raise InvalidParameterError(
            "arity", arity, "must be a power of two >= 2")
    k_total = _folding_bits(initial_domain_size, terminal_threshold)
    return len(_fixed_arities(k_total, log2_exact(arity)))


def fixed_arity_schedule(config, arity):
    """Cost of folding by a constant `arity` every round.

    The arity is not limited by config.max_arity; the baseline is the
    schedule a fixed-arity prover would run.

    Parameters
    ----------
    config : FoldingConfig
    arity : int
        Power of two >= 2.

    Returns
    -------
    StrategyResult
    """
    validate_config(config)
    if not is_power_of_two(arity) or arity < 2:
        raise InvalidParameterError(
            "arity", arity, "must be a power of two >= 2")

    k_total = _folding_bits(config.initial_domain_size,
                            config.terminal_threshold)
    arities = _fixed_arities(k_total, log2_exact(arity))
    result = _build_result(config, 0, arities)
    result.total_estimated_field_elements = (
        sum(result.round_costs) + result.terminal_cost)
    return result


def compare_strategies(config, arities=None, verbose=False):
    """Compare the optimal strategy against fixed-arity baselines.

    Parameters
    ----------
    config : FoldingConfig
    arities : list of int, optional
        Baseline arities to evaluate (default 2, 4, 8, 16).
    verbose : bool

    Returns
    -------
    dict
        'optimal' : StrategyResult
        'baselines' : list of dict, sorted by cost, each with
            'arity', 'result', 'overhead' (extra field elements) and
            'ratio' (baseline cost / optimal cost).
        'best_fixed_arity' : int
            The cheapest baseline arity.
    """
    if arities is None:
        arities = [2, 4, 8, 16]

    optimal = optimal_strategy_for(config)
    opt_cost = optimal.total_estimated_field_elements

    baselines = []
    for a in arities:
        res = fixed_arity_schedule(config, a)
        cost = res.total_estimated_field_elements
        baselines.append({
            'arity': a,
            'result': res,
            'overhead': cost - opt_cost,
            'ratio': round(cost / opt_cost, 4) if opt_cost else 1.0,
        })
    baselines.sort(key=lambda b: (b['result'].total_estimated_field_elements,
                                  b['arity']))

    if verbose:
        print("  Optimal {}: {} field elements".format(
            list(optimal.arities), opt_cost))
        for b in baselines:
            print("    fixed arity {:>3}: {} (+{}, x{:.2f})".format(
                b['arity'], b['result'].total_estimated_field_elements,
                b['overhead'], b['ratio']))

    return {
        'optimal': optimal,
        'baselines': baselines,
        'best_fixed_arity': baselines[0]['arity'] if baselines else None,
    }
