"""
Round cost model: formula, terminal cost, monotonicity, weights.
"""

import pytest

from fri_folding import (
    CostModel,
    EXTENSION_FIELD_COST_MODEL,
    FoldingStep,
    round_cost,
    step_cost,
    terminal_cost,
    estimate_strategy_cost,
    InvalidParameterError,
    NoFeasibleStrategyError,
)


def test_round_cost_formula():
    # 30 * ((16 - 1) + log2(2048 / 16))
    assert round_cost(2048, 16, 30) == 30 * (15 + 7)
    assert round_cost(8, 2, 1) == 1 + 2
    assert round_cost(8, 8, 1) == 7
    assert round_cost(2, 2, 5) == 5


def test_round_cost_rounds_path_length_up():
    # 12 / 2 = 6 -> ceil(log2(6)) = 3
    assert round_cost(12, 2, 1) == 1 + 3


def test_terminal_cost_is_threshold_size():
    for t in [1, 2, 64, 1024]:
        assert terminal_cost(t) == t


def test_monotone_in_queries():
    for size in [4, 64, 2048]:
        for arity in [2, 4]:
            costs = [round_cost(size, arity, q) for q in range(0, 40)]
            assert costs == sorted(costs)


def test_monotone_in_domain_size():
    for arity in [2, 4, 8]:
        costs = [round_cost(arity << k, arity, 7) for k in range(0, 20)]
        assert costs == sorted(costs)


def test_arity_must_divide_domain():
    with pytest.raises(InvalidParameterError):
        round_cost(8, 16, 1)
    with pytest.raises(InvalidParameterError):
        round_cost(8, 1, 1)


def test_unit_model_matches_plain_formula():
    unit = CostModel()
    assert round_cost(1024, 4, 9, unit) == round_cost(1024, 4, 9)
    assert terminal_cost(32, unit) == 32


def test_weighted_model():
    m = EXTENSION_FIELD_COST_MODEL
    assert round_cost(2048, 16, 30, m) == 30 * (15 * 2 + 7 * 4)
    assert terminal_cost(8, m) == 16


def test_negative_weight_rejected():
    with pytest.raises(InvalidParameterError):
        CostModel(path_weight=-1)


def test_folding_step():
    step = FoldingStep(64, 4)
    assert step.folded_size == 16
    assert step_cost(step, 3) == round_cost(64, 4, 3)
    with pytest.raises(InvalidParameterError):
        FoldingStep(64, 3)
    with pytest.raises(InvalidParameterError):
        FoldingStep(2, 4)


def test_estimate_strategy_cost():
    # (4, 2) on 8 points: (3 + 1) + (1 + 0) + terminal 1
    assert estimate_strategy_cost(8, [4, 2], 1) == 6
    assert estimate_strategy_cost(8, [2, 2, 2], 1) == 7
    assert estimate_strategy_cost(8, [], 1) == 8
    assert estimate_strategy_cost(8, [2], 1, terminal_threshold=4) == 3 + 4


def test_estimate_strategy_cost_wrong_end():
    with pytest.raises(NoFeasibleStrategyError):
        estimate_strategy_cost(8, [2], 1, terminal_threshold=1)


if __name__ == "__main__":
    import sys
    sys.exit(pytest.main([__file__, "-q"]))
