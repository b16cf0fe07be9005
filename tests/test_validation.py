"""
Parameter validation: every rejected field is named in the error.
"""

import pytest

from fri_folding import (
    FoldingConfig,
    CostModel,
    validate_config,
    compute_optimal_strategy,
    InvalidParameterError,
    NoFeasibleStrategyError,
    ArithmeticOverflowError,
)


def _config(**overrides):
    params = dict(initial_degree_bound=1024, blowup_factor=2, num_queries=30,
                  max_arity=16, terminal_threshold=1)
    params.update(overrides)
    return FoldingConfig(**params)


def test_valid_config_is_returned_unchanged():
    config = _config()
    assert validate_config(config) is config
    assert config.initial_domain_size == 2048


def test_degree_bound_not_power_of_two():
    with pytest.raises(InvalidParameterError) as info:
        compute_optimal_strategy(1000, 2, 30, max_arity=16)
    assert info.value.field == "initial_degree_bound"
    assert info.value.value == 1000
    assert "initial_degree_bound" in str(info.value)


@pytest.mark.parametrize("field,value", [
    ("initial_degree_bound", 0),
    ("initial_degree_bound", -8),
    ("blowup_factor", 3),
    ("blowup_factor", 0),
    ("num_queries", 0),
    ("num_queries", -1),
    ("max_arity", 1),
    ("max_arity", 6),
    ("terminal_threshold", 0),
])
def test_rejected_fields(field, value):
    with pytest.raises(InvalidParameterError) as info:
        validate_config(_config(**{field: value}))
    assert info.value.field == field
    assert info.value.value == value


def test_booleans_are_not_sizes():
    with pytest.raises(InvalidParameterError):
        validate_config(_config(blowup_factor=True))


def test_threshold_not_dividing_domain_is_infeasible():
    with pytest.raises(NoFeasibleStrategyError) as info:
        compute_optimal_strategy(1024, 2, 30, terminal_threshold=4096)
    assert info.value.field == "terminal_threshold"
    # also reported as a parameter error
    assert isinstance(info.value, InvalidParameterError)


def test_non_power_of_two_threshold_is_infeasible():
    with pytest.raises(NoFeasibleStrategyError):
        compute_optimal_strategy(1024, 2, 30, terminal_threshold=3)


def test_domain_beyond_table_range():
    with pytest.raises(ArithmeticOverflowError):
        validate_config(_config(initial_degree_bound=2 ** 60,
                                blowup_factor=2 ** 4))


def test_cost_model_must_be_a_cost_model():
    with pytest.raises(InvalidParameterError) as info:
        validate_config(_config(cost_model={}))
    assert info.value.field == "cost_model"
    validate_config(_config(cost_model=CostModel(path_weight=4)))


def test_max_arity_is_optional():
    config = _config(max_arity=None, terminal_threshold=4)
    validate_config(config)
    assert config.effective_max_arity() == 512


if __name__ == "__main__":
    import sys
    sys.exit(pytest.main([__file__, "-q"]))
