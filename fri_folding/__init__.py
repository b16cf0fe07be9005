"""
FRI Folding Strategy Optimizer
==============================

Chooses the per-round folding factors (arities) of a FRI proof that
minimize a heuristic estimate of its size in field elements.

Given a degree bound d, a blowup factor b and q verifier queries, the
initial evaluation domain has d * b points. Each round folds the
domain by an arity r; the proof pays for revealed siblings and
authentication paths per query, then for the final polynomial once
the domain reaches the terminal threshold.

License: MIT
"""

__version__ = "0.1.0"

from fri_folding.errors import (
    FoldingStrategyError,
    InvalidParameterError,
    NoFeasibleStrategyError,
    ArithmeticOverflowError,
)
from fri_folding.core import (
    FoldingConfig, FoldingStep, StrategyResult, strategy_steps,
)
from fri_folding.validation import validate_config
from fri_folding.cost import (
    CostModel,
    UNIT_COST_MODEL,
    EXTENSION_FIELD_COST_MODEL,
    round_cost,
    step_cost,
    terminal_cost,
    estimate_strategy_cost,
)
from fri_folding.search import (
    search,
    enumerate_strategies,
    exhaustive_search,
    compute_optimal_strategy,
    optimal_strategy_for,
)
from fri_folding.schedules import (
    num_rounds,
    fixed_arity_schedule,
    compare_strategies,
)
from fri_folding.optimizer import parallel_strategy_search
