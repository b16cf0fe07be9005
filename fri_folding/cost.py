"""
Round Cost Model
================

Heuristic proof-size contribution of each FRI round, in field elements.

Per query, a round folding a domain of size s by arity r reveals the
r - 1 sibling values of the queried point plus an authentication path
of ceil(log2(s / r)) nodes. Once folding stops, the remaining
polynomial is sent in the clear.

The model only ranks candidate strategies; it does not count hash
digests or Merkle path compression exactly.

Functions:
    round_cost             -- cost of one folding round
    step_cost              -- same, for a FoldingStep
    terminal_cost          -- cost of sending the final polynomial
    estimate_strategy_cost -- total cost of a given arity sequence

License: MIT
"""

from dataclasses import dataclass

from fri_folding.core import ceil_log2, strategy_steps
from fri_folding.errors import InvalidParameterError, NoFeasibleStrategyError


@dataclass(frozen=True)
class CostModel:
    """Multipliers for the three cost terms.

    Unit weights give the plain field-element count. Larger weights
    express values living in an extension field (sibling and terminal
    terms) or digests spanning several field elements (path term).
    """
    sibling_weight: int = 1
    path_weight: int = 1
    terminal_weight: int = 1

    def __post_init__(self):
        for name in ("sibling_weight", "path_weight", "terminal_weight"):
            w = getattr(self, name)
            if not isinstance(w, int) or isinstance(w, bool) or w < 0:
                raise InvalidParameterError(
                    name, w, "must be a non-negative integer")


UNIT_COST_MODEL = CostModel()

# Quadratic extension values and 4-element digests.
EXTENSION_FIELD_COST_MODEL = CostModel(
    sibling_weight=2, path_weight=4, terminal_weight=2)


def round_cost(domain_size, arity, num_queries, cost_model=None):
    """Proof-size contribution of folding `domain_size` points by `arity`.

    num_queries * ((arity - 1) + ceil(log2(domain_size / arity)))
    under unit weights.
    """
    m = cost_model or UNIT_COST_MODEL
    if not isinstance(arity, int) or arity < 2:
        raise InvalidParameterError("arity", arity, "must be an integer >= 2")
    if domain_size <= 0 or domain_size % arity:
        raise InvalidParameterError(
            "domain_size", domain_size,
            "must be a positive multiple of arity {}".format(arity))
    if num_queries < 0:
        raise InvalidParameterError(
            "num_queries", num_queries, "must be non-negative")

    siblings = (arity - 1) * m.sibling_weight
    path = ceil_log2(domain_size // arity) * m.path_weight
    return num_queries * (siblings + path)


def step_cost(step, num_queries, cost_model=None):
    """Cost of one FoldingStep."""
    return round_cost(step.domain_size, step.arity, num_queries, cost_model)


def terminal_cost(threshold_size, cost_model=None):
    """Cost of sending the remaining polynomial of `threshold_size` directly."""
    m = cost_model or UNIT_COST_MODEL
    if threshold_size < 0:
        raise InvalidParameterError(
            "threshold_size", threshold_size, "must be non-negative")
    return threshold_size * m.terminal_weight


def estimate_strategy_cost(initial_domain_size, arities, num_queries,
                           terminal_threshold=None, cost_model=None):
    """Estimate the proof size of a given arity sequence.

    Parameters
    ----------
    initial_domain_size : int
    arities : sequence of int
        Folding factors, first round first.
    num_queries : int
    terminal_threshold : int or None
        Expected size after the last round. None accepts whatever the
        arities leave.
    cost_model : CostModel or None

    Returns
    -------
    int
        Sum of the round costs plus the terminal cost.

    Raises
    ------
    InvalidParameterError
        An arity is not a power of two >= 2 or does not divide the
        current domain size.
    NoFeasibleStrategyError
        The arities do not end exactly at terminal_threshold.
    """
    steps = strategy_steps(initial_domain_size, arities)
    final_size = steps[-1].folded_size if steps else initial_domain_size
    if terminal_threshold is not None and final_size != terminal_threshold:
        raise NoFeasibleStrategyError(
            "arities", tuple(arities),
            "fold {} down to {}, not to terminal threshold {}".format(
                initial_domain_size, final_size, terminal_threshold))

    total = sum(step_cost(s, num_queries, cost_model) for s in steps)
    return total + terminal_cost(final_size, cost_model)
