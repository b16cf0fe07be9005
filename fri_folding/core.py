"""Core definitions: FoldingConfig, FoldingStep, StrategyResult."""

import json
from dataclasses import dataclass, field, asdict
from typing import Optional, Tuple

from fri_folding.errors import InvalidParameterError


# Exponent limit of the int64 cost table (sizes up to 2**62).
MAX_DOMAIN_BITS = 62
INT64_MAX = 2 ** 63 - 1

# Brute-force enumeration grows as 2**(bits - 1) sequences.
MAX_EXHAUSTIVE_BITS = 20

DEFAULT_TERMINAL_THRESHOLD = 1


def is_power_of_two(n):
    return (isinstance(n, int) and not isinstance(n, bool)
            and n > 0 and n & (n - 1) == 0)


def log2_exact(n):
    """Exponent of a power of two."""
    return n.bit_length() - 1


def ceil_log2(n):
    """ceil(log2(n)) for a positive integer, computed without floats."""
    return (n - 1).bit_length()


def strategy_steps(initial_domain_size, arities):
    """Expand an arity sequence into its FoldingSteps, first round first."""
    steps = []
    size = initial_domain_size
    for r in arities:
        step = FoldingStep(size, r)
        steps.append(step)
        size = step.folded_size
    return steps


@dataclass
class FoldingConfig:
    """Parameters of one folding strategy computation."""
    initial_degree_bound: int
    blowup_factor: int
    num_queries: int
    max_arity: Optional[int] = None
    terminal_threshold: int = DEFAULT_TERMINAL_THRESHOLD
    cost_model: Optional["CostModel"] = None

    @property
    def initial_domain_size(self):
        return self.initial_degree_bound * self.blowup_factor

    def effective_max_arity(self):
        """max_arity, or the whole remaining ratio when unset."""
        if self.max_arity is not None:
            return self.max_arity
        return max(2, self.initial_domain_size // self.terminal_threshold)


@dataclass(frozen=True)
class FoldingStep:
    """One round: fold a domain of `domain_size` points by `arity`."""
    domain_size: int
    arity: int

    def __post_init__(self):
        if not is_power_of_two(self.arity) or self.arity < 2:
            raise InvalidParameterError(
                "arity", self.arity, "must be a power of two >= 2")
        if self.domain_size <= 0 or self.domain_size % self.arity:
            raise InvalidParameterError(
                "domain_size", self.domain_size,
                "must be a positive multiple of arity {}".format(self.arity))

    @property
    def folded_size(self):
        return self.domain_size // self.arity


@dataclass
class StrategyResult:
    """Winning strategy and its estimated proof size in field elements."""
    total_estimated_field_elements: int
    arities: Tuple[int, ...]
    initial_domain_size: int = 0
    terminal_threshold: int = DEFAULT_TERMINAL_THRESHOLD
    num_queries: int = 0
    round_costs: Tuple[int, ...] = field(default_factory=tuple)
    terminal_cost: int = 0

    @property
    def num_rounds(self):
        return len(self.arities)

    def steps(self):
        return strategy_steps(self.initial_domain_size, self.arities)

    def to_dict(self):
        d = asdict(self)
        d["arities"] = list(self.arities)
        d["round_costs"] = list(self.round_costs)
        d["num_rounds"] = self.num_rounds
        return d

    def to_json(self):
        return json.dumps(self.to_dict(), indent=2)
