"""Error types raised by the folding strategy optimizer."""


class FoldingStrategyError(ValueError):
    """Base class for all optimizer errors."""


class InvalidParameterError(FoldingStrategyError):
    """A configuration field violates its constraint."""

    def __init__(self, field, value, reason):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__("invalid {}={!r}: {}".format(field, value, reason))


class NoFeasibleStrategyError(InvalidParameterError):
    """No sequence of allowed arities reaches the terminal threshold exactly."""


class ArithmeticOverflowError(FoldingStrategyError, OverflowError):
    """A domain size or accumulated cost left the representable range."""
