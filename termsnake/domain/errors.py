"""
Errors raised by the simulation core.
"""


class InvariantViolation(RuntimeError):
    """
    Raised when board state breaks an invariant (empty body, food on the
    snake, overlapping segments). Always a programming error; never caught
    inside the package.
    """
