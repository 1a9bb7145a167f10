"""
Engine Errors
"""


class PreconditionViolation(ValueError):
    """
    Raised when an engine primitive is called outside its contract,
    e.g. evaluating a guess of the wrong length or feeding PENDING into
    the keyboard aggregator.

    The game controller guards against these; one reaching the controller
    is an internal invariant breach.
    """
