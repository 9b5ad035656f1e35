class UsageError(Exception):
    """Wrong number of command-line arguments."""


class InvalidInputWarning(UserWarning):
    """Non-positive total, or fewer points than workers. The run still proceeds."""
