class FfmException(Exception):
    """Base class for all fantasy football manager errors."""


class InvalidProposalError(FfmException):
    """Raised when a trade proposal cannot be analyzed (an empty side)."""


class InsufficientDataError(FfmException):
    """Raised when a lineup leaves required slots unfilled."""

    def __init__(self, unfilled_slots: tuple[str, ...]) -> None:
        self.unfilled_slots = unfilled_slots
        super().__init__(f"No eligible players for slot(s): {', '.join(unfilled_slots)}")


class ConfigError(FfmException):
    """Raised when a configuration value cannot be interpreted."""
