class TokenizeError(ValueError):
    """Raised when a color-stop token cannot be split into a color and a position."""


class GradientStopWarning(UserWarning):
    """Issued when a color-stop token is dropped from a gradient declaration."""
