"""Errors raised by the colour helpers."""


class ColorError(ValueError):
    """Base class for malformed colour input."""


class InvalidColor(ColorError):
    """A colour string matched neither the rgb() nor the hex form."""

    def __init__(self, color: str):
        super().__init__(f'Invalid color: {color}')
        self.color = color


class InvalidOpacity(ColorError):
    """An opacity outside [0, 1]."""

    def __init__(self, opacity: float):
        super().__init__(f'The opacity should be between 0 and 1, but got: {opacity}')
        self.opacity = opacity
