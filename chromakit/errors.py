class InvalidFormatError(ValueError):
    """A color string (HEX) could not be parsed."""


class OutOfDomainWarning(UserWarning):
    """A channel outside its documented range was clamped or wrapped."""
