"""Error raised for descriptor files that cannot be turned into models."""


class DescriptorError(ValueError):
    """A type descriptor file is malformed."""
