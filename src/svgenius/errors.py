"""Exceptions raised by the conversion pipeline."""


class SvgeniusError(ValueError):
    """Base class for all conversion errors."""


class EmptyInputError(SvgeniusError):
    """Source text is empty or whitespace only."""


class SvgParseError(SvgeniusError):
    """Source text is not well-formed XML or has no svg element."""


class ComponentNameError(SvgeniusError):
    """No identifier can be derived from the given string."""


class EmptyBatchError(SvgeniusError):
    """A batch run was started with no sources."""


class DuplicateComponentError(SvgeniusError):
    """Two sources in one batch derive the same component name."""
