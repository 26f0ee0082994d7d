"""Exceptions raised when a profile or selection breaks the engine's contract.

None of these are transient: they mean a caller handed the engine a
selection it should have validated first, so they propagate and abort the
current computation.
"""


class InvalidSelection(IndexError):
    """A weapon option index is out of bounds, or no option is selected."""


class InvalidUnitSize(ValueError):
    """The selected unit size isn't a positive multiple of the minimum
    size, or lies outside [min_size, max_size]."""


class MissingParameter(ValueError):
    """A replace-one-in-N weapon slot has no N."""


class UnhandledVariant(RuntimeError):
    """A slot kind or damage type the resolution logic doesn't know."""
