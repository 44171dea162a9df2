"""Exceptions raised while assembling noise graphs."""


class NoiseConfigError(ValueError):
    """A module or builder was configured with parameters it cannot honour.

    Raised at construction time; evaluation itself never raises for finite
    coordinates.
    """
