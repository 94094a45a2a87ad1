"""Exceptions raised by the race engine."""


class RaceError(Exception):
    """Base class for race engine errors."""


class PreconditionError(RaceError):
    """An operation was attempted while its guard condition was not met."""


class InvalidStateError(PreconditionError):
    """An action was submitted while no race is active."""
