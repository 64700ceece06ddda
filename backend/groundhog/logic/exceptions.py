"""Typed domain exceptions.

Player actions never raise: misapplied actions are ignored by the engine.
These exceptions cover configuration faults detected before a game runs.
"""


class GroundhogError(Exception):
    """Base exception for the Groundhog game engine."""


class UnsupportedSettingsError(GroundhogError):
    """Game settings contain values the engine cannot run with."""
