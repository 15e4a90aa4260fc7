"""
Errors raised while building domain entities from an incoming payload.
"""


class InvalidGameStateError(ValueError):
    """The move payload does not describe a playable board."""
