"""Errors raised by the terminal game."""


class FatalInputError(RuntimeError):
    """The terminal or its input source failed and the session cannot continue."""
