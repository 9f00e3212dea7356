"""Exceptions raised by automaton queries.

Construction operations never raise; they report failure by returning False.
"""


class AutomatonError(Exception):
    """Base exception for all simulator errors."""

    pass


class UnknownStateError(AutomatonError, ValueError):
    """Raised when a query names a state that is not in the automaton."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"State '{name}' is not in the automaton")


class StartStateNotSetError(AutomatonError):
    """Raised by accepts/max_copies under STRICT_START when no start state is set."""

    pass
