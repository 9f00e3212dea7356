from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .automaton import Automaton


def is_deterministic(automaton: 'Automaton') -> bool:
    """
    Checks if the automaton is deterministic.

    An automaton is deterministic if:
    1. No state has a non-empty set of epsilon transitions
    2. For each state and each alphabet symbol, there is at most one next state

    Missing transitions are allowed; completeness is not required.

    Args:
        automaton: The automaton to check

    Returns:
        bool: True if the automaton is deterministic, False otherwise
    """
    states = automaton.get_states()

    # Check for epsilon transitions
    for state in states:
        if automaton.table_for(state).get(automaton.epsilon):
            return False

    # For each state and each symbol, check there is at most one transition
    for state in states:
        table = automaton.table_for(state)
        for symbol in automaton.get_sigma():
            if len(table.get(symbol)) > 1:
                return False

    return True


def is_nondeterministic(automaton: 'Automaton') -> bool:
    """
    Checks if the automaton is non-deterministic, i.e. it has epsilon
    transitions or several next states for some state and symbol.
    """
    return not is_deterministic(automaton)
