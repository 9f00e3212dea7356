"""
Nondeterministic finite automata with epsilon transitions.

Example usage:
    >>> from nfa_simulator import Automaton
    >>> nfa = Automaton()
    >>> nfa.add_symbol('0')
    >>> nfa.add_state('p')
    True
    >>> nfa.set_start('p')
    True
    >>> nfa.set_final('p')
    True
    >>> nfa.accepts('')
    True
"""

from .automaton import Automaton
from .exceptions import AutomatonError, StartStateNotSetError, UnknownStateError
from .fsa_properties import is_deterministic, is_nondeterministic
from .fsa_simulation import accepts, epsilon_closure, epsilon_closure_of_states, max_copies
from .states import State
from .transitions import TransitionTable

__version__ = '0.1.0'

__all__ = [
    'Automaton',
    'State',
    'TransitionTable',
    'accepts',
    'epsilon_closure',
    'epsilon_closure_of_states',
    'max_copies',
    'is_deterministic',
    'is_nondeterministic',
    'AutomatonError',
    'StartStateNotSetError',
    'UnknownStateError',
]
