import logging
from typing import Dict, Iterable, Optional, Set, Union

from . import conf
from .exceptions import UnknownStateError
from .fsa_properties import is_deterministic
from .fsa_simulation import accepts, epsilon_closure, max_copies
from .states import State
from .transitions import TransitionTable

logger = logging.getLogger(__name__)

StateRef = Union[State, str]


class Automaton:
    """
    A nondeterministic finite automaton with epsilon transitions.

    The automaton is built incrementally (symbols, states, start/final states,
    transitions) and then queried. States are identified by name; every state
    referenced by a transition, the start state or the accepting set belongs to
    the automaton. Nothing can be removed once added.

    Construction methods report failure by returning False and leave the
    automaton unchanged in that case.
    """

    def __init__(self, epsilon: Optional[str] = None):
        """
        Args:
            epsilon: Epsilon marker for this automaton. Defaults to the
                NFA_SIMULATOR['EPSILON'] setting.

        Raises:
            ValueError: If epsilon is not a single character
        """
        if epsilon is None:
            epsilon = conf.get_epsilon()
        elif not conf.is_symbol(epsilon):
            raise ValueError(f"Epsilon marker must be a single character, got {epsilon!r}")
        self._epsilon = epsilon
        self._alphabet: Set[str] = set()
        self._states: Dict[str, State] = {}
        self._transitions: Dict[str, TransitionTable] = {}
        self._start: Optional[State] = None
        self._final_states: Set[State] = set()

    @property
    def epsilon(self) -> str:
        return self._epsilon

    # Construction

    def add_symbol(self, symbol: str) -> None:
        """
        Add symbol to the alphabet.

        Only single characters are symbols; anything else, and the epsilon
        marker, is ignored.
        """
        if not conf.is_symbol(symbol):
            logger.debug("Ignoring %r: symbols are single characters", symbol)
            return
        if symbol == self._epsilon:
            logger.debug("Ignoring epsilon marker %r as an alphabet symbol", symbol)
            return
        self._alphabet.add(symbol)

    def add_state(self, name: str) -> bool:
        """
        Add a new state.

        Returns:
            True if the state was added, False if a state with that name exists
        """
        if name in self._states:
            logger.debug("State '%s' already exists", name)
            return False

        self._states[name] = State(name)
        self._transitions[name] = TransitionTable()
        return True

    def set_start(self, name: str) -> bool:
        state = self._states.get(name)
        if state is None:
            logger.debug("Cannot set start: no state named '%s'", name)
            return False

        self._start = state
        return True

    def set_final(self, name: str) -> bool:
        state = self._states.get(name)
        if state is None:
            logger.debug("Cannot set final: no state named '%s'", name)
            return False

        self._final_states.add(state)
        return True

    def add_transition(self, from_state: str, to_states: Iterable[str], symbol: str) -> bool:
        """
        Add transitions from one state to a set of states on a symbol.

        Everything is validated before anything is stored, so a rejected call
        leaves the transition table untouched.

        Args:
            from_state: Name of the source state
            to_states: Names of the destination states
            symbol: An alphabet symbol or the epsilon marker

        Returns:
            True if the transitions were added, False otherwise
        """
        if from_state not in self._states:
            logger.debug("Transition rejected: unknown source state '%s'", from_state)
            return False

        if isinstance(to_states, str):
            logger.debug("Transition rejected: destinations must be a collection of names, got %r", to_states)
            return False

        to_states = list(to_states)
        for name in to_states:
            if name not in self._states:
                logger.debug("Transition rejected: unknown destination state '%s'", name)
                return False

        if symbol not in self._alphabet and symbol != self._epsilon:
            logger.debug("Transition rejected: symbol %r is not in the alphabet", symbol)
            return False

        destinations = {self._states[name] for name in to_states}
        self._transitions[from_state].add(symbol, destinations)
        return True

    # Lookup

    def is_start(self, name: str) -> bool:
        return self._start is not None and self._start.name == name

    def is_final(self, name: str) -> bool:
        return any(state.name == name for state in self._final_states)

    def get_sigma(self) -> Set[str]:
        return set(self._alphabet)

    def get_state(self, name: str) -> Optional[State]:
        return self._states.get(name)

    def get_states(self) -> Set[State]:
        return set(self._states.values())

    def get_start(self) -> Optional[State]:
        return self._start

    def get_final_states(self) -> Set[State]:
        return set(self._final_states)

    def resolve(self, state: StateRef) -> State:
        """
        Get the automaton's own state for a State or a state name.

        Raises:
            UnknownStateError: If no such state is in the automaton
        """
        name = state.name if isinstance(state, State) else state
        resolved = self._states.get(name)
        if resolved is None:
            raise UnknownStateError(name)
        return resolved

    def table_for(self, state: StateRef) -> TransitionTable:
        return self._transitions[self.resolve(state).name]

    def get_to_state(self, from_state: StateRef, symbol: str) -> Set[State]:
        """
        Get the destinations of from_state on symbol.

        Returns:
            The destination states, empty if there is no such transition
        """
        return set(self.table_for(from_state).get(symbol))

    def transitions_from(self, state: StateRef) -> Dict[str, Set[State]]:
        return self.table_for(state).as_dict()

    # Queries

    def epsilon_closure(self, state: StateRef) -> Set[State]:
        return epsilon_closure(self, state)

    def accepts(self, input_string: str) -> bool:
        return accepts(self, input_string)

    def max_copies(self, input_string: str) -> int:
        return max_copies(self, input_string)

    def is_deterministic(self) -> bool:
        return is_deterministic(self)

    def __repr__(self):
        return (f"Automaton(states={sorted(self._states)}, alphabet={sorted(self._alphabet)}, "
                f"start={self._start.name if self._start else None}, "
                f"final={sorted(state.name for state in self._final_states)})")
