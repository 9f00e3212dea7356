import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, Optional, Set, Union

from . import conf
from .exceptions import StartStateNotSetError
from .states import State

if TYPE_CHECKING:
    from .automaton import Automaton

logger = logging.getLogger(__name__)


def epsilon_closure(automaton: 'Automaton', state: Union[State, str]) -> Set[State]:
    """
    Compute the epsilon closure of a state.

    Args:
        automaton: The automaton
        state: The state (or state name) to compute the closure for

    Returns:
        Set of states reachable from state via zero or more epsilon transitions,
        always including state itself

    Raises:
        UnknownStateError: If state is not in the automaton
    """
    return epsilon_closure_of_states(automaton, [state])


def epsilon_closure_of_states(automaton: 'Automaton', states: Iterable[Union[State, str]]) -> Set[State]:
    """
    Compute the epsilon closure of a set of states.

    Args:
        automaton: The automaton
        states: States (or state names) to compute the closure for

    Returns:
        Union of the epsilon closures of the given states
    """
    closure = {automaton.resolve(state) for state in states}
    stack = list(closure)

    # Depth-first; the visited set stops epsilon cycles
    while stack:
        current = stack.pop()
        for next_state in automaton.table_for(current).get(automaton.epsilon):
            if next_state not in closure:
                closure.add(next_state)
                stack.append(next_state)

    return closure


def accepts(automaton: 'Automaton', input_string: str) -> bool:
    """
    Decide whether the automaton accepts input_string.

    All nondeterministic branches are simulated in lockstep: the frontier is
    the set of states currently occupied, starting from the epsilon closure of
    the start state.

    Args:
        automaton: The automaton
        input_string: The input string

    Returns:
        True if some state of the final frontier is accepting, False otherwise.
        Without a start state the input is rejected (or StartStateNotSetError
        is raised under STRICT_START).
    """
    frontier = _initial_frontier(automaton)
    if frontier is None:
        return False

    for symbol in input_string:
        frontier = _step(automaton, frontier, symbol)
        if not frontier:
            # Every branch has died
            return False

    return not frontier.isdisjoint(automaton.get_final_states())


def max_copies(automaton: 'Automaton', input_string: str) -> int:
    """
    Count the maximum number of simultaneous copies of the automaton.

    Each state carries the number of distinct paths into it. When paths from
    different copies converge on the same state in one step their counts are
    summed. The result is the largest total count seen over the whole run,
    including the initial one.

    Args:
        automaton: The automaton
        input_string: The input string

    Returns:
        The maximum total copy count. Without a start state this is 0 (or
        StartStateNotSetError is raised under STRICT_START).
    """
    frontier = _initial_frontier(automaton)
    if frontier is None:
        return 0

    copies: Dict[State, int] = {state: 1 for state in frontier}
    max_total = len(copies)

    for symbol in input_string:
        next_copies: Dict[State, int] = defaultdict(int)

        for state, count in copies.items():
            for destination in _symbol_targets(automaton, state, symbol):
                for reached in epsilon_closure(automaton, destination):
                    next_copies[reached] += count

        if not next_copies:
            # Rejected; later steps would all count zero
            break

        copies = next_copies
        max_total = max(max_total, sum(copies.values()))

    return max_total


def _initial_frontier(automaton: 'Automaton') -> Optional[Set[State]]:
    """
    Epsilon closure of the start state, or None if there is no start state.
    """
    start = automaton.get_start()
    if start is None:
        if conf.strict_start():
            raise StartStateNotSetError('The automaton has no start state')
        logger.debug("No start state set; rejecting input")
        return None

    return epsilon_closure(automaton, start)


def _step(automaton: 'Automaton', frontier: Set[State], symbol: str) -> Set[State]:
    """
    Consume one symbol from every state of the frontier.

    States without a transition on symbol are dropped.
    """
    destinations = set()
    for state in frontier:
        destinations.update(_symbol_targets(automaton, state, symbol))

    return epsilon_closure_of_states(automaton, destinations)


def _symbol_targets(automaton: 'Automaton', state: State, symbol: str) -> FrozenSet[State]:
    # The epsilon marker is never an input symbol
    if symbol == automaton.epsilon:
        return frozenset()
    return automaton.table_for(state).get(symbol)
