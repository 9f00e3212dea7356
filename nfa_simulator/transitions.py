from typing import Dict, FrozenSet, Iterable, Set

from .states import State


class TransitionTable:
    """
    Outgoing transitions of a single state.

    Maps a symbol (an alphabet member or the epsilon marker) to the set of
    destination states. A symbol with no destinations has no entry at all.
    """

    def __init__(self):
        self._entries: Dict[str, Set[State]] = {}

    def add(self, symbol: str, states: Iterable[State]) -> None:
        """
        Union the given destinations into the entry for symbol.

        Args:
            symbol: Input symbol or epsilon marker
            states: Destination states to add
        """
        destinations = set(states)
        if not destinations:
            return

        # Existing destinations are kept, never replaced
        self._entries.setdefault(symbol, set()).update(destinations)

    def get(self, symbol: str) -> FrozenSet[State]:
        """
        Get the destinations on symbol.

        Returns:
            The destination states, or an empty set if there is no transition
        """
        return frozenset(self._entries.get(symbol, ()))

    def as_dict(self) -> Dict[str, Set[State]]:
        return {symbol: set(states) for symbol, states in self._entries.items()}

    def __contains__(self, symbol):
        return symbol in self._entries

    def __len__(self):
        return len(self._entries)
