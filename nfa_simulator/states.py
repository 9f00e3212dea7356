class State:
    """A named automaton state. Two states with the same name are the same state."""

    __slots__ = ('_name',)

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __hash__(self):
        return hash(self._name)

    def __eq__(self, other):
        return isinstance(other, State) and self._name == other._name

    def __lt__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self._name < other._name

    def __repr__(self):
        return f"State({self._name!r})"

    def __str__(self):
        return self._name
