from nfa_simulator.automaton import Automaton


def build_automaton(alphabet, states, start=None, final=(), transitions=()):
    """Build an automaton, asserting every construction call succeeds"""
    automaton = Automaton()
    for symbol in alphabet:
        automaton.add_symbol(symbol)
    for name in states:
        assert automaton.add_state(name)
    if start is not None:
        assert automaton.set_start(start)
    for name in final:
        assert automaton.set_final(name)
    for from_state, to_states, symbol in transitions:
        assert automaton.add_transition(from_state, to_states, symbol)
    return automaton
