from django.test import SimpleTestCase

from nfa_simulator.fsa_properties import is_deterministic, is_nondeterministic
from nfa_simulator.tests.utils import build_automaton


class TestFsaProperties(SimpleTestCase):
    """Test cases for the determinism check"""

    def test_deterministic_property(self):
        """Test is_deterministic on a complete DFA"""
        deterministic = build_automaton(['a', 'b'], ['S0', 'S1', 'S2'], start='S0', final=['S2'], transitions=[
            ('S0', {'S1'}, 'a'), ('S0', {'S0'}, 'b'),
            ('S1', {'S2'}, 'a'), ('S1', {'S0'}, 'b'),
            ('S2', {'S2'}, 'a'), ('S2', {'S2'}, 'b'),
        ])
        self.assertTrue(is_deterministic(deterministic))
        self.assertTrue(deterministic.is_deterministic())
        self.assertFalse(is_nondeterministic(deterministic))

    def test_multiple_destinations(self):
        """Two destinations on one symbol make the automaton non-deterministic"""
        nondeterministic = build_automaton(['a', 'b'], ['S0', 'S1', 'S2'], start='S0', transitions=[
            ('S0', {'S1', 'S2'}, 'a'),
            ('S1', {'S2'}, 'a'),
        ])
        self.assertFalse(is_deterministic(nondeterministic))
        self.assertTrue(is_nondeterministic(nondeterministic))

    def test_destinations_accumulated_over_calls(self):
        automaton = build_automaton(['a'], ['S0', 'S1'], transitions=[
            ('S0', {'S0'}, 'a'),
            ('S0', {'S1'}, 'a'),
        ])
        self.assertFalse(automaton.is_deterministic())

    def test_repeated_single_destination(self):
        automaton = build_automaton(['a'], ['S0', 'S1'], transitions=[
            ('S0', {'S1'}, 'a'),
            ('S0', {'S1'}, 'a'),
        ])
        self.assertTrue(automaton.is_deterministic())

    def test_epsilon_transition(self):
        """Any epsilon transition makes the automaton non-deterministic"""
        epsilon_nfa = build_automaton(['a'], ['S0', 'S1'], start='S0', final=['S1'], transitions=[
            ('S0', {'S1'}, 'e'),
            ('S0', {'S0'}, 'a'),
            ('S1', {'S1'}, 'a'),
        ])
        self.assertFalse(is_deterministic(epsilon_nfa))

    def test_epsilon_self_loop(self):
        automaton = build_automaton([], ['S0'], transitions=[('S0', {'S0'}, 'e')])
        self.assertFalse(automaton.is_deterministic())

    def test_empty_epsilon_transition(self):
        """Adding an empty epsilon destination set keeps the automaton deterministic"""
        automaton = build_automaton(['a'], ['S0', 'S1'], start='S0', final=['S1'], transitions=[
            ('S0', set(), 'e'),
            ('S0', {'S1'}, 'a'),
            ('S1', {'S0'}, 'a'),
        ])
        self.assertTrue(is_deterministic(automaton))

    def test_deterministic_property_edge_cases(self):
        """Test edge cases for is_deterministic"""
        # No states at all
        self.assertTrue(is_deterministic(build_automaton(['a'], [])))

        # Empty alphabet
        self.assertTrue(is_deterministic(build_automaton([], ['S0'], start='S0', final=['S0'])))

        # Incomplete transitions are still deterministic
        partial = build_automaton(['a', 'b'], ['S0', 'S1'], start='S0', transitions=[
            ('S0', {'S1'}, 'a'),
        ])
        self.assertTrue(is_deterministic(partial))

    def test_check_is_read_only(self):
        automaton = build_automaton(['a'], ['S0', 'S1'], start='S0', final=['S1'], transitions=[
            ('S0', {'S0', 'S1'}, 'a'),
        ])
        before = automaton.transitions_from('S0')
        self.assertFalse(automaton.is_deterministic())
        self.assertEqual(automaton.transitions_from('S0'), before)
        self.assertTrue(automaton.accepts('a'))
