from django.test import TestCase
from fsa_engine import (
    NFA,
    InvalidAcceptStateError,
    InvalidStartError,
    InvalidTransitionStateError,
    UnknownSymbolError,
)

from automata_samples import aba_nfa


def ends_with_ab_nfa():
    return NFA(3, ['a', 'b'], [
        (0, 'a', 0), (0, 'a', 1), (0, 'b', 0), (1, 'b', 2),
    ], 0, [2])


class TestNFAConstruction(TestCase):
    """Test cases for NFA validation"""

    def test_invalid_start(self):
        with self.assertRaises(InvalidStartError):
            NFA(2, ['a'], [], 2, [])

    def test_invalid_accept_state(self):
        with self.assertRaises(InvalidAcceptStateError):
            NFA(2, ['a'], [], 0, [-1])

    def test_invalid_transition_state(self):
        with self.assertRaises(InvalidTransitionStateError):
            NFA(2, ['a'], [(0, 'a', 1), (1, 'a', 2)], 0, [1])

    def test_unknown_symbol(self):
        with self.assertRaises(UnknownSymbolError):
            NFA(2, ['a'], [(0, 'b', 1)], 0, [1])

    def test_totality_not_required(self):
        nfa = NFA(3, ['a', 'b'], [(0, 'a', 1)], 0, [1])
        self.assertEqual(nfa.transitions, ((0, 'a', 1),))

    def test_duplicate_transitions_collapse(self):
        nfa = NFA(2, ['a'], [(0, 'a', 1), (0, 'a', 1)], 0, [1])
        self.assertEqual(nfa.transitions, ((0, 'a', 1),))


class TestNFARun(TestCase):
    """Test cases for NFA simulation"""

    def test_aba(self):
        nfa = aba_nfa()
        self.assertTrue(nfa.run('aaa'))
        self.assertTrue(nfa.run('abbbaba'))
        self.assertFalse(nfa.run('baba'))
        self.assertFalse(nfa.run(''))
        self.assertFalse(nfa.run('aa'))
        self.assertFalse(nfa.run('aaaa'))

    def test_ends_with_ab(self):
        nfa = ends_with_ab_nfa()
        for string in ['ab', 'aab', 'bab', 'abab']:
            self.assertTrue(nfa.run(string), f"Should accept '{string}'")
        for string in ['', 'a', 'b', 'ba', 'abb', 'aba']:
            self.assertFalse(nfa.run(string), f"Should reject '{string}'")

    def test_empty_input_accepts_when_start_accepts(self):
        nfa = NFA(1, ['a'], [], 0, [0])
        self.assertTrue(nfa.run(''))
        self.assertFalse(nfa.run('a'))

    def test_symbol_outside_alphabet_rejects(self):
        self.assertFalse(aba_nfa().run('aca'))

    def test_trace(self):
        nfa = ends_with_ab_nfa()
        self.assertEqual(nfa.trace('aab'), [(0,), (0, 1), (0, 1), (0, 2)])

    def test_trace_stops_when_no_state_is_active(self):
        nfa = aba_nfa()
        self.assertEqual(nfa.trace('bab'), [(0,), ()])


class TestNFADisplay(TestCase):
    """Test cases for the string representations"""

    def test_str(self):
        text = str(ends_with_ab_nfa())
        self.assertIn('Accept States: 2', text)
        self.assertIn("(0, 'a') -> {0, 1}", text)
        self.assertNotIn("(2, 'a')", text)

    def test_repr(self):
        self.assertEqual(
            repr(aba_nfa()),
            "NFA(state_count=4, alphabet=['a', 'b'], start=0, accept=[3])"
        )
