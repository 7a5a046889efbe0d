from django.test import TestCase
from fsa_engine import DFA, NFA
from fsa_engine.determinization import discover_subsets, step, subset_construction

from automata_samples import aba_nfa, all_strings


def third_from_last_is_a_nfa():
    # Classic blow-up example: the DFA needs 8 states
    return NFA(4, ['a', 'b'], [
        (0, 'a', 0), (0, 'b', 0), (0, 'a', 1),
        (1, 'a', 2), (1, 'b', 2),
        (2, 'a', 3), (2, 'b', 3),
    ], 0, [3])


class TestStep(TestCase):
    """Test cases for a single subset step"""

    def test_union_of_targets(self):
        nfa = third_from_last_is_a_nfa()
        self.assertEqual(step(nfa.table, frozenset({0, 1}), 'a'), frozenset({0, 1, 2}))
        self.assertEqual(step(nfa.table, frozenset({0, 1}), 'b'), frozenset({0, 2}))

    def test_empty_subset_stays_empty(self):
        nfa = aba_nfa()
        self.assertEqual(step(nfa.table, frozenset(), 'a'), frozenset())


class TestSubsetConstruction(TestCase):
    """Test cases for NFA to DFA conversion"""

    def test_aba_agrees_up_to_length_six(self):
        nfa = aba_nfa()
        dfa = nfa.determinize()
        self.assertIsInstance(dfa, DFA)
        for string in all_strings('ab', 6):
            self.assertEqual(dfa.run(string), nfa.run(string),
                             f"Disagreement on string '{string}'")

    def test_aba_subsets_in_discovery_order(self):
        subsets, transitions = discover_subsets(aba_nfa().table, 0)
        self.assertEqual(subsets, [
            frozenset({0}),
            frozenset({1}),
            frozenset(),
            frozenset({2}),
            frozenset({3}),
        ])
        self.assertEqual(transitions[:4], [(0, 'a', 1), (0, 'b', 2), (1, 'a', 3), (1, 'b', 1)])

    def test_dead_state_is_a_sink(self):
        dfa = aba_nfa().determinize()
        # Subset {} is discovered third
        self.assertIn((2, 'a', 2), dfa.transitions)
        self.assertIn((2, 'b', 2), dfa.transitions)
        self.assertNotIn(2, dfa.accept)

    def test_accept_states(self):
        dfa = aba_nfa().determinize()
        self.assertEqual(dfa.start, 0)
        self.assertEqual(dfa.accept, frozenset({4}))
        self.assertEqual(dfa.state_count, 5)

    def test_only_reachable_subsets(self):
        dfa = third_from_last_is_a_nfa().determinize()
        self.assertEqual(dfa.state_count, 8)

    def test_third_from_last(self):
        nfa = third_from_last_is_a_nfa()
        dfa = subset_construction(nfa)
        for string in all_strings('ab', 7):
            self.assertEqual(dfa.run(string), nfa.run(string),
                             f"Disagreement on string '{string}'")
            self.assertEqual(dfa.run(string), len(string) >= 3 and string[-3] == 'a')

    def test_reproducible(self):
        first = third_from_last_is_a_nfa().determinize()
        second = third_from_last_is_a_nfa().determinize()
        self.assertEqual(first.transitions, second.transitions)
        self.assertEqual(first.accept, second.accept)

    def test_deterministic_input_keeps_its_language(self):
        nfa = NFA(2, ['a', 'b'], [(0, 'a', 1), (0, 'b', 1), (1, 'a', 0), (1, 'b', 0)], 0, [0])
        dfa = nfa.determinize()
        self.assertEqual(dfa.state_count, 2)
        for string in all_strings('ab', 5):
            self.assertEqual(dfa.run(string), len(string) % 2 == 0)

    def test_no_transitions(self):
        nfa = NFA(2, ['a'], [], 0, [0])
        dfa = nfa.determinize()
        self.assertEqual(dfa.state_count, 2)
        self.assertTrue(dfa.run(''))
        self.assertFalse(dfa.run('a'))
        self.assertFalse(dfa.run('aaaa'))

    def test_empty_alphabet(self):
        dfa = NFA(1, [], [], 0, []).determinize()
        self.assertEqual(dfa.state_count, 1)
        self.assertFalse(dfa.run(''))

    def test_determinized_dfa_supports_transformations(self):
        nfa = aba_nfa()
        complement = nfa.determinize().complement()
        for string in all_strings('ab', 5):
            self.assertEqual(complement.run(string), not nfa.run(string))

    def test_non_zero_start(self):
        # a b* a b* a, numbered backwards so that 3 is the start state
        nfa = NFA(4, ['a', 'b'], [
            (3, 'a', 2), (2, 'a', 1), (2, 'b', 2), (1, 'a', 0), (1, 'b', 1),
        ], 3, [0])
        self.assertTrue(nfa.run('aaa'))
        self.assertFalse(nfa.run('baba'))

        subsets, _ = discover_subsets(nfa.table, nfa.start)
        self.assertEqual(subsets[0], frozenset({3}))

        dfa = nfa.determinize()
        self.assertEqual(dfa.start, 0)
        self.assertEqual(dfa.state_count, 5)
        for string in all_strings('ab', 6):
            self.assertEqual(dfa.run(string), nfa.run(string),
                             f"Disagreement on string '{string}'")
            self.assertEqual(dfa.run(string), aba_nfa().run(string))
