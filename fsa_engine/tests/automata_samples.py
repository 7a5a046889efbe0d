from itertools import product

from fsa_engine import DFA, NFA


def all_strings(alphabet, max_length):
    """Every string over the alphabet up to max_length, shortest first"""
    for length in range(max_length + 1):
        for symbols in product(alphabet, repeat=length):
            yield ''.join(symbols)


def even_length_dfa():
    return DFA(2, ['a', 'b'], [(0, 'a', 1), (0, 'b', 1), (1, 'a', 0), (1, 'b', 0)], 0, [0])


def ends_with_b_dfa():
    return DFA(2, ['a', 'b'], [(0, 'a', 0), (0, 'b', 1), (1, 'a', 0), (1, 'b', 1)], 0, [1])


def contains_aa_dfa():
    return DFA(3, ['a', 'b'], [
        (0, 'a', 1), (0, 'b', 0),
        (1, 'a', 2), (1, 'b', 0),
        (2, 'a', 2), (2, 'b', 2),
    ], 0, [2])


def aba_nfa():
    # Accepts a b* a b* a
    return NFA(4, ['a', 'b'], [
        (0, 'a', 1), (1, 'a', 2), (1, 'b', 1), (2, 'a', 3), (2, 'b', 2),
    ], 0, [3])
