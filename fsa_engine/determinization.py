import logging
from collections import deque
from typing import Deque, Dict, FrozenSet, List, Tuple

from .alphabet import State, Symbol
from .dfa import DFA
from .transition_table import NondeterministicTable, Transition

logger = logging.getLogger(__name__)

Subset = FrozenSet[State]


def step(table: NondeterministicTable, subset: Subset, symbol: Symbol) -> Subset:
    """Compute all states reachable from the given subset on the given symbol"""
    targets = set()
    for state in sorted(subset):
        targets.update(table.next(state, symbol))
    return frozenset(targets)


def discover_subsets(table: NondeterministicTable, start: State) -> Tuple[List[Subset], List[Transition]]:
    """
    Breadth-first exploration of the subsets reachable from {start}.

    Subsets are numbered in discovery order, so {start} is 0 and the numbering
    only depends on the table and the alphabet order. The empty subset is
    numbered like any other once reached; every symbol keeps it empty, which
    makes it the dead sink of the resulting DFA.

    Args:
        table: The NFA transition relation
        start: The NFA start state

    Returns:
        Tuple: The subsets in index order, and the (index, symbol, index)
        transitions between them
    """
    start_subset = frozenset((start,))
    index: Dict[Subset, int] = {start_subset: 0}
    subsets: List[Subset] = [start_subset]
    queue: Deque[Subset] = deque([start_subset])
    transitions: List[Transition] = []

    while queue:
        current = queue.popleft()
        current_index = index[current]

        for symbol in table.alphabet:
            target = step(table, current, symbol)

            if target not in index:
                index[target] = len(subsets)
                subsets.append(target)
                queue.append(target)

            transitions.append((current_index, symbol, index[target]))

    return subsets, transitions


def subset_construction(nfa) -> DFA:
    """
    Converts an NFA to an equivalent DFA whose states are the reachable
    subsets of NFA states.

    A subset is accepting when it contains at least one NFA accept state.
    """
    subsets, transitions = discover_subsets(nfa.table, nfa.start)
    accept = [i for i, subset in enumerate(subsets) if not subset.isdisjoint(nfa.accept)]

    logger.debug("Subset construction: %d NFA states -> %d DFA states",
                 nfa.state_count, len(subsets))

    return DFA(len(subsets), nfa.alphabet, transitions, 0, accept)
