import logging
from typing import FrozenSet, Iterable, List, Tuple

from .alphabet import Alphabet, State, Symbol, check_start_and_accept
from .determinization import step, subset_construction
from .dfa import DFA
from .errors import ConstructionError
from .transition_table import NondeterministicTable, Transition

logger = logging.getLogger(__name__)


class NFA:
    """
    Non-deterministic finite automaton over states 0..state_count-1.

    A (state, symbol) pair may lead to any number of states, including none.
    There are no epsilon transitions: every transition consumes one symbol.
    Validation covers the start state, the accept states and every
    transition triple; totality is not required.
    """

    def __init__(self, state_count: int, alphabet: Iterable[Symbol], transitions: Iterable[Transition],
                 start: State, accept: Iterable[State]):
        alphabet = Alphabet(alphabet)
        accept = tuple(accept)

        try:
            check_start_and_accept(state_count, start, accept)
            table = NondeterministicTable.build(state_count, alphabet, transitions)
        except ConstructionError as error:
            logger.debug("Rejected NFA definition (%s): %s", error.kind, error)
            raise

        self._table = table
        self._start = start
        self._accept = frozenset(accept)

    @property
    def state_count(self) -> int:
        return self._table.state_count

    @property
    def alphabet(self) -> Alphabet:
        return self._table.alphabet

    @property
    def start(self) -> State:
        return self._start

    @property
    def accept(self) -> FrozenSet[State]:
        return self._accept

    @property
    def table(self) -> NondeterministicTable:
        return self._table

    @property
    def transitions(self) -> Tuple[Transition, ...]:
        return tuple(self._table.triples())

    def run(self, symbols: Iterable[Symbol]) -> bool:
        """
        Returns True if some run of the NFA on the input ends in an accept state.

        The set of active states is advanced one symbol at a time; once it is
        empty no continuation can be accepted.
        """
        active = frozenset((self._start,))
        for symbol in symbols:
            if symbol not in self.alphabet:
                return False
            active = step(self._table, active, symbol)
            if not active:
                return False
        return not active.isdisjoint(self._accept)

    def trace(self, symbols: Iterable[Symbol]) -> List[Tuple[State, ...]]:
        """
        Returns the active states, sorted, before and after each consumed symbol.

        The trace stops at the first symbol outside the alphabet or once no
        state is active.
        """
        active = frozenset((self._start,))
        subsets = [tuple(sorted(active))]
        for symbol in symbols:
            if symbol not in self.alphabet or not active:
                break
            active = step(self._table, active, symbol)
            subsets.append(tuple(sorted(active)))
        return subsets

    def determinize(self) -> DFA:
        return subset_construction(self)

    def __repr__(self) -> str:
        return (f"NFA(state_count={self.state_count}, alphabet={list(self.alphabet)!r}, "
                f"start={self._start}, accept={sorted(self._accept)})")

    def __str__(self) -> str:
        lines = [
            f"Alphabet: {self.alphabet}",
            f"Start State: {self._start}",
            f"Accept States: {', '.join(str(state) for state in sorted(self._accept))}",
            "Transitions:",
        ]
        for state in range(self.state_count):
            for symbol in self.alphabet:
                targets = self._table.next(state, symbol)
                if targets:
                    rendered = ', '.join(str(target) for target in sorted(targets))
                    lines.append(f"  ({state}, {symbol!r}) -> {{{rendered}}}")
        return '\n'.join(lines)
