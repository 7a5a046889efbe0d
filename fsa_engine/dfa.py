import logging
import operator
from typing import Callable, FrozenSet, Iterable, List, Tuple

from .alphabet import Alphabet, State, Symbol, check_start_and_accept
from .errors import AlphabetMismatchError, ConstructionError
from .transition_table import DeterministicTable, Transition

logger = logging.getLogger(__name__)


class DFA:
    """
    Deterministic finite automaton over states 0..state_count-1.

    The constructor validates everything up front: the start state, the accept
    states, every transition triple, and that the transition function is
    total. A DFA is never mutated afterwards; complement, union and
    intersection all return new instances.

    Args:
        state_count: Number of states
        alphabet: The symbols of the alphabet (duplicates are ignored)
        transitions: Sequence of (source, symbol, target) triples
        start: The start state
        accept: The accept states (duplicates and order are ignored)

    Raises:
        ConstructionError: The first violated rule, as one of its subclasses
    """

    def __init__(self, state_count: int, alphabet: Iterable[Symbol], transitions: Iterable[Transition],
                 start: State, accept: Iterable[State]):
        alphabet = Alphabet(alphabet)
        accept = tuple(accept)

        try:
            check_start_and_accept(state_count, start, accept)
            table = DeterministicTable.build(state_count, alphabet, transitions)
        except ConstructionError as error:
            logger.debug("Rejected DFA definition (%s): %s", error.kind, error)
            raise

        self._table = table
        self._start = start
        self._accept = frozenset(accept)

    @classmethod
    def _from_table(cls, table: DeterministicTable, start: State, accept: FrozenSet[State]) -> 'DFA':
        """Wraps an already validated table without checking it again."""
        dfa = cls.__new__(cls)
        dfa._table = table
        dfa._start = start
        dfa._accept = accept
        return dfa

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
    def transitions(self) -> Tuple[Transition, ...]:
        return tuple(self._table.triples())

    def run(self, symbols: Iterable[Symbol]) -> bool:
        """
        Returns True if the DFA accepts the input.

        Symbols outside the alphabet reject the input rather than raise.
        """
        state = self._start
        for symbol in symbols:
            if symbol not in self.alphabet:
                return False
            state = self._table.next(state, symbol)
        return state in self._accept

    def trace(self, symbols: Iterable[Symbol]) -> List[Transition]:
        """
        Returns the (state, symbol, next_state) steps taken on the input.

        The trace stops before the first symbol outside the alphabet.
        """
        path = []
        state = self._start
        for symbol in symbols:
            if symbol not in self.alphabet:
                break
            next_state = self._table.next(state, symbol)
            path.append((state, symbol, next_state))
            state = next_state
        return path

    def complement(self) -> 'DFA':
        """Same machine with accepting and non-accepting states swapped."""
        accept = frozenset(range(self.state_count)) - self._accept
        return DFA._from_table(self._table, self._start, accept)

    def union(self, other: 'DFA') -> 'DFA':
        """Product automaton accepting what either operand accepts."""
        return self._product(other, operator.or_)

    def intersection(self, other: 'DFA') -> 'DFA':
        """Product automaton accepting what both operands accept."""
        return self._product(other, operator.and_)

    def _product(self, other: 'DFA', accepts: Callable[[bool, bool], bool]) -> 'DFA':
        # Pair (i, j) is flattened to i * other.state_count + j
        if self.alphabet != other.alphabet:
            raise AlphabetMismatchError(
                f"Alphabets differ: {{{self.alphabet}}} and {{{other.alphabet}}}"
            )

        width = other.state_count
        transitions = []
        accept = []

        for i in range(self.state_count):
            for j in range(width):
                index = i * width + j
                if accepts(i in self._accept, j in other._accept):
                    accept.append(index)
                for symbol in self.alphabet:
                    target = self._table.next(i, symbol) * width + other._table.next(j, symbol)
                    transitions.append((index, symbol, target))

        logger.debug("Product construction built %d states from %d x %d",
                     self.state_count * width, self.state_count, width)

        return DFA(self.state_count * width, self.alphabet, transitions,
                   self._start * width + other._start, accept)

    def __repr__(self) -> str:
        return (f"DFA(state_count={self.state_count}, alphabet={list(self.alphabet)!r}, "
                f"start={self._start}, accept={sorted(self._accept)})")

    def __str__(self) -> str:
        lines = [
            f"Alphabet: {self.alphabet}",
            f"Start State: {self._start}",
            f"Accept States: {', '.join(str(state) for state in sorted(self._accept))}",
            "Transitions:",
        ]
        for source, symbol, target in self._table.triples():
            lines.append(f"  ({source}, {symbol!r}) -> {target}")
        return '\n'.join(lines)
