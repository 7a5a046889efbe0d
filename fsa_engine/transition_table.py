from collections import defaultdict
from typing import Dict, FrozenSet, Iterable, Iterator, Set, Tuple

from .alphabet import Alphabet, State, Symbol, is_state
from .errors import (
    ConflictingTransitionError,
    IncompleteTransitionError,
    InvalidTransitionStateError,
    TransitionLookupError,
    UnknownSymbolError,
)

Transition = Tuple[State, Symbol, State]

EMPTY: FrozenSet[State] = frozenset()


def _validate_transition(state_count: int, alphabet: Alphabet, transition) -> Transition:
    """
    Checks a single (source, symbol, target) triple against the declared
    state range and alphabet.

    Args:
        state_count: Number of states; valid indices are 0..state_count-1
        alphabet: The declared alphabet
        transition: The triple to check

    Returns:
        Transition: The triple, unpacked into a tuple

    Raises:
        InvalidTransitionStateError: If the source or the target is out of range
        UnknownSymbolError: If the symbol is not in the alphabet
    """
    source, symbol, target = transition

    for state in (source, target):
        if not is_state(state, state_count):
            raise InvalidTransitionStateError(
                f"In transition: ({source!r}, {symbol!r}) -> {target!r}: "
                f"State {state!r} does not exist"
            )

    if symbol not in alphabet:
        raise UnknownSymbolError(
            f"In transition: ({source!r}, {symbol!r}) -> {target!r}: "
            f"Symbol {symbol!r} is not in the alphabet"
        )

    return source, symbol, target


class _TransitionTable:
    """Lookup structure keyed by (state, symbol), shared by both table kinds."""

    def __init__(self, state_count: int, alphabet: Alphabet):
        self._state_count = state_count
        self._alphabet = alphabet

    @property
    def state_count(self) -> int:
        return self._state_count

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def _check_key(self, state: State, symbol: Symbol) -> None:
        if not is_state(state, self._state_count) or symbol not in self._alphabet:
            raise TransitionLookupError(
                f"No transition slot for ({state!r}, {symbol!r}) in a table with "
                f"{self._state_count} states over {{{self._alphabet}}}"
            )


class DeterministicTable(_TransitionTable):
    """Total, single-valued transition function of a DFA."""

    def __init__(self, state_count: int, alphabet: Alphabet, delta: Dict[Tuple[State, Symbol], State]):
        super().__init__(state_count, alphabet)
        self._delta = delta

    @classmethod
    def build(cls, state_count: int, alphabet: Alphabet, transitions: Iterable[Transition]) -> 'DeterministicTable':
        """
        Groups the triples by (source, symbol) and checks the result is a total
        function over states x alphabet.

        Re-declaring a pair with the same target is harmless; a different
        target is a conflict.

        Raises:
            InvalidTransitionStateError, UnknownSymbolError: For a bad triple
            ConflictingTransitionError: If a pair is given two different targets
            IncompleteTransitionError: If some (state, symbol) pair has no target
        """
        delta: Dict[Tuple[State, Symbol], State] = {}

        for transition in transitions:
            source, symbol, target = _validate_transition(state_count, alphabet, transition)
            previous = delta.setdefault((source, symbol), target)
            if previous != target:
                raise ConflictingTransitionError(
                    f"Conflicting transition: ({source!r}, {symbol!r}) -> {target!r}, "
                    f"already declared -> {previous!r}"
                )

        for state in range(state_count):
            for symbol in alphabet:
                if (state, symbol) not in delta:
                    raise IncompleteTransitionError(
                        f"Missing transition: state {state} has no target for symbol {symbol!r}"
                    )

        return cls(state_count, alphabet, delta)

    def next(self, state: State, symbol: Symbol) -> State:
        try:
            return self._delta[(state, symbol)]
        except (KeyError, TypeError):
            self._check_key(state, symbol)
            raise

    def triples(self) -> Iterator[Transition]:
        for state in range(self._state_count):
            for symbol in self._alphabet:
                yield state, symbol, self._delta[(state, symbol)]


class NondeterministicTable(_TransitionTable):
    """Set-valued transition relation of an NFA. Undeclared pairs map to the empty set."""

    def __init__(self, state_count: int, alphabet: Alphabet, delta: Dict[Tuple[State, Symbol], FrozenSet[State]]):
        super().__init__(state_count, alphabet)
        self._delta = delta

    @classmethod
    def build(cls, state_count: int, alphabet: Alphabet, transitions: Iterable[Transition]) -> 'NondeterministicTable':
        grouped: Dict[Tuple[State, Symbol], Set[State]] = defaultdict(set)

        for transition in transitions:
            source, symbol, target = _validate_transition(state_count, alphabet, transition)
            grouped[(source, symbol)].add(target)

        return cls(state_count, alphabet, {key: frozenset(targets) for key, targets in grouped.items()})

    def next(self, state: State, symbol: Symbol) -> FrozenSet[State]:
        self._check_key(state, symbol)
        return self._delta.get((state, symbol), EMPTY)

    def triples(self) -> Iterator[Transition]:
        for state in range(self._state_count):
            for symbol in self._alphabet:
                for target in sorted(self._delta.get((state, symbol), EMPTY)):
                    yield state, symbol, target
