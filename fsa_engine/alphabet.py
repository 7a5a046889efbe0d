from typing import FrozenSet, Hashable, Iterable, Iterator, Tuple

from .errors import InvalidAcceptStateError, InvalidStartError

Symbol = Hashable
State = int


class Alphabet:
    """
    A finite set of symbols with a fixed iteration order.

    Duplicates are dropped and the order of first appearance is kept; every
    algorithm that walks the alphabet uses that order, which is what makes
    subset discovery and product numbering reproducible. Equality ignores
    order: two alphabets are equal when they hold the same symbols.
    """

    def __init__(self, symbols: Iterable[Symbol]):
        self._symbols: Tuple[Symbol, ...] = tuple(dict.fromkeys(symbols))
        self._members: FrozenSet[Symbol] = frozenset(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __contains__(self, symbol) -> bool:
        try:
            return symbol in self._members
        except TypeError:
            # Unhashable values can never be symbols
            return False

    def __eq__(self, other) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._members == other._members

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        return f"Alphabet({list(self._symbols)!r})"

    def __str__(self) -> str:
        return ', '.join(str(symbol) for symbol in self._symbols)


def is_state(state, state_count: int) -> bool:
    """True when ``state`` is an integer index in ``[0, state_count)``."""
    if isinstance(state, bool) or not isinstance(state, int):
        return False
    return 0 <= state < state_count


def check_start_and_accept(state_count: int, start: State, accept: Iterable[State]) -> None:
    """Validate the start state and the accept states, in declaration order."""
    if not is_state(start, state_count):
        raise InvalidStartError(
            f"Start state {start!r} does not exist (states are 0..{state_count - 1})"
        )

    for state in accept:
        if not is_state(state, state_count):
            raise InvalidAcceptStateError(
                f"Accept state {state!r} does not exist (states are 0..{state_count - 1})"
            )
