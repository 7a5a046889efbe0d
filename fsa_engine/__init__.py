from .alphabet import Alphabet
from .dfa import DFA
from .errors import (
    AlphabetMismatchError,
    ConflictingTransitionError,
    ConstructionError,
    IncompleteTransitionError,
    InvalidAcceptStateError,
    InvalidStartError,
    InvalidTransitionStateError,
    TransitionLookupError,
    UnknownSymbolError,
)
from .nfa import NFA
from .transition_table import Transition

__all__ = [
    'Alphabet',
    'AlphabetMismatchError',
    'ConflictingTransitionError',
    'ConstructionError',
    'DFA',
    'IncompleteTransitionError',
    'InvalidAcceptStateError',
    'InvalidStartError',
    'InvalidTransitionStateError',
    'NFA',
    'Transition',
    'TransitionLookupError',
    'UnknownSymbolError',
]
