class ConstructionError(ValueError):
    """
    Base class for every structural validation failure raised while building
    an automaton or combining two automata.

    Each subclass sets ``kind`` to the short name of the violated rule so
    callers (the JSON views in particular) can report it without matching on
    class names.
    """
    kind = 'ConstructionError'


class InvalidStartError(ConstructionError):
    kind = 'InvalidStart'


class InvalidAcceptStateError(ConstructionError):
    kind = 'InvalidAcceptState'


class InvalidTransitionStateError(ConstructionError):
    kind = 'InvalidTransitionState'


class UnknownSymbolError(ConstructionError):
    kind = 'UnknownSymbol'


class IncompleteTransitionError(ConstructionError):
    kind = 'IncompleteTransition'


class ConflictingTransitionError(ConstructionError):
    kind = 'ConflictingTransition'


class AlphabetMismatchError(ConstructionError):
    kind = 'AlphabetMismatch'


class TransitionLookupError(LookupError):
    """Raised when a validated table is queried outside its states or alphabet."""
