import json
import logging

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_POST

from .dfa import DFA
from .errors import ConstructionError
from .nfa import NFA

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ['state_count', 'alphabet', 'transitions', 'start', 'accept']


def _build(automaton_class, definition):
    """
    Builds a DFA or NFA from the literal table sent by the client:

        {
            "state_count": 2,
            "alphabet": ["a", "b"],
            "transitions": [[0, "a", 1], [0, "b", 1], ...],
            "start": 0,
            "accept": [0]
        }

    Raises:
        ValueError: If the definition is malformed (wrong shape, missing key, non-string symbol)
        ConstructionError: If the automaton itself is invalid
    """
    if not isinstance(definition, dict):
        raise ValueError('Automaton definition must be an object')

    for key in REQUIRED_KEYS:
        if key not in definition:
            raise ValueError(f'Missing required key: {key}')

    if isinstance(definition['state_count'], bool) or not isinstance(definition['state_count'], int):
        raise ValueError('state_count must be an integer')

    for key in ('alphabet', 'accept'):
        if not isinstance(definition[key], list):
            raise ValueError(f'{key} must be a list')

    for symbol in definition['alphabet']:
        if not isinstance(symbol, str):
            raise ValueError(f'Alphabet symbols must be strings, got {symbol!r}')

    if not isinstance(definition['transitions'], list):
        raise ValueError('transitions must be a list of [source, symbol, target] triples')

    transitions = []
    for transition in definition['transitions']:
        if not isinstance(transition, list) or len(transition) != 3:
            raise ValueError(f'Malformed transition: {transition!r}')
        if not isinstance(transition[1], str):
            raise ValueError(f'Transition symbols must be strings, got {transition[1]!r}')
        transitions.append(tuple(transition))

    return automaton_class(
        definition['state_count'],
        definition['alphabet'],
        transitions,
        definition['start'],
        definition['accept'],
    )


def _describe(automaton):
    """JSON-friendly view of an automaton, in the same shape clients send."""
    return {
        'state_count': automaton.state_count,
        'alphabet': list(automaton.alphabet),
        'transitions': [list(transition) for transition in automaton.transitions],
        'start': automaton.start,
        'accept': sorted(automaton.accept),
    }


def _error_response(error):
    if isinstance(error, ConstructionError):
        return JsonResponse({'error': str(error), 'kind': error.kind}, status=400)
    return JsonResponse({'error': str(error)}, status=400)


def _input_symbols(data):
    """The input to simulate: a string, or a list of string symbols. Absent means empty."""
    input_symbols = data.get('input', '')
    if isinstance(input_symbols, str):
        return input_symbols
    if not isinstance(input_symbols, list):
        raise ValueError('input must be a string or a list of symbols')
    for symbol in input_symbols:
        if not isinstance(symbol, str):
            raise ValueError(f'Input symbols must be strings, got {symbol!r}')
    return input_symbols


def _load(request, *keys):
    """Parses the JSON body and returns the automaton definitions under ``keys``."""
    data = json.loads(request.body)
    if not isinstance(data, dict):
        raise ValueError('Request body must be a JSON object')

    definitions = []
    for key in keys:
        definition = data.get(key)
        if not definition:
            raise ValueError(f'Missing {key} definition')
        definitions.append(definition)
    return data, definitions


@csrf_exempt
@require_POST
def simulate_dfa(request):
    """
    Django view to handle DFA simulation requests.

    Expects a POST request with a JSON body containing:
    - automaton: The DFA definition
    - input: The input, either a string or a list of symbols

    Returns a JSON response with the verdict and the path taken.
    """
    try:
        data, (definition,) = _load(request, 'automaton')
        input_symbols = _input_symbols(data)

        dfa = _build(DFA, definition)

        return JsonResponse({
            'accepted': dfa.run(input_symbols),
            'type': 'dfa',
            'path': [list(step) for step in dfa.trace(input_symbols)],
        })

    except ValueError as e:
        return _error_response(e)
    except Exception as e:
        logger.exception('DFA simulation failed')
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def simulate_nfa(request):
    """
    Django view to handle NFA simulation requests.

    Same body as simulate_dfa. The response lists the active state sets
    after each consumed symbol instead of a single path.
    """
    try:
        data, (definition,) = _load(request, 'automaton')
        input_symbols = _input_symbols(data)

        nfa = _build(NFA, definition)

        return JsonResponse({
            'accepted': nfa.run(input_symbols),
            'type': 'nfa',
            'subsets': [list(subset) for subset in nfa.trace(input_symbols)],
        })

    except ValueError as e:
        return _error_response(e)
    except Exception as e:
        logger.exception('NFA simulation failed')
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def complement_dfa(request):
    """
    Django view to handle DFA complement requests.

    Expects a POST request with a JSON body containing:
    - automaton: The DFA definition
    """
    try:
        _, (definition,) = _load(request, 'automaton')

        dfa = _build(DFA, definition)
        complement = dfa.complement()

        return JsonResponse({
            'success': True,
            'complement_dfa': _describe(complement),
            'message': f'Complemented DFA: {len(complement.accept)} of '
                       f'{complement.state_count} states are now accepting',
        })

    except ValueError as e:
        return _error_response(e)
    except Exception as e:
        logger.exception('DFA complement failed')
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


def _product_view(request, operation):
    try:
        _, (definition, other_definition) = _load(request, 'automaton', 'other')

        dfa = _build(DFA, definition)
        other = _build(DFA, other_definition)
        product = getattr(dfa, operation)(other)

        return JsonResponse({
            'success': True,
            f'{operation}_dfa': _describe(product),
            'statistics': {
                'left_states_count': dfa.state_count,
                'right_states_count': other.state_count,
                'product_states_count': product.state_count,
                'accepting_states_count': len(product.accept),
            },
        })

    except ValueError as e:
        return _error_response(e)
    except Exception as e:
        logger.exception('DFA %s failed', operation)
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def union_dfa(request):
    """
    Django view to handle DFA union requests.

    Expects a POST request with a JSON body containing:
    - automaton: The first DFA definition
    - other: The second DFA definition, over the same alphabet
    """
    return _product_view(request, 'union')


@csrf_exempt
@require_POST
def intersection_dfa(request):
    """Django view to handle DFA intersection requests. Same body as union_dfa."""
    return _product_view(request, 'intersection')


@csrf_exempt
@require_POST
def nfa_to_dfa(request):
    """
    Django view to handle NFA to DFA conversion requests.

    Expects a POST request with a JSON body containing:
    - automaton: The NFA definition

    Returns a JSON response with the converted DFA.
    """
    try:
        _, (definition,) = _load(request, 'automaton')

        nfa = _build(NFA, definition)
        converted_dfa = nfa.determinize()

        original_stats = {
            'states_count': nfa.state_count,
            'transitions_count': len(nfa.transitions),
            'accepting_states_count': len(nfa.accept),
        }
        converted_stats = {
            'states_count': converted_dfa.state_count,
            'transitions_count': len(converted_dfa.transitions),
            'accepting_states_count': len(converted_dfa.accept),
        }

        return JsonResponse({
            'success': True,
            'converted_dfa': _describe(converted_dfa),
            'statistics': {
                'original': original_stats,
                'converted': converted_stats,
                'states_added': converted_stats['states_count'] - original_stats['states_count'],
            },
            'message': 'NFA successfully converted to DFA',
        })

    except ValueError as e:
        return _error_response(e)
    except Exception as e:
        logger.exception('NFA to DFA conversion failed')
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)
