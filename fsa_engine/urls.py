from django.urls import path
from . import views

urlpatterns = [
    # Simulators
    path('api/simulate-dfa/', views.simulate_dfa, name='simulate_dfa'),
    path('api/simulate-nfa/', views.simulate_nfa, name='simulate_nfa'),

    # DFA language transformations
    path('api/complement-dfa/', views.complement_dfa, name='complement_dfa'),
    path('api/union-dfa/', views.union_dfa, name='union_dfa'),
    path('api/intersection-dfa/', views.intersection_dfa, name='intersection_dfa'),

    # Subset construction
    path('api/nfa-to-dfa/', views.nfa_to_dfa, name='nfa_to_dfa'),
]
