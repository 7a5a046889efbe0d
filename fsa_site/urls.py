from django.urls import include, path

urlpatterns = [
    path('', include('fsa_engine.urls')),
]
