from django.urls import path
from .views import CounterView, UpdateCounterView, health_check

urlpatterns = [
    path('counter/', CounterView.as_view(), name='get-counter'),
    path('counter/update/', UpdateCounterView.as_view(), name='update-counter'),
    path('healthz/', health_check, name='healthz'),
]
