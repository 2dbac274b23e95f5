"""
Root URL configuration.
"""
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView

from shared.interfaces.health_views import (
    HealthCheckView,
    LivenessCheckView,
    ReadinessCheckView,
)

urlpatterns = [
    path('', include('apps.categories.interfaces.api.urls')),

    # Health probes
    path('health', HealthCheckView.as_view(), name='health'),
    path('health/live', LivenessCheckView.as_view(), name='health-live'),
    path('health/ready', ReadinessCheckView.as_view(), name='health-ready'),

    # OpenAPI
    path('api/schema', SpectacularAPIView.as_view(), name='schema'),
]
