"""
Categories API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.categories.interfaces.api.v1.urls')),
]
