"""
Categories API v1 URLs.
"""
from django.urls import path

from .views import CategoryDetailView, CategoryListCreateView

urlpatterns = [
    path('categories', CategoryListCreateView.as_view(), name='category-list-create'),
    path('categories/<str:category_id>', CategoryDetailView.as_view(), name='category-detail'),
]
