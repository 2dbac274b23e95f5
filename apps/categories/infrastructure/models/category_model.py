"""
Category Django ORM model.
"""
from django.db import models


class CategoryModel(models.Model):
    """Row layout of the ``categories`` table."""

    id = models.CharField(primary_key=True, max_length=36, editable=False)
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default='')
    is_active = models.BooleanField(db_column='activated', default=True)
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField()
    deleted_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = 'categories'
        indexes = [
            models.Index(fields=['name'], name='categories_name_idx'),
            models.Index(fields=['created_at'], name='categories_created_at_idx'),
            models.Index(fields=['updated_at'], name='categories_updated_at_idx'),
        ]

    def __str__(self):
        return f"{self.name} ({self.id})"
