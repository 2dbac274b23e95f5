"""
Django category gateway tests against the test database.
"""
from dataclasses import asdict
from unittest import mock

import pytest
from django.db import DatabaseError

from apps.categories.domain.entities.category import Category
from apps.categories.domain.exceptions import CategoryNotFoundError
from apps.categories.domain.repositories import SearchCategoryQuery
from apps.categories.domain.value_objects import CategoryID
from apps.categories.infrastructure.models import CategoryModel
from apps.categories.infrastructure.repositories.django_category_gateway import (
    resolve_direction,
    resolve_ordering,
    resolve_sort,
)
from shared.domain import StorageError


class TestResolvers:

    @pytest.mark.parametrize('sort', ['name', 'created_at', 'updated_at'])
    def test_allowed_sort_fields_pass(self, sort):
        assert resolve_sort(sort) == sort

    @pytest.mark.parametrize('sort', ['', 'bogus', 'id', 'NAME', 'name; DROP TABLE categories', 'description'])
    def test_other_sort_fields_fall_back_to_created_at(self, sort):
        assert resolve_sort(sort) == 'created_at'

    @pytest.mark.parametrize('direction', ['desc', 'DESC', 'DeSc'])
    def test_desc_in_any_case(self, direction):
        assert resolve_direction(direction) == 'DESC'

    @pytest.mark.parametrize('direction', ['', 'asc', 'ASC', 'weird', 'descending', None])
    def test_everything_else_is_asc(self, direction):
        assert resolve_direction(direction) == 'ASC'

    def test_ordering_breaks_ties_on_id(self):
        assert resolve_ordering('name', 'desc') == ('-name', '-id')
        assert resolve_ordering('bogus', 'asc') == ('created_at', 'id')


@pytest.mark.django_db
class TestCrud:

    @pytest.mark.parametrize('is_active', [True, False])
    def test_round_trip_keeps_every_field(self, gateway, is_active):
        category = Category.create('Movies', 'some description', is_active)

        gateway.create_category(category)
        loaded = gateway.get_category_by_id(category.id)

        assert asdict(loaded) == asdict(category)
        assert (loaded.deleted_at is None) is loaded.is_active

    def test_create_returns_the_same_category(self, gateway):
        category = Category.create('Movies', '', True)

        assert gateway.create_category(category) is category

    def test_row_layout(self, gateway):
        category = Category.create('Movies', 'desc', False)

        gateway.create_category(category)

        row = CategoryModel.objects.get(id=str(category.id))
        assert row.is_active is False
        assert row.deleted_at == category.deleted_at
        assert len(row.id) == 36

    def test_missing_row_is_a_storage_error(self, gateway):
        with pytest.raises(StorageError) as exc_info:
            gateway.get_category_by_id(CategoryID.generate())

        assert isinstance(exc_info.value, CategoryNotFoundError)

    def test_duplicate_id_is_a_storage_error(self, gateway):
        category = Category.create('Movies', '', True)
        gateway.create_category(category)

        with pytest.raises(StorageError):
            gateway.create_category(category)

    def test_update_overwrites_mutable_columns(self, gateway):
        category = Category.create('Movies', 'desc', True)
        gateway.create_category(category)

        category.update('Series', 'new desc', False)
        gateway.update_category(category)
        loaded = gateway.get_category_by_id(category.id)

        assert loaded.name == 'Series'
        assert loaded.description == 'new desc'
        assert loaded.is_active is False
        assert loaded.deleted_at == category.deleted_at
        assert loaded.updated_at == category.updated_at
        assert loaded.created_at == category.created_at

    def test_reactivation_clears_deleted_at(self, gateway):
        category = Category.create('Movies', 'desc', False)
        gateway.create_category(category)

        category.activate()
        gateway.update_category(category)

        assert gateway.get_category_by_id(category.id).deleted_at is None

    def test_delete_removes_row(self, gateway):
        category = Category.create('Movies', 'desc', True)
        gateway.create_category(category)

        gateway.delete_category(category.id)

        assert not CategoryModel.objects.filter(id=str(category.id)).exists()

    def test_delete_unknown_id_succeeds(self, gateway):
        gateway.delete_category(CategoryID.generate())

    def test_driver_errors_become_storage_errors(self, gateway):
        category = Category.create('Movies', 'desc', True)

        with mock.patch.object(CategoryModel.objects, 'create', side_effect=DatabaseError('connection lost')):
            with pytest.raises(StorageError) as exc_info:
                gateway.create_category(category)

        assert exc_info.value.message == 'connection lost'
        assert isinstance(exc_info.value.__cause__, DatabaseError)


@pytest.mark.django_db
class TestFindAll:

    @pytest.fixture
    def seeded(self, gateway, category_factory):
        categories = [
            category_factory(name='Movies', description='feature films', minutes=2),
            category_factory(name='Anime', description='japanese animation', minutes=0),
            category_factory(name='Series', description='tv shows and movies', minutes=1, is_active=False),
            category_factory(name='Documentaries', description='non fiction', minutes=3),
        ]
        for category in categories:
            gateway.create_category(category)
        return categories

    @staticmethod
    def names(page):
        return [item.name for item in page.items]

    def test_defaults_to_created_at_ascending(self, gateway, seeded):
        page = gateway.find_all(SearchCategoryQuery(page=1, per_page=10))

        assert self.names(page) == ['Anime', 'Series', 'Movies', 'Documentaries']
        assert page.total == 4
        assert page.current_page == 1
        assert page.per_page == 10

    def test_sort_by_name_descending(self, gateway, seeded):
        page = gateway.find_all(SearchCategoryQuery(page=1, per_page=10, sort='name', direction='DESC'))

        assert self.names(page) == ['Series', 'Movies', 'Documentaries', 'Anime']

    def test_unknown_sort_and_direction_fall_back(self, gateway, seeded):
        page = gateway.find_all(SearchCategoryQuery(page=1, per_page=10, sort='bogus', direction='weird'))

        assert self.names(page) == ['Anime', 'Series', 'Movies', 'Documentaries']

    def test_sort_injection_is_ignored(self, gateway, seeded):
        page = gateway.find_all(
            SearchCategoryQuery(page=1, per_page=10, sort='name; DROP TABLE categories', direction='desc')
        )

        assert self.names(page) == ['Documentaries', 'Movies', 'Series', 'Anime']
        assert CategoryModel.objects.count() == 4

    def test_terms_match_name_or_description(self, gateway, seeded):
        page = gateway.find_all(SearchCategoryQuery(page=1, per_page=10, terms='ovies'))

        assert self.names(page) == ['Series', 'Movies']
        assert page.total == 2

    def test_terms_ignore_case(self, gateway, seeded):
        page = gateway.find_all(SearchCategoryQuery(page=1, per_page=10, terms='MOVIES'))

        assert self.names(page) == ['Series', 'Movies']

    def test_terms_are_bound_not_interpolated(self, gateway, seeded):
        page = gateway.find_all(SearchCategoryQuery(page=1, per_page=10, terms="' OR '1'='1"))

        assert page.items == []
        assert page.total == 0

    def test_total_counts_matches_before_paging(self, gateway, seeded):
        page = gateway.find_all(SearchCategoryQuery(page=2, per_page=3))

        assert self.names(page) == ['Documentaries']
        assert page.total == 4
        assert page.current_page == 2
        assert page.per_page == 3

    def test_page_past_the_end_is_empty(self, gateway, seeded):
        page = gateway.find_all(SearchCategoryQuery(page=5, per_page=2))

        assert page.items == []
        assert page.total == 4

    def test_offset_beyond_sql_range_is_empty(self, gateway, seeded):
        page = gateway.find_all(SearchCategoryQuery(page=2 ** 63 - 1, per_page=10))

        assert page.items == []
        assert page.current_page == 2 ** 63 - 1
        assert page.total == 4

    @pytest.mark.parametrize('page_number', [0, -1, -10])
    def test_non_positive_page_is_clamped_to_first(self, gateway, seeded, page_number):
        page = gateway.find_all(SearchCategoryQuery(page=page_number, per_page=2))

        assert page.current_page == 1
        assert self.names(page) == ['Anime', 'Series']

    @pytest.mark.parametrize('per_page', [0, -5])
    def test_non_positive_page_size_returns_no_items(self, gateway, seeded, per_page):
        page = gateway.find_all(SearchCategoryQuery(page=1, per_page=per_page))

        assert page.items == []
        assert page.per_page == 0
        assert page.total == 4

    def test_items_are_entities_with_soft_delete_state(self, gateway, seeded):
        page = gateway.find_all(SearchCategoryQuery(page=1, per_page=10, terms='Series'))

        (series,) = page.items
        assert isinstance(series, Category)
        assert series.is_active is False
        assert series.deleted_at is not None

    def test_empty_table(self, gateway):
        page = gateway.find_all(SearchCategoryQuery(page=1, per_page=10))

        assert page.items == []
        assert page.total == 0
