"""Tests for the Category aggregate."""

import pytest
from protean.exceptions import ValidationError
from protean.utils import DomainObjects

from storefront.category.category import Category
from storefront.category.events import CategoryCreated


class TestCategoryConstruction:
    def test_element_type(self):
        assert Category.element_type == DomainObjects.AGGREGATE

    def test_create_category(self):
        category = Category.create(name="Laptops", slug="laptops", icon="fas fa-laptop")
        assert category.name == "Laptops"
        assert category.slug == "laptops"
        assert category.icon == "fas fa-laptop"

    def test_icon_is_optional(self):
        category = Category.create(name="Gaming", slug="gaming")
        assert category.icon is None

    def test_create_raises_category_created(self):
        category = Category.create(name="TVs", slug="tvs")
        events = [e for e in category._events if isinstance(e, CategoryCreated)]
        assert len(events) == 1
        assert events[0].slug == "tvs"
        assert events[0].category_id == category.id


class TestCategorySlug:
    @pytest.mark.parametrize("slug", ["laptops", "smart-phones", "4k-tvs"])
    def test_url_safe_slugs_accepted(self, slug):
        assert Category.create(name="Any", slug=slug).slug == slug

    @pytest.mark.parametrize("slug", ["Laptops", "smart phones", "tvs-", "-tvs", "a--b", "tvs!"])
    def test_unsafe_slugs_rejected(self, slug):
        with pytest.raises(ValidationError) as exc:
            Category.create(name="Any", slug=slug)
        assert "slug" in exc.value.messages

    def test_name_required(self):
        with pytest.raises(ValidationError):
            Category.create(name=None, slug="laptops")
