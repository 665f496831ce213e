"""Application tests for category and product management."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.category.category import Category
from storefront.category.lookup import get_category, list_categories
from storefront.errors import NotFoundError
from storefront.inventory.inventory import InventoryRecord
from storefront.product.details import update_product
from storefront.product.lookup import get_product, get_product_with_inventory
from storefront.product.product import Product
from storefront.product.removal import RemoveProduct
from storefront.seed import INITIAL_CATEGORIES, seed_categories


class TestCreateCategory:
    def test_create(self, make_category):
        category_id = make_category(name="Tablets", slug="tablets")
        category = current_domain.repository_for(Category).get(category_id)
        assert category.name == "Tablets"

    def test_duplicate_slug_rejected(self, make_category):
        make_category(name="Tablets", slug="tablets")
        with pytest.raises(ValidationError) as exc:
            make_category(name="Tablets again", slug="tablets")
        assert "slug" in exc.value.messages

    def test_lookup_by_id_or_slug(self, make_category):
        category_id = make_category(name="TVs", slug="tvs")
        assert get_category(category_id).slug == "tvs"
        assert str(get_category("tvs").id) == category_id

    def test_unknown_category(self):
        with pytest.raises(NotFoundError):
            get_category("no-such-category")


class TestSeedCategories:
    def test_seeds_empty_catalogue(self):
        assert seed_categories() == len(INITIAL_CATEGORIES)
        slugs = {category.slug for category in list_categories()}
        assert slugs == {"laptops", "smartphones", "tablets", "headphones", "tvs", "gaming"}

    def test_does_nothing_when_categories_exist(self, make_category):
        make_category(name="Cameras", slug="cameras")
        assert seed_categories() == 0
        assert len(list_categories()) == 1


class TestCreateProduct:
    def test_creates_inventory_record(self, make_product):
        product_id = make_product(stock=7)
        product, record = get_product_with_inventory(product_id)
        assert product.stock == 7
        assert record.quantity == 7

    def test_unknown_category_rejected(self, make_product):
        with pytest.raises(ValidationError) as exc:
            make_product(category_id="missing-category")
        assert "category_id" in exc.value.messages
        assert current_domain.repository_for(Product).list_all() == []


class TestUpdateProduct:
    def test_partial_update_keeps_other_fields(self, make_product):
        product_id = make_product()
        update_product(product_id, {"price": 8.5})
        product = get_product(product_id)
        assert product.price == 8.5
        assert product.name == "ThinkPad X1"

    def test_stock_change_updates_inventory(self, make_product):
        product_id = make_product(stock=5)
        update_product(product_id, {}, stock=2)
        product, record = get_product_with_inventory(product_id)
        assert product.stock == 2
        assert record.quantity == 2

    def test_move_to_unknown_category_rejected(self, make_product):
        product_id = make_product()
        with pytest.raises(ValidationError):
            update_product(product_id, {"category_id": "missing-category"})

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            update_product("missing-product", {"price": 1.0})


class TestRemoveProduct:
    def test_removes_product_and_inventory(self, make_product):
        product_id = make_product()
        current_domain.process(RemoveProduct(product_id=product_id), asynchronous=False)

        with pytest.raises(NotFoundError):
            get_product(product_id)
        assert current_domain.repository_for(InventoryRecord).for_product(product_id) is None

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(RemoveProduct(product_id="missing-product"), asynchronous=False)
