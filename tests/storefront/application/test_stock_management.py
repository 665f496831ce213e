"""Application tests for admin stock edits."""

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from storefront.inventory.inventory import InventoryRecord
from storefront.inventory.stocking import set_stock
from storefront.product.lookup import get_product_with_inventory


class TestSetStock:
    def test_overwrites_record_and_product_mirror(self, make_product):
        product_id = make_product(stock=5)
        set_stock(product_id, 12)

        product, record = get_product_with_inventory(product_id)
        assert record.quantity == 12
        assert product.stock == 12

    def test_zero_allowed(self, make_product):
        product_id = make_product(stock=5)
        set_stock(product_id, 0)
        assert current_domain.repository_for(InventoryRecord).for_product(product_id).quantity == 0

    def test_negative_rejected(self, make_product):
        product_id = make_product(stock=5)
        with pytest.raises(ValidationError):
            set_stock(product_id, -1)

        product, record = get_product_with_inventory(product_id)
        assert record.quantity == 5
        assert product.stock == 5

    def test_touches_last_updated(self, make_product):
        product_id = make_product(stock=5)
        before = current_domain.repository_for(InventoryRecord).for_product(product_id).last_updated
        set_stock(product_id, 6)
        after = current_domain.repository_for(InventoryRecord).for_product(product_id).last_updated
        assert after >= before

    def test_recreates_missing_record(self, make_product):
        product_id = make_product(stock=5)
        repo = current_domain.repository_for(InventoryRecord)
        repo._dao.delete(repo.for_product(product_id))

        set_stock(product_id, 3)
        assert repo.for_product(product_id).quantity == 3

    def test_unknown_product(self):
        with pytest.raises(ObjectNotFoundError):
            set_stock("missing-product", 3)
