"""
Unit tests for merge_partial

Author: TM3
Date: 2025-11-28
"""
from decimal import Decimal
from types import SimpleNamespace

import pytest

from storefront.core.merge import merge_partial
from storefront.domain.catalog import ProductCategoryPatch
from storefront.domain.cart import ShoppingCartPatch
from storefront.domain.enums import OrderStatus
from storefront.models import ProductCategory


class TestMergePartial:
    """Test the partial update merge"""

    def test_non_null_fields_override_and_null_fields_are_kept(self):
        """Rename a category, leave its description alone"""
        existing = SimpleNamespace(id=1, name="Electronics", description="Old")
        patch = ProductCategoryPatch(id=1, name="Gadgets", description=None)

        result = merge_partial(existing, patch)

        assert result.id == 1
        assert result.name == "Gadgets"
        assert result.description == "Old"

    def test_all_null_patch_leaves_record_unchanged(self):
        existing = SimpleNamespace(id=2, status="PENDING", total_price=10.0)
        patch = {"id": 2, "status": None, "total_price": None}

        result = merge_partial(existing, patch)

        assert vars(result) == {"id": 2, "status": "PENDING", "total_price": 10.0}

    def test_identifier_only_patch_leaves_record_unchanged(self):
        existing = SimpleNamespace(
            id=3,
            placed_date=None,
            status=OrderStatus.PAID,
            total_price=Decimal("99.90"),
            payment_method="IDEAL",
            payment_reference="abc",
        )
        before = dict(vars(existing))

        merge_partial(existing, ShoppingCartPatch(id=3))

        assert vars(existing) == before

    def test_returns_same_object(self):
        existing = SimpleNamespace(id=1, name="A", description="B")
        assert merge_partial(existing, {"id": 1, "name": "C"}) is existing

    def test_is_idempotent(self):
        existing = SimpleNamespace(id=1, name="A", description="B")
        patch = ProductCategoryPatch(id=1, description="New")

        once = dict(vars(merge_partial(existing, patch)))
        twice = dict(vars(merge_partial(existing, patch)))

        assert once == twice == {"id": 1, "name": "A", "description": "New"}

    def test_identifier_is_never_copied(self):
        existing = SimpleNamespace(id=1, name="A")
        merge_partial(existing, {"id": 99, "name": "B"})
        assert existing.id == 1

    def test_falsy_values_still_override(self):
        """Only None means "unset"; empty string, zero and False are values"""
        existing = {"id": 1, "name": "A", "quantity": 5, "active": True}

        merge_partial(existing, {"id": 1, "name": "", "quantity": 0, "active": False})

        assert existing == {"id": 1, "name": "", "quantity": 0, "active": False}

    def test_mapping_target_and_missing_keys(self):
        existing = {"id": 7, "name": "A", "description": "B"}
        merge_partial(existing, {"id": 7, "description": "C"})
        assert existing == {"id": 7, "name": "A", "description": "C"}

    def test_explicit_field_list_restricts_merge(self):
        existing = SimpleNamespace(id=1, name="A", description="B")
        patch = ProductCategoryPatch(id=1, name="X", description="Y")

        merge_partial(existing, patch, fields=["description"])

        assert existing.name == "A"
        assert existing.description == "Y"

    def test_merges_into_orm_entity(self):
        entity = ProductCategory(id=5, name="Books", description="Paper")

        merge_partial(entity, ProductCategoryPatch(id=5, name="E-books"))

        assert entity.name == "E-books"
        assert entity.description == "Paper"

    def test_custom_identifier_field(self):
        existing = {"sku": "A-1", "name": "Old"}
        merge_partial(existing, {"sku": "B-2", "name": "New"}, id_field="sku")
        assert existing == {"sku": "A-1", "name": "New"}

    def test_unsupported_patch_type_raises(self):
        with pytest.raises(TypeError):
            merge_partial(SimpleNamespace(id=1), ["not", "a", "patch"])
