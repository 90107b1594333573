"""
Product Category Domain Models

Author: TM3
Date: 2025-11-28
"""
from pydantic import BaseModel, Field
from typing import Optional

from storefront.domain.base import EntityDTO


class ProductCategory(EntityDTO):
    """
    Product category - groups products in the catalog

    Fields:
        id: Internal category ID (absent on create)
        name: Category name
        description: Free text description (optional)
    """

    id: Optional[int] = Field(None, description="Category ID")
    name: str = Field(..., description="Category name", min_length=1)
    description: Optional[str] = Field(None, description="Category description")


class ProductCategoryPatch(BaseModel):
    """Schema for partially updating a category (null fields are left unchanged)"""
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
