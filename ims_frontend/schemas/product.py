"""
Product Schemas
"""
import enum
import math
from datetime import datetime
from typing import Optional, List, Union

from pydantic import BaseModel, Field, field_validator, model_validator


CATEGORIES = [
    "Electronics",
    "Accessories",
    "Clothing",
    "Books",
    "Home & Garden",
    "Sports",
    "Other",
]

# Backend low-stock threshold, used when a product arrives without a status
LOW_STOCK_THRESHOLD = 10


class ProductStatus(str, enum.Enum):
    IN_STOCK = "IN_STOCK"
    LOW_STOCK = "LOW_STOCK"
    OUT_OF_STOCK = "OUT_OF_STOCK"


def status_for_quantity(quantity: int) -> ProductStatus:
    if quantity <= 0:
        return ProductStatus.OUT_OF_STOCK
    if quantity < LOW_STOCK_THRESHOLD:
        return ProductStatus.LOW_STOCK
    return ProductStatus.IN_STOCK


class Product(BaseModel):
    """Product as returned by the backend"""
    id: Union[int, str]
    name: str
    category: str
    price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=0)
    description: Optional[str] = None
    status: Optional[ProductStatus] = None
    sku: Optional[str] = None
    supplier: Optional[str] = None
    location: Optional[str] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    class Config:
        populate_by_name = True

    @model_validator(mode="after")
    def derive_status(self):
        if self.status is None:
            self.status = status_for_quantity(self.quantity)
        return self

    @property
    def value(self) -> float:
        """Stock value (price x quantity)"""
        return self.price * self.quantity


class ProductFormData(BaseModel):
    """Raw add/edit form fields, exactly as typed by the user"""
    name: str = ""
    category: str = ""
    price: str = ""
    quantity: str = ""
    description: str = ""

    @field_validator("price", "quantity", mode="before")
    @classmethod
    def numbers_as_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @classmethod
    def from_product(cls, product: Product) -> "ProductFormData":
        return cls(
            name=product.name,
            category=product.category,
            price=str(product.price),
            quantity=str(product.quantity),
            description=product.description or "",
        )


class ProductPayload(BaseModel):
    """Validated create/update body sent to the backend"""
    name: str
    category: str
    price: float
    quantity: int
    description: str = ""

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Product name is required")
        return value

    @field_validator("category")
    @classmethod
    def category_known(cls, value: str) -> str:
        if value not in CATEGORIES:
            raise ValueError("Category is required")
        return value

    @field_validator("price", mode="before")
    @classmethod
    def price_positive(cls, value):
        try:
            price = float(str(value).strip())
        except ValueError:
            raise ValueError("Valid price is required")
        if not math.isfinite(price) or price <= 0:
            raise ValueError("Valid price is required")
        return price

    @field_validator("quantity", mode="before")
    @classmethod
    def quantity_non_negative(cls, value):
        try:
            quantity = int(str(value).strip())
        except ValueError:
            raise ValueError("Valid quantity is required")
        if quantity < 0:
            raise ValueError("Valid quantity is required")
        return quantity

    @field_validator("description", mode="before")
    @classmethod
    def description_optional(cls, value):
        return value or ""


class ProductListView(BaseModel):
    """Products page"""
    products: List[Product]
    total: int
    search: str = ""
    can_create: bool = False
    can_edit: bool = False
    can_delete: bool = False


class ProductFormView(BaseModel):
    """Add / edit product page"""
    product_id: Optional[Union[int, str]] = None
    form: ProductFormData
    categories: List[str] = CATEGORIES
    loaded: bool = True


class DeleteConfirmation(BaseModel):
    product_id: Union[int, str]
    confirm_required: bool = True
    message: str = "Are you sure you want to delete this product?"
