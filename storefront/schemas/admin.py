"""
Back-office schemas: login, sales, reservations and inventory
"""

from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from .base import BaseSchema, Money, MAX_DB_INT

def _not_null(v):
    if v is None:
        raise ValueError("may not be null")
    return v

# Auth

class AdminLoginRequest(BaseSchema):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)

class AdminUserResponse(BaseSchema):
    id: int
    username: str
    email: str
    role: str

class AdminLoginResponse(BaseSchema):
    message: str
    user: AdminUserResponse
    access_token: str
    token_type: str = "bearer"

# Sales

class SaleCreate(BaseSchema):
    customer: str = Field(..., min_length=1, max_length=100)
    item: str = Field(..., min_length=1, max_length=100)
    qty: int = Field(1, ge=1, le=MAX_DB_INT)
    price_paid: Money = Field(..., ge=0)
    pickup_date: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = None

class SaleUpdate(BaseSchema):
    customer: Optional[str] = Field(None, min_length=1, max_length=100)
    item: Optional[str] = Field(None, min_length=1, max_length=100)
    qty: Optional[int] = Field(None, ge=1, le=MAX_DB_INT)
    price_paid: Optional[Money] = Field(None, ge=0)
    pickup_date: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = None

    @field_validator("customer", "item", "qty", "price_paid")
    @classmethod
    def reject_null(cls, v):
        return _not_null(v)

class SaleResponse(BaseSchema):
    id: int
    customer: str
    item: str
    qty: int
    price_paid: Money
    pickup_date: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

# Reservations

class ReservationCreate(BaseSchema):
    customer: str = Field(..., min_length=1, max_length=100)
    item: str = Field(..., min_length=1, max_length=100)
    price_paid: Money = Field(..., ge=0)
    qty: int = Field(1, ge=1, le=MAX_DB_INT)
    date_sold: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = None

class ReservationUpdate(BaseSchema):
    customer: Optional[str] = Field(None, min_length=1, max_length=100)
    item: Optional[str] = Field(None, min_length=1, max_length=100)
    price_paid: Optional[Money] = Field(None, ge=0)
    qty: Optional[int] = Field(None, ge=1, le=MAX_DB_INT)
    date_sold: Optional[str] = Field(None, max_length=20)
    notes: Optional[str] = None

    @field_validator("customer", "item", "qty", "price_paid")
    @classmethod
    def reject_null(cls, v):
        return _not_null(v)

class ReservationResponse(BaseSchema):
    id: int
    customer: str
    item: str
    price_paid: Money
    qty: int
    date_sold: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

# Inventory

class InventoryCreate(BaseSchema):
    order: Optional[str] = Field(None, max_length=50)
    type: Optional[str] = Field(None, max_length=50)
    item: str = Field(..., min_length=1, max_length=100)
    retail_price: Optional[Money] = Field(None, ge=0)
    resell_price: Optional[Money] = Field(None, ge=0)
    stock: int = Field(0, ge=0, le=MAX_DB_INT)
    status: str = Field("Available", max_length=50)
    track: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = None

class InventoryUpdate(BaseSchema):
    order: Optional[str] = Field(None, max_length=50)
    type: Optional[str] = Field(None, max_length=50)
    item: Optional[str] = Field(None, min_length=1, max_length=100)
    retail_price: Optional[Money] = Field(None, ge=0)
    resell_price: Optional[Money] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0, le=MAX_DB_INT)
    status: Optional[str] = Field(None, max_length=50)
    track: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = None

    @field_validator("item", "stock", "status")
    @classmethod
    def reject_null(cls, v):
        return _not_null(v)

class InventoryResponse(BaseSchema):
    id: int
    order: Optional[str] = None
    type: Optional[str] = None
    item: str
    retail_price: Optional[Money] = None
    resell_price: Optional[Money] = None
    stock: int
    status: str
    display_status: str
    track: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    updated_at: datetime

class InventorySummary(BaseSchema):
    total: int
    low_stock: int
    sold_out: int
