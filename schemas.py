"""
Database Schemas for ShopKart

MongoDB collections are defined below using Pydantic models. Each class name is
converted to lowercase for the collection name (User -> "user").

We will use these collections:
- user: shoppers and admins, each with an embedded cart
- product: the catalogue
- order: checked-out carts with a status
"""

from pydantic import BaseModel, Field, EmailStr
from typing import Optional, List, Literal

Role = Literal["admin", "user"]
PaymentMethod = Literal["credit_card", "paypal", "cash_on_delivery"]
OrderStatus = Literal["pending", "processing", "shipped", "delivered", "cancelled"]


class CartItem(BaseModel):
    product_id: str = Field(..., description="Reference to product _id")
    quantity: int = Field(..., ge=1)
    price: float = Field(..., ge=0, description="Unit price when the item was added")


class User(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password_hash: str = Field(..., description="BCrypt hash of password")
    role: Role = Field("user")
    cart: List[CartItem] = Field(default_factory=list)


class Product(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field("", max_length=2000)
    price: float = Field(..., ge=0, description="Price in USD")
    image: Optional[str] = Field(None, description="Image URL")
    category: str = Field(..., min_length=1)
    stock: int = Field(0, ge=0, description="Units in stock")
    rating: float = Field(0, ge=0, le=5)
    num_reviews: int = Field(0, ge=0)


class OrderItem(BaseModel):
    product_id: str = Field(..., description="Reference to product _id")
    name: str = Field(..., description="Product name at checkout time")
    price: float = Field(..., ge=0, description="Unit price at checkout time")
    quantity: int = Field(..., ge=1)


class ShippingAddress(BaseModel):
    address: str = ""
    city: str = ""
    postal_code: str = ""
    country: str = ""


class Order(BaseModel):
    user_id: str = Field(..., description="Reference to user _id")
    items: List[OrderItem]
    shipping_address: ShippingAddress = Field(default_factory=ShippingAddress)
    payment_method: PaymentMethod = Field("cash_on_delivery")
    total_amount: float = Field(..., ge=0)
    status: OrderStatus = Field("pending")
    notes: str = ""
