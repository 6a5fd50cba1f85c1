"""Order models for the wine market"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from .base import CamelModel


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class ShippingAddress(CamelModel):
    """Shipping address for order"""
    name: str
    street: str
    city: str
    postal_code: str
    state: Optional[str] = None
    country: str = "FR"


class PaymentInfo(CamelModel):
    """Payment details recorded with the order"""
    method: str = "credit_card"
    cardholder_name: Optional[str] = None
    last_four: Optional[str] = None


class OrderItem(CamelModel):
    """Item in an order"""
    wine_id: int
    title: Optional[str] = None
    price: float = 0.0
    quantity: int = Field(gt=0)


class Order(CamelModel):
    """Placed order"""
    order_id: str
    user_id: str
    items: list[OrderItem]
    shipping_address: ShippingAddress
    payment_info: Optional[PaymentInfo] = None
    total: float
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime
    updated_at: datetime


class CreateOrderRequest(CamelModel):
    """Request to place an order from explicit items"""
    items: list[OrderItem] = []
    shipping_address: Optional[ShippingAddress] = None
    payment_info: Optional[PaymentInfo] = None
    total: Optional[float] = None


class CheckoutRequest(CamelModel):
    """Request to turn the current cart into an order"""
    shipping_address: Optional[ShippingAddress] = None
    payment_info: Optional[PaymentInfo] = None


class UpdateOrderStatusRequest(CamelModel):
    """Request to change an order status"""
    status: Optional[OrderStatus] = None
