"""Order storage for the wine market"""

import itertools
import logging
import threading
from datetime import datetime, timezone
from typing import Optional

from ..core.exceptions import OrderNotFoundError, OrderStateError, ValidationError
from ..models.order import Order, OrderItem, OrderStatus, PaymentInfo, ShippingAddress
from .carts import CartDatabase

logger = logging.getLogger(__name__)


class OrderDatabase:
    """In-memory order storage, one list of orders per user"""

    FIRST_ORDER_NUMBER = 1000

    def __init__(self, carts: CartDatabase):
        self.carts = carts
        self.orders: dict[str, list[Order]] = {}
        self._counter = itertools.count(self.FIRST_ORDER_NUMBER)
        self._lock = threading.Lock()

    def create_order(
        self,
        user_id: str,
        items: list[OrderItem],
        shipping_address: Optional[ShippingAddress],
        payment_info: Optional[PaymentInfo] = None,
        total: Optional[float] = None,
    ) -> Order:
        """Create a pending order"""
        if not items or shipping_address is None or not total:
            raise ValidationError("Missing required fields")

        now = datetime.now(timezone.utc)
        with self._lock:
            order = Order(
                order_id=f"ORD-{next(self._counter)}",
                user_id=user_id,
                items=items,
                shipping_address=shipping_address,
                payment_info=payment_info,
                total=total,
                status=OrderStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
            self.orders.setdefault(user_id, []).append(order)

        logger.info(f"Order {order.order_id} created for user {user_id}: {order.total}")
        return order

    def checkout(
        self,
        user_id: str,
        shipping_address: Optional[ShippingAddress],
        payment_info: Optional[PaymentInfo] = None,
    ) -> Order:
        """Create an order from the user's cart and empty the cart"""
        if shipping_address is None:
            raise ValidationError("Shipping address is required")

        with self.carts.locked(user_id) as cart:
            if not cart.items:
                raise ValidationError("Cart is empty")

            summary = self.carts.summarize(cart)
            items = [
                OrderItem(
                    wine_id=item.wine.id,
                    title=item.wine.title,
                    price=item.wine.price or 0.0,
                    quantity=item.quantity,
                )
                for item in cart.items
            ]
            order = self.create_order(
                user_id,
                items=items,
                shipping_address=shipping_address,
                payment_info=payment_info,
                total=summary.total,
            )

            cart.items = []
            cart.updated_at = order.created_at

        return order

    def list_orders(self, user_id: str) -> list[Order]:
        """List a user's orders, oldest first"""
        return list(self.orders.get(user_id, []))

    def get_order(self, user_id: str, order_id: str) -> Order:
        """Get an order by ID"""
        order = next(
            (o for o in self.orders.get(user_id, []) if o.order_id == order_id),
            None,
        )
        if not order:
            raise OrderNotFoundError(order_id)
        return order

    def update_status(
        self,
        user_id: str,
        order_id: str,
        status: Optional[OrderStatus],
    ) -> Order:
        """Update order status"""
        if status is None:
            raise ValidationError("Status is required")

        with self._lock:
            order = self.get_order(user_id, order_id)
            order.status = status
            order.updated_at = datetime.now(timezone.utc)

        logger.info(f"Order {order_id} status -> {status.value}")
        return order

    def cancel_order(self, user_id: str, order_id: str) -> Order:
        """Cancel an order that has not started processing"""
        with self._lock:
            order = self.get_order(user_id, order_id)
            if order.status != OrderStatus.PENDING:
                raise OrderStateError("Cannot cancel order that is not in pending status")

            order.status = OrderStatus.CANCELLED
            order.updated_at = datetime.now(timezone.utc)

        logger.info(f"Order {order_id} cancelled")
        return order
