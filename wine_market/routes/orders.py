"""Order API routes"""

from fastapi import APIRouter, Depends

from ..database.orders import OrderDatabase
from ..models.order import (
    CheckoutRequest,
    CreateOrderRequest,
    Order,
    UpdateOrderStatusRequest,
)
from .deps import get_order_db

router = APIRouter(prefix="/api/orders", tags=["Orders"])


@router.post("/{user_id}", response_model=Order, status_code=201)
async def create_order(
    user_id: str,
    request: CreateOrderRequest,
    order_db: OrderDatabase = Depends(get_order_db),
):
    """Place an order from explicit items"""
    return order_db.create_order(
        user_id,
        items=request.items,
        shipping_address=request.shipping_address,
        payment_info=request.payment_info,
        total=request.total,
    )


@router.post("/{user_id}/checkout", response_model=Order, status_code=201)
async def checkout(
    user_id: str,
    request: CheckoutRequest,
    order_db: OrderDatabase = Depends(get_order_db),
):
    """Turn the user's cart into an order and empty the cart"""
    return order_db.checkout(
        user_id,
        shipping_address=request.shipping_address,
        payment_info=request.payment_info,
    )


@router.get("/{user_id}", response_model=list[Order])
async def list_orders(user_id: str, order_db: OrderDatabase = Depends(get_order_db)):
    """List a user's orders"""
    return order_db.list_orders(user_id)


@router.get("/{user_id}/{order_id}", response_model=Order)
async def get_order(
    user_id: str,
    order_id: str,
    order_db: OrderDatabase = Depends(get_order_db),
):
    """Get order details"""
    return order_db.get_order(user_id, order_id)


@router.put("/{user_id}/{order_id}/status", response_model=Order)
async def update_order_status(
    user_id: str,
    order_id: str,
    request: UpdateOrderStatusRequest,
    order_db: OrderDatabase = Depends(get_order_db),
):
    """Update order status"""
    return order_db.update_status(user_id, order_id, request.status)


@router.put("/{user_id}/{order_id}/cancel", response_model=Order)
async def cancel_order(
    user_id: str,
    order_id: str,
    order_db: OrderDatabase = Depends(get_order_db),
):
    """Cancel a pending order"""
    return order_db.cancel_order(user_id, order_id)
