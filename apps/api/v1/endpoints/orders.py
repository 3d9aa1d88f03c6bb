"""Order endpoints for REST API."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ecommerce.application.dtos.order_dto import (
    CreateOrderRequest,
    CreateOrderResponse,
    OrderDTO,
)
from ecommerce.application.services.order_service import OrderApplicationService
from ecommerce.application.use_cases.create_order import CreateOrderUseCase
from ecommerce.domain.value_objects import OrderId

from apps.api.deps import get_create_order_use_case, get_order_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=CreateOrderResponse, status_code=201)
async def create_order(
    request: CreateOrderRequest,
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
) -> CreateOrderResponse:
    """Place a new order.

    Validates the customer and every product, captures current prices
    and returns the new order id. Missing customer or product → 404
    (handled by the app-level exception handler).

    Args:
        request: CreateOrderRequest DTO
        use_case: CreateOrderUseCase instance

    Returns:
        CreateOrderResponse with the order id
    """
    order_id = await use_case.execute(request)
    return CreateOrderResponse(id=order_id.value)


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Get order by ID.

    Args:
        order_id: Order ID string
        service: OrderApplicationService instance

    Returns:
        OrderDTO with order details

    Raises:
        HTTPException: If order not found
    """
    try:
        parsed_id = OrderId.from_string(order_id)
    except ValueError:
        # Invalid order ID format - treat as not found (404 instead of 400)
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")

    order = await service.get_order(parsed_id)
    if not order:
        raise HTTPException(status_code=404, detail=f"Order {order_id} not found")
    return order
