"""
Orders management endpoints.

Provides CRUD operations for orders. Handlers stay thin: repository
errors are translated to HTTP responses by the handlers in `api.main`.
"""
from typing import Annotated, Optional
import logging

from fastapi import APIRouter, Depends, Path, Query, Response, status

from core.application.dtos import OrderDTO, OrderPageDTO
from core.data.mappers import MAX_ORDER_ID
from core.domain.repositories import FindAllPage, OrderRepository
from core.settings import AppSettings, get_app_settings
from api.dependencies import get_order_repository


logger = logging.getLogger(__name__)
router = APIRouter()

OrderId = Annotated[int, Path(ge=0, le=MAX_ORDER_ID, description="Order ID")]


# =============================================================================
# CREATE ORDER
# =============================================================================

@router.post(
    "",
    response_model=OrderDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create order",
)
async def create_order(
    request: OrderDTO,
    repository: OrderRepository = Depends(get_order_repository),
) -> OrderDTO:
    """
    Create a new order.

    **Returns:**
    - 201 with the stored order
    - 409 if an order with the same ID already exists
    """
    await repository.insert(request.to_domain())
    return request


# =============================================================================
# LIST ORDERS
# =============================================================================

@router.get(
    "",
    response_model=OrderPageDTO,
    status_code=status.HTTP_200_OK,
    summary="List orders",
)
async def list_orders(
    cursor: Optional[str] = Query(default=None, description="Cursor from the previous page"),
    size: Optional[int] = Query(default=None, ge=1, description="Maximum number of orders to return"),
    repository: OrderRepository = Depends(get_order_repository),
    settings: AppSettings = Depends(get_app_settings),
) -> OrderPageDTO:
    """
    List orders one page at a time.

    **Query Parameters:**
    - `cursor`: Cursor returned by the previous page (omit for the first page)
    - `size`: Page size hint (defaults to ORDERS_DEFAULT_PAGE_SIZE,
      capped at ORDERS_MAX_PAGE_SIZE)

    **Returns:**
    - Orders of this page plus the next cursor (`null` when done)
    """
    if size is None:
        size = settings.api.default_page_size
    size = min(size, settings.api.max_page_size)

    result = await repository.find_all(FindAllPage(size=size, cursor=cursor))
    return OrderPageDTO(
        orders=[OrderDTO.from_domain(order) for order in result.orders],
        cursor=result.cursor,
    )


# =============================================================================
# GET ORDER BY ID
# =============================================================================

@router.get(
    "/{order_id}",
    response_model=OrderDTO,
    status_code=status.HTTP_200_OK,
    summary="Get order by ID",
)
async def get_order(
    order_id: OrderId,
    repository: OrderRepository = Depends(get_order_repository),
) -> OrderDTO:
    order = await repository.find_by_id(order_id)
    return OrderDTO.from_domain(order)


# =============================================================================
# UPDATE ORDER
# =============================================================================

@router.put(
    "/{order_id}",
    response_model=OrderDTO,
    status_code=status.HTTP_200_OK,
    summary="Replace order",
)
async def update_order(
    request: OrderDTO,
    order_id: OrderId,
    repository: OrderRepository = Depends(get_order_repository),
) -> OrderDTO:
    """
    Replace an existing order with the request body.

    The ID in the path wins over any ID in the body.
    """
    order = request.model_copy(update={"order_id": order_id})
    await repository.update(order.to_domain())
    return order


# =============================================================================
# DELETE ORDER
# =============================================================================

@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete order",
)
async def delete_order(
    order_id: OrderId,
    repository: OrderRepository = Depends(get_order_repository),
) -> Response:
    await repository.delete_by_id(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
