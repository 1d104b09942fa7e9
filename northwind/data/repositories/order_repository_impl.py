"""
SQLAlchemy implementation of OrderRepository.

Every operation runs in its own UnitOfWork: reads open a session and
close it, writes commit exactly once or roll back.
"""
import logging
from typing import List, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm import selectinload

from northwind.domain.entities import Order
from northwind.domain.exceptions import InvalidArgumentError, OrderNotFoundError, RepositoryError
from northwind.domain.repositories import OrderRepository

from ..conversions import INT32_MAX, INT32_MIN
from ..mappers import OrderDetailMapper, OrderMapper
from ..models import OrderDetailModel, OrderModel, ProductModel
from ..uow import create_uow

logger = logging.getLogger(__name__)


def _order_view_options():
    """Eager-load shape shared by every read."""
    product = selectinload(OrderModel.details).selectinload(OrderDetailModel.product)
    return (
        selectinload(OrderModel.customer),
        selectinload(OrderModel.employee),
        selectinload(OrderModel.shipper),
        product.selectinload(ProductModel.category),
        product.selectinload(ProductModel.supplier),
    )


def _check_order_id(order_id) -> int:
    if isinstance(order_id, bool) or not isinstance(order_id, int):
        raise InvalidArgumentError(f"Order ID must be an integer, got: {order_id!r}")
    return order_id


def _storable_id(order_id: int) -> bool:
    """True if the identity fits the OrderID column; no row can hold any other."""
    return INT32_MIN <= order_id <= INT32_MAX


def _not_found(order_id) -> OrderNotFoundError:
    logger.warning(f"Order not found: {order_id}")
    return OrderNotFoundError(order_id)


def _check_paging(skip, count) -> Tuple[int, int]:
    """Validate paging and clamp it to what a 32-bit keyed table can hold."""
    for name, value in (("skip", skip), ("count", count)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(f"{name} must be an integer, got: {value!r}")
    if skip < 0:
        raise InvalidArgumentError(f"Skip cannot be negative, got: {skip}")
    if count <= 0:
        raise InvalidArgumentError(f"Count must be positive, got: {count}")
    return min(skip, INT32_MAX), min(count, INT32_MAX)


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        if session_factory is None:
            raise InvalidArgumentError("session_factory must not be None")
        self._session_factory = session_factory

    # =========================================================================
    # READS
    # =========================================================================

    async def get_orders(self, skip: int, count: int) -> List[Order]:
        """List orders in ascending identity order.

        Args:
            skip: Number of orders to skip (>= 0)
            count: Maximum number of orders to return (> 0)

        Returns:
            List of Order aggregates
        """
        skip, count = _check_paging(skip, count)

        logger.info(f"Getting orders: skip={skip}, count={count}")

        async with create_uow(self._session_factory) as uow:
            result = await uow.session.execute(
                select(OrderModel)
                .options(*_order_view_options())
                .order_by(OrderModel.order_id)
                .offset(skip)
                .limit(count)
            )
            orders = [OrderMapper.to_domain(model) for model in result.scalars().all()]

        logger.info(f"✅ Found {len(orders)} orders")
        return orders

    async def get_order(self, order_id: int) -> Order:
        """Retrieve order by identity.

        Args:
            order_id: Order identity

        Returns:
            Order aggregate
        """
        _check_order_id(order_id)
        logger.info(f"Getting order: {order_id}")

        if not _storable_id(order_id):
            raise _not_found(order_id)

        async with create_uow(self._session_factory) as uow:
            result = await uow.session.execute(
                select(OrderModel)
                .options(*_order_view_options())
                .where(OrderModel.order_id == order_id)
            )
            model = result.scalar_one_or_none()
            order = OrderMapper.to_domain(model) if model is not None else None

        if order is None:
            raise _not_found(order_id)

        return order

    async def exists(self, order_id: int) -> bool:
        """Check if an order exists.

        Args:
            order_id: Order identity

        Returns:
            True if exists, False otherwise
        """
        _check_order_id(order_id)
        if not _storable_id(order_id):
            return False

        async with create_uow(self._session_factory) as uow:
            result = await uow.session.execute(
                select(OrderModel.order_id).where(OrderModel.order_id == order_id)
            )
            return result.scalar_one_or_none() is not None

    async def count(self) -> int:
        """Count stored orders."""
        async with create_uow(self._session_factory) as uow:
            result = await uow.session.execute(select(func.count()).select_from(OrderModel))
            return result.scalar_one()

    # =========================================================================
    # WRITES
    # =========================================================================

    async def add_order(self, order: Order) -> int:
        """Persist a new order with its details in one commit.

        Args:
            order: Order aggregate without identity

        Returns:
            Store-assigned order identity
        """
        if order is None:
            raise InvalidArgumentError("Order must not be None")

        # Validation happens before a session is even opened
        order_model = OrderMapper.to_persistence(order)
        logger.info(
            f"Adding order for customer {order.customer.code} "
            f"with {len(order_model.details)} details"
        )

        try:
            async with create_uow(self._session_factory) as uow:
                uow.session.add(order_model)
                await uow.session.flush()
                order_id = order_model.order_id
                await uow.commit()
        except SQLAlchemyError as e:
            raise self._failure("Failed to add order to repository.", e) from e

        logger.info(f"✅ Added order: {order_id}")
        return order_id

    async def remove_order(self, order_id: int) -> None:
        """Delete an order and its details in one commit.

        Args:
            order_id: Order identity
        """
        _check_order_id(order_id)
        logger.info(f"Removing order: {order_id}")

        if not _storable_id(order_id):
            raise _not_found(order_id)

        try:
            async with create_uow(self._session_factory) as uow:
                model = await self._load_for_write(uow.session, order_id)
                await uow.session.delete(model)
                await uow.commit()
        except SQLAlchemyError as e:
            raise self._failure(f"Failed to remove order {order_id}.", e) from e

        logger.info(f"✅ Removed order: {order_id}")

    async def update_order(self, order: Order) -> None:
        """Overwrite an order and replace all of its details in one commit.

        Args:
            order: Order aggregate carrying an existing identity
        """
        if order is None:
            raise InvalidArgumentError("Order must not be None")
        if order.id is None:
            raise InvalidArgumentError("Order to update must have an ID")
        order_id = _check_order_id(order.id)

        logger.info(f"Updating order: {order_id}")

        if not _storable_id(order_id):
            raise _not_found(order_id)

        try:
            async with create_uow(self._session_factory) as uow:
                existing = await self._load_for_write(uow.session, order_id)

                # Convert everything before touching the loaded rows
                details = OrderDetailMapper.to_persistence_all(order.order_details)
                columns = OrderMapper.to_columns(order)

                # Replace-all: old rows are deleted before new ones are inserted
                existing.details.clear()
                await uow.session.flush()

                OrderMapper.update_persistence(existing, columns, details)
                await uow.commit()
        except SQLAlchemyError as e:
            raise self._failure(f"Failed to update order {order_id}.", e) from e

        logger.info(f"✅ Updated order: {order_id} ({len(order.order_details)} details)")

    # =========================================================================
    # PRIVATE METHODS
    # =========================================================================

    async def _load_for_write(self, session: AsyncSession, order_id: int) -> OrderModel:
        """Load an order with its details or raise OrderNotFoundError."""
        result = await session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.details))
            .where(OrderModel.order_id == order_id)
        )
        model = result.scalar_one_or_none()

        if model is None:
            raise _not_found(order_id)

        return model

    @staticmethod
    def _failure(message: str, error: SQLAlchemyError) -> RepositoryError:
        logger.error(f"❌ {message} {type(error).__name__}: {error}")
        return RepositoryError(message, cause=error)
