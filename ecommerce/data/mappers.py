"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal
from uuid import UUID

from ecommerce.domain.entities.customer import Customer
from ecommerce.domain.entities.order import Order, OrderItem
from ecommerce.domain.entities.product import Product
from ecommerce.domain.enums import OrderStatus
from ecommerce.domain.value_objects import (
    CustomerId,
    Email,
    Money,
    OrderId,
    ProductId,
)

from .models.customer_model import CustomerModel
from .models.order_model import OrderItemModel, OrderModel
from .models.product_model import ProductModel


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            id=UUID(model.id),
            product_id=ProductId(value=UUID(model.product_id)),
            quantity=model.quantity,
            unit_price=Decimal(str(model.price)),
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str, position: int) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity
            order_id: Order ID string
            position: Index of the item within its order

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            id=str(entity.id),
            order_id=order_id,
            position=position,
            product_id=str(entity.product_id),
            quantity=entity.quantity,
            price=entity.unit_price,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        Uses Order.rehydrate, so no creation event is recorded.

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        items = [OrderItemMapper.to_domain(item_model) for item_model in model.items]

        return Order.rehydrate(
            id=OrderId(value=UUID(model.id)),
            customer_id=CustomerId(value=UUID(model.customer_id)),
            status=OrderStatus(model.status),
            items=items,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_id = str(entity.id)
        order_model = OrderModel(
            id=order_id,
            customer_id=str(entity.customer_id),
            status=entity.status.value,
        )

        order_model.items = [
            OrderItemMapper.to_persistence(item, order_id, position)
            for position, item in enumerate(entity.items)
        ]

        return order_model

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Update existing ORM model from domain entity (for updates).

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance

        Returns:
            Updated OrderModel instance
        """
        model.customer_id = str(entity.customer_id)
        model.status = entity.status.value

        # Reuse rows by item id; rows not in the aggregate are orphaned
        existing = {item_model.id: item_model for item_model in model.items}
        items = []
        for position, item in enumerate(entity.items):
            item_model = existing.get(str(item.id))
            if item_model is None:
                item_model = OrderItemMapper.to_persistence(item, model.id, position)
            else:
                item_model.position = position
                item_model.product_id = str(item.product_id)
                item_model.quantity = item.quantity
                item_model.price = item.unit_price
            items.append(item_model)
        model.items = items

        return model


class CustomerMapper:
    """Static mapper for Customer ↔ CustomerModel transformation."""

    @staticmethod
    def to_domain(model: CustomerModel) -> Customer:
        return Customer(
            id=CustomerId(value=UUID(model.id)),
            name=model.name,
            email=Email(model.email),
        )

    @staticmethod
    def to_persistence(entity: Customer) -> CustomerModel:
        return CustomerModel(
            id=str(entity.id),
            name=entity.name,
            email=entity.email.address,
        )


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(
            id=ProductId(value=UUID(model.id)),
            name=model.name,
            price=Money(
                amount=Decimal(str(model.price)),
                currency=model.currency,
            ),
        )

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        return ProductModel(
            id=str(entity.id),
            name=entity.name,
            price=entity.price.amount,
            currency=entity.price.currency,
        )
