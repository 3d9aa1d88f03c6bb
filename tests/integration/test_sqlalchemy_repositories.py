"""Integration tests for the SQLAlchemy repositories and UnitOfWork."""

from decimal import Decimal

import pytest
from sqlalchemy import func, select

from ecommerce.application.dtos.order_dto import CreateOrderRequest, OrderItemRequest
from ecommerce.application.services.order_service import OrderApplicationService
from ecommerce.application.use_cases.create_order import CreateOrderUseCase
from ecommerce.data.models import OrderItemModel, OrderModel
from ecommerce.domain.entities.customer import Customer
from ecommerce.domain.entities.order import Order, OrderItem
from ecommerce.domain.entities.product import Product
from ecommerce.domain.enums import OrderStatus
from ecommerce.domain.exceptions import ProductNotFoundError
from ecommerce.domain.value_objects import Email, Money, OrderId, ProductId
from ecommerce.infrastructure.event_bus import InMemoryEventBus


async def _seed(uow):
    customer = Customer.create(name="Ada Lovelace", email=Email("ada@example.com"))
    p1 = Product.create(name="Notebook", price=Money(Decimal("9.99"), "USD"))
    p2 = Product.create(name="Pencil", price=Money(Decimal("3.50"), "USD"))
    async with uow:
        await uow.customers.save(customer)
        await uow.products.save(p1)
        await uow.products.save(p2)
        await uow.commit()
    return customer, p1, p2


@pytest.mark.asyncio
async def test_customer_and_product_round_trip(sql_uow):
    customer, p1, _ = await _seed(sql_uow)

    async with sql_uow:
        loaded_customer = await sql_uow.customers.find_by_id(customer.id)
        loaded_product = await sql_uow.products.find_by_id(p1.id)

    assert loaded_customer.email == Email("ada@example.com")
    assert loaded_product.price == Money(Decimal("9.99"), "USD")


@pytest.mark.asyncio
async def test_order_round_trip_preserves_items(sql_uow):
    customer, p1, p2 = await _seed(sql_uow)
    order = Order.create(customer_id=customer.id)
    order.add_item(OrderItem.create(product_id=p1.id, quantity=2, unit_price=Decimal("9.99")))
    order.add_item(OrderItem.create(product_id=p2.id, quantity=1, unit_price=Decimal("3.50")))

    async with sql_uow:
        await sql_uow.orders.save(order)
        await sql_uow.commit()

    async with sql_uow:
        loaded = await sql_uow.orders.find_by_id(order.id)
        assert await sql_uow.orders.exists(order.id)

    assert loaded == order
    assert loaded.status is OrderStatus.PENDING
    assert loaded.customer_id == customer.id
    assert [(i.product_id, i.quantity, i.unit_price) for i in loaded.items] == [
        (p1.id, 2, Decimal("9.99")),
        (p2.id, 1, Decimal("3.50")),
    ]
    # Loading never replays creation events
    assert loaded.get_domain_events() == []


@pytest.mark.asyncio
async def test_resave_order_updates_items(sql_uow):
    customer, p1, p2 = await _seed(sql_uow)
    order = Order.create(customer_id=customer.id)
    order.add_item(OrderItem.create(product_id=p1.id, quantity=1, unit_price=Decimal("9.99")))
    async with sql_uow:
        await sql_uow.orders.save(order)
        await sql_uow.commit()

    order.add_item(OrderItem.create(product_id=p2.id, quantity=5, unit_price=Decimal("3.50")))
    async with sql_uow:
        await sql_uow.orders.save(order)
        await sql_uow.commit()

    async with sql_uow:
        loaded = await sql_uow.orders.find_by_id(order.id)
    assert [i.quantity for i in loaded.items] == [1, 5]


@pytest.mark.asyncio
async def test_uncommitted_order_is_rolled_back(sql_uow):
    customer, _, _ = await _seed(sql_uow)
    order = Order.create(customer_id=customer.id)

    async with sql_uow:
        await sql_uow.orders.save(order)

    async with sql_uow:
        assert await sql_uow.orders.find_by_id(order.id) is None
        assert not await sql_uow.orders.exists(order.id)


@pytest.mark.asyncio
async def test_exception_rolls_back(sql_uow):
    customer, _, _ = await _seed(sql_uow)
    order = Order.create(customer_id=customer.id)

    with pytest.raises(RuntimeError):
        async with sql_uow:
            await sql_uow.orders.save(order)
            raise RuntimeError("boom")

    async with sql_uow:
        assert await sql_uow.orders.find_by_id(order.id) is None


@pytest.mark.asyncio
async def test_unknown_ids_return_none(sql_uow):
    async with sql_uow:
        assert await sql_uow.orders.find_by_id(OrderId.generate()) is None
        assert await sql_uow.products.find_by_id(ProductId.generate()) is None


@pytest.mark.asyncio
async def test_create_order_use_case_on_database(sql_uow):
    customer, p1, p2 = await _seed(sql_uow)
    bus = InMemoryEventBus()
    events = []
    bus.subscribe(events.append)
    use_case = CreateOrderUseCase(uow=sql_uow, event_publisher=bus)

    order_id = await use_case.execute(
        CreateOrderRequest(
            customer_id=customer.id.value,
            items=[
                OrderItemRequest(product_id=p1.id.value, quantity=2),
                OrderItemRequest(product_id=p2.id.value, quantity=1),
            ],
        )
    )

    async with sql_uow:
        order = await sql_uow.orders.find_by_id(order_id)
    assert len(order.items) == 2
    assert len(events) == 1


@pytest.mark.asyncio
async def test_missing_product_writes_nothing_to_database(sql_uow, test_session_factory):
    customer, p1, _ = await _seed(sql_uow)
    use_case = CreateOrderUseCase(uow=sql_uow, event_publisher=InMemoryEventBus())
    missing = ProductId.generate()

    with pytest.raises(ProductNotFoundError):
        await use_case.execute(
            CreateOrderRequest(
                customer_id=customer.id.value,
                items=[
                    OrderItemRequest(product_id=p1.id.value, quantity=1),
                    OrderItemRequest(product_id=missing.value, quantity=1),
                ],
            )
        )

    async with test_session_factory() as session:
        assert await session.scalar(select(func.count()).select_from(OrderModel)) == 0
        assert await session.scalar(select(func.count()).select_from(OrderItemModel)) == 0


@pytest.mark.parametrize("price", ["9.999", "0.0001", "123456789012.345678", "3.50"])
@pytest.mark.asyncio
async def test_prices_keep_their_exact_scale(sql_uow, price):
    customer, _, _ = await _seed(sql_uow)
    product = Product.create(name="Gadget", price=Money(Decimal(price), "USD"))
    async with sql_uow:
        await sql_uow.products.save(product)
        await sql_uow.commit()

    async with sql_uow:
        loaded = await sql_uow.products.find_by_id(product.id)
    assert loaded.price.amount == Decimal(price)

    order_id = await CreateOrderUseCase(uow=sql_uow, event_publisher=InMemoryEventBus()).execute(
        CreateOrderRequest(
            customer_id=customer.id.value,
            items=[OrderItemRequest(product_id=product.id.value, quantity=1)],
        )
    )

    dto = await OrderApplicationService(sql_uow).get_order(order_id)
    assert dto.items[0].unit_price == Decimal(price)
    assert str(dto.items[0].unit_price) == price
