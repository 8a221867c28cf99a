from typing import Optional
from pizza_api.schemas import CreatePizzaOrderDto, PizzaOrder, PizzaOrderDto


def to_dto(order: PizzaOrder) -> PizzaOrderDto:
    return PizzaOrderDto(
        id=order.id,
        customer_name=order.customer_name,
        pizza_type=order.pizza_type,
        quantity=order.quantity,
        status=order.status,
    )


def to_record(dto: PizzaOrderDto) -> PizzaOrder:
    return PizzaOrder(
        id=dto.id,
        customer_name=dto.customer_name,
        pizza_type=dto.pizza_type,
        quantity=dto.quantity,
        status=dto.status,
    )


def from_create_dto(dto: CreatePizzaOrderDto, order_id: Optional[int] = None) -> PizzaOrder:
    # identity comes from the store on insert, from the path on update
    return PizzaOrder(
        id=order_id,
        customer_name=dto.customer_name,
        pizza_type=dto.pizza_type,
        quantity=dto.quantity,
        status=dto.status,
    )
