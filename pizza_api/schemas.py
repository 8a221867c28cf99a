from typing import ClassVar, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ========================================================================
# RECORDS
# ========================================================================

class Record(BaseModel):
    """Base for models stored as rows of a supabase table."""
    __tablename__: ClassVar[str]
    __primary_key__: ClassVar[str] = "id"

    model_config = ConfigDict(extra="ignore")


class PizzaOrder(Record):
    __tablename__ = "pizza_orders"

    id: Optional[int] = Field(None, description="Store assigned order id")
    customer_name: str = Field(..., description="The name of the customer")
    pizza_type: str = Field(..., description="The type of the pizza")
    quantity: int = Field(..., description="The quantity of the pizza in the order")
    status: str = Field(..., description="Free form order status")

# ========================================================================
# DTOS
# ========================================================================

class CreatePizzaOrderDto(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    customer_name: str = Field(..., description="The name of the customer")
    pizza_type: str = Field(..., description="The type of the pizza")
    quantity: int = Field(..., description="The quantity of the pizza in the order")
    status: str = Field(..., description="Free form order status")


class PizzaOrderDto(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(..., description="Store assigned order id")
    customer_name: str = Field(..., description="The name of the customer")
    pizza_type: str = Field(..., description="The type of the pizza")
    quantity: int = Field(..., description="The quantity of the pizza in the order")
    status: str = Field(..., description="Free form order status")
