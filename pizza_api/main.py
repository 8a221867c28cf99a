import logging
import os
from contextlib import asynccontextmanager
from typing import List
from fastapi import Depends, FastAPI, Request, Response, status
from pizza_api.mapping import from_create_dto, to_dto
from pizza_api.repository import PizzaOrderRepository
from pizza_api.schemas import CreatePizzaOrderDto, PizzaOrderDto
from pizza_api.supabase_handler import SupabaseManager

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# ========================================================================
# DEPENDENCIES
# ========================================================================

def get_pizza_order_repository(request: Request):
    return request.app.state.pizza_order_repository

# ========================================================================
# APP
# ========================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.supabase_manager = SupabaseManager()
    await app.state.supabase_manager.initialize()
    app.state.client = app.state.supabase_manager.get_client()
    app.state.pizza_order_repository = PizzaOrderRepository(app.state.client)
    yield
    logger.info("Shutting down pizza order api")

app = FastAPI(lifespan=lifespan)

# ========================================================================
# ROUTES
# ========================================================================

@app.get("/api/pizzaorder", response_model=List[PizzaOrderDto])
async def list_orders(repository: PizzaOrderRepository = Depends(get_pizza_order_repository)):
    orders = await repository.list_all()
    logger.info("Listed %d pizza orders", len(orders))
    return [to_dto(order) for order in orders]


@app.get("/api/pizzaorder/{order_id}", response_model=PizzaOrderDto)
async def get_order(
    order_id: int,
    repository: PizzaOrderRepository = Depends(get_pizza_order_repository)
):
    order = await repository.get_by_id(order_id)
    if order is None:
        logger.info("Pizza order %s not found", order_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return to_dto(order)


@app.post("/api/pizzaorder", response_model=List[PizzaOrderDto], status_code=status.HTTP_201_CREATED)
async def create_orders(
    order_dtos: List[CreatePizzaOrderDto],
    request: Request,
    response: Response,
    repository: PizzaOrderRepository = Depends(get_pizza_order_repository)
):
    # convert dtos to records, ids are assigned by supabase
    orders = [from_create_dto(dto) for dto in order_dtos]
    inserted_orders = await repository.insert_many(orders)
    logger.info("Inserted %d pizza orders", len(inserted_orders))

    response.headers["Location"] = str(request.url_for("list_orders"))
    return [to_dto(order) for order in inserted_orders]


@app.put("/api/pizzaorder/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_order(
    order_id: int,
    order_dto: CreatePizzaOrderDto,
    repository: PizzaOrderRepository = Depends(get_pizza_order_repository)
):
    await repository.update_by_id(from_create_dto(order_dto, order_id))
    logger.info("Updated pizza order %s", order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@app.delete("/api/pizzaorder/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_order(
    order_id: int,
    repository: PizzaOrderRepository = Depends(get_pizza_order_repository)
):
    await repository.delete_by_id(order_id)
    logger.info("Deleted pizza order %s", order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
