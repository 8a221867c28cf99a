import logging
from typing import Generic, List, Optional, Type, TypeVar
from supabase import AsyncClient
from pizza_api.schemas import PizzaOrder, Record

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)

# ========================================================================
# DAL
# ========================================================================

class Repository(Generic[T]):
    """Thin passthrough to one supabase table, one remote call per method.

    Subclasses set ``model`` to the record class; the table and primary key
    column are read from it.
    """
    model: Type[T]

    def __init__(self, client: AsyncClient):
        self.client = client

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    @property
    def primary_key(self) -> str:
        return self.model.__primary_key__

    def _table(self):
        return self.client.table(self.table_name)

    def _to_models(self, rows) -> List[T]:
        return [self.model.model_validate(row) for row in rows]

    async def list_all(self) -> List[T]:
        logger.debug("select * from %s", self.table_name)
        try:
            response = await self._table().select("*").execute()
        except Exception as e:
            raise Exception(f"Could not list {self.table_name}, Error: {str(e)}") from e
        return self._to_models(response.data)

    async def get_by_id(self, id: int) -> Optional[T]:
        logger.debug("select from %s where %s = %s", self.table_name, self.primary_key, id)
        try:
            response = await self._table().select("*").eq(self.primary_key, id).execute()
        except Exception as e:
            raise Exception(f"Could not get {self.table_name} {id}, Error: {str(e)}") from e
        models = self._to_models(response.data)
        return models[0] if models else None

    async def insert_many(self, records: List[T]) -> List[T]:
        # primary key is assigned by the store
        rows = [record.model_dump(exclude={self.primary_key}) for record in records]
        logger.debug("insert %d rows into %s", len(rows), self.table_name)
        try:
            response = await self._table().insert(rows).execute()
        except Exception as e:
            raise Exception(f"Could not insert into {self.table_name}, Error: {str(e)}") from e
        return self._to_models(response.data)

    async def update_by_id(self, record: T) -> None:
        id = getattr(record, self.primary_key)
        values = record.model_dump(exclude={self.primary_key})
        logger.debug("update %s where %s = %s", self.table_name, self.primary_key, id)
        try:
            await self._table().update(values).eq(self.primary_key, id).execute()
        except Exception as e:
            raise Exception(f"Could not update {self.table_name} {id}, Error: {str(e)}") from e

    async def delete_by_id(self, id: int) -> None:
        logger.debug("delete from %s where %s = %s", self.table_name, self.primary_key, id)
        try:
            await self._table().delete().eq(self.primary_key, id).execute()
        except Exception as e:
            raise Exception(f"Could not delete {self.table_name} {id}, Error: {str(e)}") from e


class PizzaOrderRepository(Repository[PizzaOrder]):
    model = PizzaOrder
