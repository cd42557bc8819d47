from typing import Generic, TypeVar
from sqlalchemy.orm import Session

TModel = TypeVar("TModel")

class BaseRepository(Generic[TModel]):
    model: type

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, entity_id: int) -> TModel | None:
        return self._session.get(self.model, entity_id)

    def add(self, model: TModel) -> TModel:
        self._session.add(model)
        self._session.flush()
        return model

    def delete(self, model: TModel) -> None:
        self._session.delete(model)
        self._session.flush()
