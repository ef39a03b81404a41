# File: app/repositories/label.py

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.label import Label
from app.repositories.errors import DuplicateError, NotFoundError, UnexpectedError
from app.schemas.label import LabelRead

logger = logging.getLogger(__name__)


class LabelRepository(ABC):
    @abstractmethod
    def create(self, name: str) -> LabelRead:
        ...

    @abstractmethod
    def all(self) -> List[LabelRead]:
        ...

    @abstractmethod
    def delete(self, id: int) -> None:
        ...


class SqlLabelRepository(LabelRepository):
    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action: str, exc: SQLAlchemyError) -> UnexpectedError:
        self.db.rollback()
        logger.error("label %s failed: %s", action, exc)
        return UnexpectedError(str(exc))

    def _find_by_name(self, name: str) -> Optional[Label]:
        return self.db.scalars(select(Label).where(Label.name == name)).first()

    def create(self, name: str) -> LabelRead:
        try:
            existing = self._find_by_name(name)
            if existing is not None:
                raise DuplicateError(existing.id)

            row = Label(name=name)
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except IntegrityError as e:
            # another writer inserted the same name after our lookup
            self.db.rollback()
            existing = self._find_by_name(name)
            if existing is None:
                raise self._fail("create", e) from e
            raise DuplicateError(existing.id) from e
        except SQLAlchemyError as e:
            raise self._fail("create", e) from e
        return LabelRead.model_validate(row)

    def all(self) -> List[LabelRead]:
        try:
            rows = self.db.scalars(select(Label).order_by(Label.id)).all()
        except SQLAlchemyError as e:
            raise self._fail("all", e) from e
        return [LabelRead.model_validate(row) for row in rows]

    def delete(self, id: int) -> None:
        try:
            result = self.db.execute(delete(Label).where(Label.id == id))
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete", e) from e
        if result.rowcount == 0:
            raise NotFoundError(id)


class InMemoryLabelRepository(LabelRepository):
    def __init__(self):
        self._store: Dict[int, LabelRead] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def create(self, name: str) -> LabelRead:
        with self._lock:
            for label in self._store.values():
                if label.name == name:
                    raise DuplicateError(label.id)
            label = LabelRead(id=self._next_id, name=name)
            self._store[label.id] = label
            self._next_id += 1
            return label

    def all(self) -> List[LabelRead]:
        with self._lock:
            return [self._store[key] for key in sorted(self._store)]

    def delete(self, id: int) -> None:
        with self._lock:
            if self._store.pop(id, None) is None:
                raise NotFoundError(id)
