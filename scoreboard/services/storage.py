"""Storage boundary over SQLModel sessions.

Services never touch the session directly; they go through :class:`Store`,
which turns every SQLAlchemy failure into :class:`StorageError` after
rolling the session back.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, SQLModel, select

from ..core.errors import StorageError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=SQLModel)


class DuplicateRecordError(StorageError):
    """A write violated a uniqueness constraint."""


class Store:
    """Thin find/insert/update/delete facade bound to one session."""

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        try:
            yield
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning("Constraint violated while trying to %s: %s", action, exc.orig)
            raise DuplicateRecordError(f"Failed to {action}.") from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error("Storage failure while trying to %s", action, exc_info=True)
            raise StorageError(f"Failed to {action}.") from exc

    def _where(self, model: Type[ModelT], filters: dict[str, Any]) -> list:
        return [getattr(model, field) == value for field, value in filters.items()]

    def find(
        self,
        model: Type[ModelT],
        *,
        order_by: Sequence[Any] = (),
        limit: Optional[int] = None,
        exclude_id: Optional[int] = None,
        **filters: Any,
    ) -> List[ModelT]:
        statement = select(model).where(*self._where(model, filters))
        if exclude_id is not None:
            statement = statement.where(model.id != exclude_id)
        if order_by:
            statement = statement.order_by(*order_by)
        if limit is not None:
            statement = statement.limit(limit)
        with self._guard(f"read {model.__name__} records"):
            return list(self.session.exec(statement).all())

    def find_in(
        self, model: Type[ModelT], column: str, values: Iterable[Any]
    ) -> List[ModelT]:
        values = list(values)
        if not values:
            return []
        statement = select(model).where(getattr(model, column).in_(values))
        with self._guard(f"read {model.__name__} records"):
            return list(self.session.exec(statement).all())

    def find_one(self, model: Type[ModelT], **filters: Any) -> Optional[ModelT]:
        """Return the first match, or ``None`` when nothing matches."""

        statement = select(model).where(*self._where(model, filters))
        with self._guard(f"read {model.__name__} record"):
            return self.session.exec(statement).first()

    def stage(self, record: ModelT) -> ModelT:
        """Add ``record`` to the pending transaction and assign its id."""

        with self._guard(f"write {type(record).__name__} record"):
            self.session.add(record)
            self.session.flush()
        return record

    def insert(self, record: ModelT) -> ModelT:
        self.stage(record)
        self.commit()
        with self._guard(f"reload {type(record).__name__} record"):
            self.session.refresh(record)
        return record

    def update(self, record: ModelT, **patch: Any) -> ModelT:
        for field, value in patch.items():
            setattr(record, field, value)
        return self.insert(record)

    def delete(self, model: Type[ModelT], **filters: Any) -> int:
        """Delete matching rows inside the pending transaction; returns the row count."""

        records = self.find(model, **filters)
        with self._guard(f"delete {model.__name__} records"):
            for record in records:
                self.session.delete(record)
            self.session.flush()
        return len(records)

    def detach(self, records: Iterable[SQLModel]) -> None:
        """Stop tracking records so a later rollback cannot expire their loaded values."""

        for record in records:
            self.session.expunge(record)

    def commit(self) -> None:
        with self._guard("commit transaction"):
            self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


__all__ = ["DuplicateRecordError", "Store"]
