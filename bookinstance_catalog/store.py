import logging
from typing import Any, Dict, List, Optional, Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload, load_only

from .models import db, Book, BookInstance

logger = logging.getLogger(__name__)


class CatalogStore(Protocol):
    """Document operations the book instance handlers depend on."""

    def find_instances(self, populate: bool = True) -> List[BookInstance]: ...

    def find_instance(self, instance_id: str, populate: bool = False) -> Optional[BookInstance]: ...

    def save_instance(self, instance: BookInstance) -> BookInstance: ...

    def update_instance(self, instance_id: str, fields: Dict[str, Any]) -> Optional[BookInstance]: ...

    def delete_instance(self, instance_id: str) -> bool: ...

    def find_books(self) -> List[Book]: ...


class SQLAlchemyStore:
    """CatalogStore backed by the Flask-SQLAlchemy session."""

    def __init__(self, database=db):
        self.db = database

    @property
    def session(self):
        return self.db.session

    def find_instances(self, populate=True):
        query = select(BookInstance)
        if populate:
            query = query.options(joinedload(BookInstance.book))
        return list(self.session.execute(query).scalars().unique())

    def find_instance(self, instance_id, populate=False):
        options = [joinedload(BookInstance.book)] if populate else []
        return self.session.get(BookInstance, instance_id, options=options)

    def save_instance(self, instance):
        self.session.add(instance)
        self._commit()
        logger.debug("Saved book instance %s", instance.id)
        return instance

    def update_instance(self, instance_id, fields):
        instance = self.session.get(BookInstance, instance_id)
        if instance is None:
            return None
        for name, value in fields.items():
            setattr(instance, name, value)
        self._commit()
        logger.debug("Updated book instance %s", instance_id)
        return instance

    def delete_instance(self, instance_id):
        instance = self.session.get(BookInstance, instance_id)
        if instance is None:
            return False
        self.session.delete(instance)
        self._commit()
        logger.debug("Deleted book instance %s", instance_id)
        return True

    def find_books(self):
        query = select(Book).options(load_only(Book.id, Book.title)).order_by(Book.title)
        return list(self.session.execute(query).scalars())

    def _commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
