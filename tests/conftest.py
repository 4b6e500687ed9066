import pytest
from sqlalchemy.exc import OperationalError

from bookinstance_catalog import create_app
from bookinstance_catalog.config import TestConfig
from bookinstance_catalog.models import db, new_id, Book, BookInstance


class MemoryStore:
    """In-memory CatalogStore used in place of the database."""

    def __init__(self, books=()):
        self.books = {b.id: b for b in books}
        self.instances = {}
        self.calls = []

    def _record(self, name):
        self.calls.append(name)

    def _resolve(self, instance):
        instance.book = self.books.get(instance.book_id)
        return instance

    def find_instances(self, populate=True):
        self._record('find_instances')
        return [self._resolve(i) if populate else i for i in self.instances.values()]

    def find_instance(self, instance_id, populate=False):
        self._record('find_instance')
        instance = self.instances.get(instance_id)
        if instance is not None and populate:
            self._resolve(instance)
        return instance

    def save_instance(self, instance):
        self._record('save_instance')
        instance.id = instance.id or new_id()
        self.instances[instance.id] = instance
        return instance

    def update_instance(self, instance_id, fields):
        self._record('update_instance')
        instance = self.instances.get(instance_id)
        if instance is None:
            return None
        for name, value in fields.items():
            setattr(instance, name, value)
        return instance

    def delete_instance(self, instance_id):
        self._record('delete_instance')
        return self.instances.pop(instance_id, None) is not None

    def find_books(self):
        self._record('find_books')
        return sorted(self.books.values(), key=lambda b: b.title)


class FailingStore(MemoryStore):
    """MemoryStore whose chosen operations fail like a lost database connection."""

    def __init__(self, books=(), fail_on=()):
        super().__init__(books)
        self.fail_on = set(fail_on)

    def _record(self, name):
        super()._record(name)
        if name in self.fail_on:
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def books(app):
    """Two seeded books, returned as {title: id}."""
    with app.app_context():
        dune = Book(title="Dune", author="Frank Herbert")
        emma = Book(title="Emma", author="Jane Austen")
        db.session.add_all([dune, emma])
        db.session.commit()
        return {"Dune": dune.id, "Emma": emma.id}


@pytest.fixture
def instance_id(app, books):
    with app.app_context():
        instance = BookInstance(book_id=books["Dune"], imprint="Ace Books, 1990", status="Available")
        db.session.add(instance)
        db.session.commit()
        return instance.id


def load_instance(app, instance_id):
    """Column values of a stored instance, or None when absent."""
    with app.app_context():
        instance = db.session.get(BookInstance, instance_id)
        if instance is None:
            return None
        return {
            "id": instance.id,
            "book_id": instance.book_id,
            "imprint": instance.imprint,
            "status": instance.status,
            "due_back": instance.due_back,
        }


def all_instances(app):
    with app.app_context():
        ids = [i.id for i in BookInstance.query.all()]
    return [load_instance(app, i) for i in ids]
