import uuid

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

STATUS_CHOICES = ['Available', 'Maintenance', 'Loaned', 'Reserved']
DEFAULT_STATUS = 'Maintenance'


def new_id():
    return uuid.uuid4().hex


class Book(db.Model):
    __tablename__ = 'books'
    id = db.Column(db.String(32), primary_key=True, default=new_id)
    title = db.Column(db.String(250), nullable=False, index=True)
    author = db.Column(db.String(150))
    summary = db.Column(db.Text)
    isbn = db.Column(db.String(20))

    instances = db.relationship('BookInstance', back_populates='book')


class BookInstance(db.Model):
    """A physical copy of a Book that can be lent out."""
    __tablename__ = 'bookinstances'
    id = db.Column(db.String(32), primary_key=True, default=new_id)
    book_id = db.Column(db.String(32), db.ForeignKey('books.id'), nullable=False, index=True)
    imprint = db.Column(db.String(250), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=DEFAULT_STATUS)
    due_back = db.Column(db.Date)

    book = db.relationship('Book', back_populates='instances')

    @property
    def url(self):
        # Derived from the id, never stored
        return f"/catalog/bookinstance/{self.id}"

    @property
    def due_back_formatted(self):
        if not self.due_back:
            return ""
        return self.due_back.strftime("%b %d, %Y")
