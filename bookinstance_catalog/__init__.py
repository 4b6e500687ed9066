"""
Book instance catalog: Flask application serving the physical copies of books.

- HTML list / detail / create / update / delete screens for book instances
- Server-side validation and sanitization with Flask-WTF
- Persistence through an injectable store (Flask-SQLAlchemy by default)

Run:
    flask --app bookinstance_catalog init-db
    flask --app bookinstance_catalog run
"""
import logging
from datetime import date

from flask import Flask, redirect, url_for
from flask_talisman import Talisman
from flask_wtf import CSRFProtect

from .config import Config
from .errors import register_error_handlers
from .models import db, Book, BookInstance
from .store import SQLAlchemyStore
from .views import catalog

csrf = CSRFProtect()


def create_app(config=None, store=None):
    app = Flask(__name__, template_folder="templates")
    app.config.from_object(config or Config)

    logging.basicConfig(level=app.config['LOG_LEVEL'],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Security headers; the CDN-free templates only need 'self'
    Talisman(app, force_https=app.config['FORCE_HTTPS'],
             session_cookie_secure=app.config['FORCE_HTTPS'],
             content_security_policy={'default-src': ["'self'"], 'style-src': ["'self'", "'unsafe-inline'"]})

    db.init_app(app)
    csrf.init_app(app)
    app.extensions['catalog_store'] = store or SQLAlchemyStore(db)

    app.register_blueprint(catalog)
    register_error_handlers(app)

    @app.route('/')
    def home():
        return redirect(url_for('catalog.bookinstance_list'))

    register_cli(app)
    return app


def register_cli(app):
    @app.cli.command("init-db")
    def init_db():
        """Initialize the database and add sample data (for dev only)."""
        db.create_all()
        if Book.query.first():
            print("DB already initialized.")
            return
        b1 = Book(title="Pride and Prejudice", author="Jane Austen", isbn="9780141439518")
        b2 = Book(title="Adventures of Huckleberry Finn", author="Mark Twain", isbn="9780486280615")
        db.session.add_all([b1, b2])
        db.session.flush()
        db.session.add_all([
            BookInstance(book_id=b1.id, imprint="Penguin Classics, 2002", status="Available"),
            BookInstance(book_id=b1.id, imprint="Penguin Classics, 2002", status="Loaned",
                         due_back=date.today()),
            BookInstance(book_id=b2.id, imprint="Dover Thrift, 1994", status="Maintenance"),
        ])
        db.session.commit()
        print("Initialized DB with sample data.")
