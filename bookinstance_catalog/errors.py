import logging

from flask import render_template
from werkzeug.exceptions import HTTPException, NotFound

from .models import db

logger = logging.getLogger(__name__)


class RecordNotFound(NotFound):
    """Lookup by identity found no record."""

    def __init__(self, message):
        super().__init__(description=message)
        self.message = message


def render_error(message, status):
    return render_template('error.html', title=f"Error {status}", message=message, status=status), status


def register_error_handlers(app):
    """Single reporting boundary for everything the handlers let through."""

    @app.errorhandler(HTTPException)
    def http_error(e):
        if e.code >= 500:
            logger.error("HTTP %s: %s", e.code, e.description)
        else:
            logger.info("HTTP %s: %s", e.code, e.description)
        return render_error(e.description, e.code)

    @app.errorhandler(Exception)
    def unhandled_error(e):
        logger.exception("Unhandled error while serving request")
        db.session.rollback()
        return render_error("Something went wrong while processing your request.", 500)
