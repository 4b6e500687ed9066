from collections import namedtuple

from dateutil.parser import isoparse
from flask_wtf import FlaskForm
from markupsafe import escape
from wtforms import StringField, SelectField, DateField
from wtforms.validators import DataRequired, Optional as OptionalValidator

from .models import STATUS_CHOICES, DEFAULT_STATUS

FieldError = namedtuple('FieldError', ['param', 'msg'])


# --- Filters ---
def strip_value(value):
    if isinstance(value, str):
        return value.strip()
    return value


def escape_html(value):
    if isinstance(value, str) and value:
        return str(escape(value))
    return value


class IsoDateField(DateField):
    """Date field accepting any ISO-8601 date or datetime string."""

    def process_formdata(self, valuelist):
        if not valuelist:
            return
        raw = " ".join(valuelist).strip()
        if not raw:
            self.data = None
            return
        try:
            self.data = isoparse(raw).date()
        except (ValueError, OverflowError):
            self.data = None
            raise ValueError(self.gettext("Invalid date"))


# --- Forms ---
class BookInstanceForm(FlaskForm):
    book = StringField('Book', filters=[strip_value, escape_html],
                       validators=[DataRequired(message='Book must be specified')])
    imprint = StringField('Imprint', filters=[strip_value, escape_html],
                          validators=[DataRequired(message='Imprint must be specified')])
    status = SelectField('Status', choices=[(s, s) for s in STATUS_CHOICES], default=DEFAULT_STATUS,
                         filters=[strip_value, escape_html])
    due_back = IsoDateField('Date when book available', validators=[OptionalValidator()])

    def sanitized_fields(self):
        return {
            'book_id': self.book.data or None,
            'imprint': self.imprint.data,
            'status': self.status.data or DEFAULT_STATUS,
            'due_back': self.due_back.data,
        }

    def error_list(self):
        """Field errors in form order, skipping the csrf token field."""
        errors = []
        for field in self:
            if field.name == 'csrf_token':
                continue
            for message in field.errors:
                errors.append(FieldError(param=field.name, msg=message))
        return errors
