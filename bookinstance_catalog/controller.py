import logging

from flask import render_template, redirect, request

from .errors import RecordNotFound
from .forms import BookInstanceForm
from .models import BookInstance

logger = logging.getLogger(__name__)

LIST_URL = '/catalog/bookinstances'


def fetch_all(**lookups):
    """Run independent lookups and join their results by name.

    The first lookup to raise aborts the join; there are no partial results.
    """
    return {name: lookup() for name, lookup in lookups.items()}


class BookInstanceController:
    """Request handlers for the book instance resource."""

    def __init__(self, store):
        self.store = store

    # --- Read ---
    def bookinstance_list(self):
        instances = self.store.find_instances(populate=True)
        return render_template('bookinstance_list.html', title='Book Instance List',
                               bookinstance_list=instances)

    def bookinstance_detail(self, instance_id):
        instance = self.store.find_instance(instance_id, populate=True)
        # A copy whose book is gone cannot be shown either
        if instance is None or instance.book is None:
            raise RecordNotFound('Book copy not found')
        return render_template('bookinstance_detail.html', title=f"Copy: {instance.book.title}",
                               bookinstance=instance)

    # --- Create ---
    def bookinstance_create_get(self):
        books = self.store.find_books()
        return render_template('bookinstance_form.html', title='Create BookInstance', book_list=books,
                               form=BookInstanceForm(formdata=None))

    def bookinstance_create_post(self):
        form = BookInstanceForm()
        valid = form.validate()
        candidate = BookInstance(**form.sanitized_fields())

        if not valid:
            return self._render_invalid(form, candidate, 'Create BookInstance')

        self.store.save_instance(candidate)
        logger.info("Created book instance %s for book %s", candidate.id, candidate.book_id)
        return redirect(candidate.url)

    # --- Delete ---
    def bookinstance_delete_get(self, instance_id):
        instance = self.store.find_instance(instance_id)
        if instance is None:
            raise RecordNotFound('Book copy not found')
        return render_template('bookinstance_delete.html', title='Delete BookInstance', bookinstance=instance)

    def bookinstance_delete_post(self):
        instance_id = (request.form.get('bookinstanceid') or '').strip()
        # Deleting a copy that does not exist is a no-op
        if self.store.delete_instance(instance_id):
            logger.info("Deleted book instance %s", instance_id)
        else:
            logger.info("Book instance %r already absent, nothing to delete", instance_id)
        return redirect(LIST_URL)

    # --- Update ---
    def bookinstance_update_get(self, instance_id):
        results = fetch_all(
            bookinstance=lambda: self.store.find_instance(instance_id, populate=True),
            books=self.store.find_books,
        )
        instance = results['bookinstance']
        if instance is None:
            raise RecordNotFound('Bookinstance not found')
        return render_template('bookinstance_form.html', title='Update BookInstance',
                               book_list=results['books'], selected_book=instance.book_id,
                               bookinstance=instance, form=BookInstanceForm(formdata=None))

    def bookinstance_update_post(self, instance_id):
        form = BookInstanceForm()
        valid = form.validate()
        fields = form.sanitized_fields()
        candidate = BookInstance(id=instance_id, **fields)

        if not valid:
            return self._render_invalid(form, candidate, 'Update BookInstance')

        updated = self.store.update_instance(instance_id, fields)
        if updated is None:
            raise RecordNotFound('Bookinstance not found')
        logger.info("Updated book instance %s", instance_id)
        return redirect(updated.url)

    def _render_invalid(self, form, candidate, title):
        errors = form.error_list()
        logger.debug("Rejected book instance form: %s", errors)
        books = self.store.find_books()
        return render_template('bookinstance_form.html', title=title, book_list=books,
                               selected_book=candidate.book_id, errors=errors,
                               bookinstance=candidate, form=form)
