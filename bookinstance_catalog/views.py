from flask import Blueprint, current_app, request

from .controller import BookInstanceController

catalog = Blueprint('catalog', __name__, url_prefix='/catalog')


def get_controller():
    return BookInstanceController(current_app.extensions['catalog_store'])


@catalog.route('/bookinstances')
def bookinstance_list():
    return get_controller().bookinstance_list()


@catalog.route('/bookinstance/create', methods=['GET', 'POST'])
def bookinstance_create():
    controller = get_controller()
    if request.method == 'POST':
        return controller.bookinstance_create_post()
    return controller.bookinstance_create_get()


@catalog.route('/bookinstance/<instance_id>')
def bookinstance_detail(instance_id):
    return get_controller().bookinstance_detail(instance_id)


@catalog.route('/bookinstance/<instance_id>/delete', methods=['GET', 'POST'])
def bookinstance_delete(instance_id):
    controller = get_controller()
    if request.method == 'POST':
        return controller.bookinstance_delete_post()
    return controller.bookinstance_delete_get(instance_id)


@catalog.route('/bookinstance/<instance_id>/update', methods=['GET', 'POST'])
def bookinstance_update(instance_id):
    controller = get_controller()
    if request.method == 'POST':
        return controller.bookinstance_update_post(instance_id)
    return controller.bookinstance_update_get(instance_id)
