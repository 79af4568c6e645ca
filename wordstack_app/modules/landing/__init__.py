# File: wordstack_app/modules/landing/__init__.py
from flask import Blueprint

blueprint = Blueprint('landing', __name__)


@blueprint.route('/')
def index():
    """Health check: the API is up."""
    return 'WordStack API is running!', 200
