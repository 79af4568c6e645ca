# File: wordstack_app/modules/vocabulary/__init__.py
from flask import Blueprint

blueprint = Blueprint('vocabulary', __name__)

# Register routes and signal subscribers with the blueprint
from .routes import api  # noqa: E402,F401
from . import events  # noqa: E402,F401
