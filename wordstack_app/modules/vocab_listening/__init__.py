from flask import Blueprint

blueprint = Blueprint('vocab_listening', __name__)

from .routes import api  # noqa: E402,F401
