# File: wordstack_app/modules/AI/services/ai_manager.py
# Builds the generation client once per application and hands it out.

from flask import Flask, current_app

from ..logics.engines.gemini_client import GeminiClient

EXTENSION_KEY = 'ai_client'


def init_ai_service(app: Flask, client=None):
    """
    Install the generation client on ``app.extensions``.

    When ``client`` is given it is used as-is (tests pass a fake here).
    Otherwise a GeminiClient is built from GEMINI_API_KEY / GEMINI_MODEL.
    A missing key leaves the slot empty and generation calls fail cleanly.

    The client keeps no open connections, so there is nothing to tear down:
    it lives and dies with the app object.
    """
    if client is None:
        api_key = app.config.get('GEMINI_API_KEY')
        if not api_key:
            app.logger.warning("GEMINI_API_KEY not set; text generation is disabled.")
        else:
            client = GeminiClient(api_key=api_key, model_name=app.config.get('GEMINI_MODEL'))
            app.logger.info(f"Gemini client initialized with model '{client.model_name}'.")

    app.extensions[EXTENSION_KEY] = client
    return client


def get_ai_service():
    """Return the generation client of the current application, or None."""
    return current_app.extensions.get(EXTENSION_KEY)
