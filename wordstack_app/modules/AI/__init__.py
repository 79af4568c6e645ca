# File: wordstack_app/modules/AI/__init__.py
# Text generation client, prompt templates and response parsing.
# No routes: other modules call it through ``interface``.
