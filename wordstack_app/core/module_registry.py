"""Utilities for declaratively registering application modules.

Each blueprint-backed module is described with metadata so that registration
stays in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string


@dataclass(frozen=True)
class ModuleDefinition:
    """Describe how a blueprint-backed module is registered with the app."""

    import_path: str
    attribute: str = "blueprint"
    url_prefix: Optional[str] = None
    api: bool = True
    version: str = "1.0"

    def load_blueprint(self) -> Blueprint:
        """Import and return the blueprint described by this definition."""

        module = import_string(self.import_path)
        blueprint = getattr(module, self.attribute, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                "Expected attribute '%s' in '%s' to be a Flask Blueprint, got %r instead"
                % (self.attribute, self.import_path, type(blueprint))
            )
        return blueprint

    def full_prefix(self, api_prefix: str) -> Optional[str]:
        """Join the configured API prefix with the module's own prefix."""

        if not self.api:
            return self.url_prefix
        joined = (api_prefix or "").rstrip("/") + (self.url_prefix or "")
        return joined or None


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    """Register all modules in the provided iterable with the Flask app."""

    api_prefix = app.config.get("API_URL_PREFIX", "")
    for module in modules:
        blueprint = module.load_blueprint()
        prefix = module.full_prefix(api_prefix)
        app.register_blueprint(blueprint, url_prefix=prefix)
        app.logger.debug(
            "Registered module %s (version %s) at prefix %s",
            module.import_path,
            module.version,
            prefix or "<root>",
        )


def register_default_modules(app: Flask) -> None:
    """Convenience helper that registers the built-in WordStack modules."""

    register_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("wordstack_app.modules.landing", api=False, version="1.0"),
    ModuleDefinition("wordstack_app.modules.vocabulary", url_prefix="/words", version="1.0"),
    ModuleDefinition("wordstack_app.modules.vocab_listening", url_prefix="/listening", version="1.0"),
)
