"""Helpers wiring documents to configuration and requests."""

from __future__ import annotations

import logging
from importlib import import_module
from typing import Any

from django.http import HttpRequest

from .conf import get_setting
from .document import Document

logger = logging.getLogger(__name__)


def get_asset_manager() -> Any:
    """Import and instantiate the configured asset manager, if any."""
    manager_path: str | None = get_setting("ASSET_MANAGER")
    if not manager_path:
        return None
    cls = import_class(manager_path)
    logger.debug("Using script asset manager %s", manager_path)
    return cls()


def get_document(request: HttpRequest) -> Document:
    """Return the document attached to the request, attaching one if missing."""
    attr = get_setting("REQUEST_ATTRIBUTE")
    document = getattr(request, attr, None)
    if document is None:
        document = Document.from_settings(csp_nonce=get_csp_nonce(request))
        setattr(request, attr, document)
    return document  # type: ignore[no-any-return]


def get_csp_nonce(request: HttpRequest) -> str | None:
    """Read the content-security-policy nonce set on the request, if any.

    django-csp exposes the nonce as a lazy object; it is resolved here.
    """
    nonce = getattr(request, get_setting("CSP_NONCE_ATTRIBUTE"), None)
    if not nonce:
        return None
    return str(nonce)


def import_class(dotted_path: str) -> type:
    """Import a class from a dotted path string."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = import_module(module_path)
    return getattr(module, class_name)  # type: ignore[no-any-return]
