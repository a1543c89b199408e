"""Middleware attaching a script document to each request."""

from __future__ import annotations

import logging
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

from .conf import get_setting
from .document import Document
from .utils import get_csp_nonce

logger = logging.getLogger(__name__)


class ScriptDocumentMiddleware:
    """Give every request a fresh :class:`Document`.

    Views, hooks and templates register scripts on ``request.script_document``
    (the attribute name is configurable) and ``{% render_scripts %}`` renders
    them. Place it after any middleware that sets a CSP nonce on the request.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        attr = get_setting("REQUEST_ATTRIBUTE")
        document = Document.from_settings(csp_nonce=get_csp_nonce(request))
        setattr(request, attr, document)
        logger.debug("Attached script document to request %s", request.path)
        return self.get_response(request)
