"""Wagtail hooks for script renderer integration."""

from __future__ import annotations

import logging
from typing import Any

from django.http import HttpRequest
from wagtail import hooks
from wagtail.models import Page

from .utils import get_document

logger = logging.getLogger(__name__)

REGISTER_SCRIPT_ASSETS_HOOK = "register_script_assets"


@hooks.register("before_serve_page")
def collect_page_scripts(
    page: Page,
    request: HttpRequest,
    args: list[Any],
    kwargs: dict[str, Any],
) -> None:
    """Let apps register scripts for the page being served.

    Every function registered under the ``register_script_assets`` hook is
    called as ``fn(document, page, request)`` with the request's document,
    so that ``{% render_scripts %}`` in the page template picks the scripts
    up.
    """
    document = get_document(request)
    for fn in hooks.get_hooks(REGISTER_SCRIPT_ASSETS_HOOK):
        logger.debug("Collecting scripts from %s for page %s", fn, page.pk)
        fn(document, page, request)
