"""Template tags for rendering a document's scripts."""

from __future__ import annotations

from typing import Any

from django import template
from django.utils.safestring import SafeString, mark_safe

from ..conf import get_setting
from ..renderers.scripts import ScriptsRenderer

register = template.Library()


@register.simple_tag(takes_context=True)
def render_scripts(context: Any, document: Any = None) -> SafeString:
    """Render script tags for a document.

    Uses the given document, else the ``script_document`` context variable,
    else the document attached to the request. Renders nothing when none is
    found.

    Usage::

        {% load script_renderer %}
        {% render_scripts %}
    """
    if document is None:
        document = context.get("script_document")
    if document is None:
        request = context.get("request")
        document = getattr(request, get_setting("REQUEST_ATTRIBUTE"), None)
    if document is None:
        return mark_safe("")
    return mark_safe(ScriptsRenderer(document).render())  # noqa: S308
