"""Configuration and settings for wagtail-script-renderer."""

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    # Output formatting
    "LINE_END": "\n",
    "TAB": "\t",
    # Document defaults
    "MEDIA_VERSION": "",
    "HTML5": True,
    "MIME_TYPE": "text/html",
    # Dotted path to the asset manager class (None disables managed assets)
    "ASSET_MANAGER": None,
    # Request integration
    "REQUEST_ATTRIBUTE": "script_document",
    "CSP_NONCE_ATTRIBUTE": "csp_nonce",
}


_UNSET = object()


def get_setting(key: str, default: Any = _UNSET) -> Any:
    """Get a setting from WAGTAIL_SCRIPT_RENDERER dict or return default."""
    user_settings: dict[str, Any] = getattr(settings, "WAGTAIL_SCRIPT_RENDERER", {})
    fallback = DEFAULTS.get(key) if default is _UNSET else default
    return user_settings.get(key, fallback)
