"""Per-document script state consumed by the renderers."""

from __future__ import annotations

from typing import Any

from .assets import OPTIONS_KEY, AssetManager
from .conf import get_setting


class Document:
    """Script entries and output settings for one rendered document.

    Holds the legacy raw script entries, inline script declarations and
    custom head markup, together with the formatting options the renderers
    need (line terminator, indentation, media version, HTML5 flag, MIME type
    and content-security-policy nonce).
    """

    def __init__(
        self,
        *,
        line_end: str = "\n",
        tab: str = "\t",
        media_version: str = "",
        html5: bool = True,
        mime: str = "text/html",
        csp_nonce: str | None = None,
        asset_manager: AssetManager | None = None,
    ) -> None:
        self.line_end = line_end
        self.tab = tab
        self.media_version = media_version
        self.html5 = html5
        self.mime = mime
        self.csp_nonce = csp_nonce
        self.asset_manager = asset_manager
        self.scripts: dict[str, dict[str, Any]] = {}
        self.script_declarations: dict[str | None, list[str]] = {}
        self.custom_tags: list[str] = []

    @classmethod
    def from_settings(cls, **overrides: Any) -> Document:
        """Create a document from WAGTAIL_SCRIPT_RENDERER settings.

        Keyword arguments override the configured values. The configured
        ``ASSET_MANAGER`` is only instantiated when no ``asset_manager``
        override is given.
        """
        if "asset_manager" not in overrides:
            from .utils import get_asset_manager

            overrides["asset_manager"] = get_asset_manager()

        options: dict[str, Any] = {
            "line_end": get_setting("LINE_END"),
            "tab": get_setting("TAB"),
            "media_version": get_setting("MEDIA_VERSION"),
            "html5": get_setting("HTML5"),
            "mime": get_setting("MIME_TYPE"),
        }
        options.update(overrides)
        return cls(**options)

    def add_script(
        self,
        url: str,
        options: dict[str, Any] | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> Document:
        """Register a script file by URL.

        Adding a URL again merges the new attributes over the existing ones
        and keeps its original position.
        """
        entry = self.scripts.setdefault(url, {})
        entry.update(attributes or {})
        if options is not None:
            entry[OPTIONS_KEY] = dict(options)
        return self

    def add_script_declaration(
        self, content: str, type: str | None = "text/javascript"
    ) -> Document:
        """Append an inline script body under the given type."""
        key = type.lower() if type is not None else None
        self.script_declarations.setdefault(key, []).append(content)
        return self

    def add_custom_tag(self, html: str) -> Document:
        """Append raw markup to be emitted verbatim."""
        self.custom_tags.append(html.strip())
        return self

    def get_assets(self) -> list[Any]:
        """Return manager-sourced script assets in resolved order."""
        if self.asset_manager is None:
            return []
        return list(self.asset_manager.get_assets("script", True))
