"""Renderer for <script> tags, inline script declarations and custom tags."""

from __future__ import annotations

import json
import logging
from typing import Any

from ..assets import AUTO_VERSION, OPTIONS_KEY, ScriptAsset, normalize_asset
from .base import DocumentRenderer

logger = logging.getLogger(__name__)

DEFAULT_JS_MIMES = frozenset(
    {
        "text/javascript",
        "application/javascript",
        "text/x-javascript",
        "application/x-javascript",
    }
)

# Attributes written without a value in HTML5 documents.
HTML5_NO_VALUE_ATTRS = frozenset({"defer", "async"})


class ScriptsRenderer(DocumentRenderer):
    """Render the document's script files, declarations and custom tags.

    Managed assets come first, followed by the legacy entries registered
    directly on the document. A URI is rendered once; the first occurrence
    wins.
    """

    def render(
        self,
        head: str | None = None,
        params: dict[str, Any] | None = None,
        content: str | None = None,
    ) -> str:
        doc = self.document
        tab = doc.tab
        line_end = doc.line_end
        lines: list[str] = []

        items = [*doc.get_assets(), *doc.scripts.items()]
        rendered_uris: set[str] = set()

        for item in items:
            asset = normalize_asset(item)
            if not asset.uri:
                logger.debug("Skipping script asset without URI: %r", item)
                continue
            if asset.uri in rendered_uris:
                logger.debug("Skipping duplicate script %s", asset.uri)
                continue
            rendered_uris.add(asset.uri)
            lines.append(tab + self._render_asset(asset) + line_end)

        for type_, contents in doc.script_declarations.items():
            # Older callers stored a single string per type
            if isinstance(contents, str):
                contents = [contents]
            for body in contents:
                lines.append(self._render_declaration(type_, body))

        for custom in dict.fromkeys(doc.custom_tags):
            lines.append(tab + custom + line_end)

        buffer = "".join(lines)
        if tab and buffer.startswith(tab):
            buffer = buffer[len(tab) :]
        return buffer

    def _render_asset(self, asset: ScriptAsset) -> str:
        """Build the <script src> tag for one asset, without indentation."""
        src = _versioned_uri(asset.uri, asset.version, self.document.media_version)

        # Escaped on purpose; browsers decode &amp; back to &
        tag = f'<script src="{_escape_attr(src)}"'
        tag += self._render_attributes(asset.attributes)
        tag += "></script>"

        if asset.conditional is not None:
            tag = f"<!--[if {asset.conditional}]>{tag}<![endif]-->"
        return tag

    def _render_attributes(self, attributes: Any) -> str:
        html5 = self.document.html5
        output = ""

        for name, value in dict(attributes or {}).items():
            if name == OPTIONS_KEY:
                continue

            # "mime" is the old name of "type"
            if (
                name in ("type", "mime")
                and html5
                and isinstance(value, str)
                and value in DEFAULT_JS_MIMES
            ):
                continue

            if name in HTML5_NO_VALUE_ATTRS and not value:
                continue

            if name == "mime":
                name = "type"
            elif name in HTML5_NO_VALUE_ATTRS and value is True:
                value = name

            output += f" {_escape_attr(str(name))}"

            if not (html5 and name in HTML5_NO_VALUE_ATTRS):
                output += f'="{_escape_attr(_format_value(value))}"'

        return output

    def _render_declaration(self, type_: str | None, body: str) -> str:
        """Build an inline <script> block, one line per element."""
        doc = self.document
        tab = doc.tab
        line_end = doc.line_end

        tag = "<script"
        if type_ is not None and (not doc.html5 or type_ not in DEFAULT_JS_MIMES):
            tag += f' type="{_escape_attr(type_)}"'
        if doc.csp_nonce:
            tag += f' nonce="{_escape_attr(doc.csp_nonce)}"'
        tag += ">"

        xhtml = doc.mime != "text/html"
        output = tab + tag + line_end
        if xhtml:
            output += tab + tab + "//<![CDATA[" + line_end
        output += body + line_end
        if xhtml:
            output += tab + tab + "//]]>" + line_end
        output += tab + "</script>" + line_end
        return output


def _versioned_uri(uri: str, version: str | None, media_version: str) -> str:
    """Append the version query string when the asset asks for one."""
    if not version or "?" in uri:
        return uri
    if version == AUTO_VERSION:
        if not media_version:
            return uri
        return f"{uri}?{media_version}"
    return f"{uri}?{version}"


def _format_value(value: Any) -> str:
    """Stringify an attribute value; non-scalars are JSON encoded.

    Booleans become "1" or "". Values JSON cannot encode render empty.
    """
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, (str, int, float)):
        return str(value)
    try:
        return json.dumps(value, separators=(",", ":"))
    except (TypeError, ValueError):
        logger.debug("Cannot encode attribute value %r", value)
        return ""


def _escape_attr(value: str) -> str:
    """Escape a string for safe use in an HTML attribute."""
    return (
        value.replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )
