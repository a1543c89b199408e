"""Script asset descriptors and their normalization."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, NamedTuple, Protocol

AUTO_VERSION = "auto"

# Reserved attribute key carrying metadata (version, conditional) for legacy entries.
OPTIONS_KEY = "options"


class ScriptAsset(NamedTuple):
    """A script resource with its resolved URI and rendering metadata."""

    uri: str
    attributes: Mapping[str, Any] = MappingProxyType({})
    version: str | None = None  # literal version, "auto" or None
    conditional: str | None = None  # conditional comment expression, e.g. "lt IE 9"

    @classmethod
    def from_legacy(cls, key: str, attributes: Mapping[str, Any] | None) -> ScriptAsset:
        """Build an asset from a raw ``(uri, attributes)`` document entry.

        The ``options`` sub-mapping may carry ``version`` and ``conditional``.
        A missing version becomes an empty string and an empty conditional
        becomes ``None``.
        """
        attributes = attributes if isinstance(attributes, Mapping) else {}
        options = attributes.get(OPTIONS_KEY)
        if not isinstance(options, Mapping):
            options = {}
        return cls(
            uri=key,
            attributes=attributes,
            version=options.get("version", ""),
            conditional=options.get("conditional") or None,
        )


class AssetManager(Protocol):
    """Supplies registered assets in dependency-resolved order."""

    def get_assets(self, asset_type: str, sort: bool = False) -> list[Any]: ...


def normalize_asset(item: Any) -> ScriptAsset:
    """Normalize a structured asset or a legacy ``(uri, attributes)`` tuple."""
    if isinstance(item, ScriptAsset):
        return item
    key, attributes = item
    return ScriptAsset.from_legacy(key, attributes)
