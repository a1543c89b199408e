"""Tests for wagtail_script_renderer.assets module."""

import pytest

from wagtail_script_renderer.assets import (
    AUTO_VERSION,
    OPTIONS_KEY,
    ScriptAsset,
    normalize_asset,
)


class TestScriptAssetNamedTuple:
    """Tests for the ScriptAsset record."""

    def test_defaults(self):
        """Only the URI is required.

        Purpose: Verify the default values of optional fields.
        Category: Normal case
        Target: ScriptAsset(uri)
        Technique: Equivalence partitioning
        Test data: URI only
        """
        asset = ScriptAsset("/media/app.js")

        assert asset.uri == "/media/app.js"
        assert asset.attributes == {}
        assert asset.version is None
        assert asset.conditional is None

    def test_constants(self):
        """Sentinel and reserved key values."""
        assert AUTO_VERSION == "auto"
        assert OPTIONS_KEY == "options"


class TestFromLegacy:
    """Tests for ScriptAsset.from_legacy()."""

    def test_reads_version_and_conditional_from_options(self):
        """Options sub-mapping supplies version and conditional.

        Purpose: Verify legacy metadata is lifted out of the attributes.
        Category: Normal case
        Target: ScriptAsset.from_legacy(key, attributes)
        Technique: Equivalence partitioning
        Test data: Attributes with options.version and options.conditional
        """
        attributes = {
            "defer": True,
            "options": {"version": "auto", "conditional": "lt IE 9"},
        }

        asset = ScriptAsset.from_legacy("/media/html5shiv.js", attributes)

        assert asset.uri == "/media/html5shiv.js"
        assert asset.attributes is attributes
        assert asset.version == "auto"
        assert asset.conditional == "lt IE 9"

    def test_missing_options_gives_empty_version_and_no_conditional(self):
        """Entries without options have no version and no conditional.

        Purpose: Verify defaults for legacy entries lacking metadata.
        Category: Edge case
        Target: ScriptAsset.from_legacy(key, attributes)
        Technique: Boundary value analysis
        Test data: Attributes without options key
        """
        asset = ScriptAsset.from_legacy("/media/app.js", {"async": True})

        assert asset.version == ""
        assert asset.conditional is None

    @pytest.mark.parametrize("conditional", ["", None])
    def test_empty_conditional_becomes_none(self, conditional):
        """Empty conditional expressions are treated as absent."""
        asset = ScriptAsset.from_legacy(
            "/media/app.js", {"options": {"conditional": conditional}}
        )

        assert asset.conditional is None

    @pytest.mark.parametrize("attributes", [None, "defer", {"options": "bad"}])
    def test_malformed_attributes_degrade_gracefully(self, attributes):
        """Non-mapping attributes or options do not raise.

        Purpose: Verify defensive handling of malformed legacy data.
        Category: Error case
        Target: ScriptAsset.from_legacy(key, attributes)
        Technique: Error guessing
        Test data: None, a string, and a non-mapping options value
        """
        asset = ScriptAsset.from_legacy("/media/app.js", attributes)

        assert asset.uri == "/media/app.js"
        assert asset.version == ""
        assert asset.conditional is None


class TestNormalizeAsset:
    """Tests for normalize_asset()."""

    def test_structured_asset_is_returned_unchanged(self):
        """A ScriptAsset passes through as-is."""
        asset = ScriptAsset("/media/app.js", {"defer": True}, "1.2", "IE")

        assert normalize_asset(asset) is asset

    def test_legacy_tuple_is_normalized(self):
        """A (uri, attributes) pair becomes a ScriptAsset.

        Purpose: Verify both descriptor shapes end up as one record type.
        Category: Normal case
        Target: normalize_asset(item)
        Technique: Equivalence partitioning
        Test data: Tuple as produced by dict.items()
        """
        item = ("/media/app.js", {"options": {"version": "5"}})

        result = normalize_asset(item)

        assert isinstance(result, ScriptAsset)
        assert result.uri == "/media/app.js"
        assert result.version == "5"


class TestScriptAssetDefaultAttributes:
    def test_default_attributes_are_read_only(self):
        """The shared default attributes mapping cannot be mutated.

        Purpose: Verify one asset cannot change the defaults of another.
        Category: Edge case
        Target: ScriptAsset.attributes default
        Technique: Error guessing (shared mutable default)
        Test data: Two assets created with default attributes
        """
        first = ScriptAsset("/media/a.js")
        second = ScriptAsset("/media/b.js")

        with pytest.raises(TypeError):
            first.attributes["defer"] = True

        assert dict(second.attributes) == {}
