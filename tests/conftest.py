"""Pytest fixtures for wagtail-script-renderer tests."""

from unittest import mock

import pytest

from wagtail_script_renderer.assets import ScriptAsset
from wagtail_script_renderer.document import Document


@pytest.fixture
def document():
    """HTML5 document with LF line endings and tab indentation."""
    return Document(line_end="\n", tab="\t", html5=True, mime="text/html")


@pytest.fixture
def legacy_document():
    """Non-HTML5 (XHTML-era) document."""
    return Document(line_end="\n", tab="\t", html5=False, mime="text/html")


@pytest.fixture
def asset_manager():
    """Mock asset manager returning no assets by default."""
    manager = mock.Mock()
    manager.get_assets.return_value = []
    return manager


@pytest.fixture
def sample_assets():
    """Two managed assets, one deferred."""
    return [
        ScriptAsset(uri="/media/vendor/jquery.js", attributes={}),
        ScriptAsset(uri="/media/system/core.js", attributes={"defer": True}),
    ]
