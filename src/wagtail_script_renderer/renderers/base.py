"""Base class for document renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..document import Document


class DocumentRenderer(ABC):
    """Abstract base class for renderers of a document section.

    Renderers are bound to a document and produce an HTML fragment from it.
    """

    def __init__(self, document: Document) -> None:
        self.document = document

    @abstractmethod
    def render(
        self,
        head: str | None = None,
        params: dict[str, Any] | None = None,
        content: str | None = None,
    ) -> str:
        """Render the section.

        Args:
            head: Unused; kept so all renderers share one signature.
            params: Renderer options.
            content: Unused; kept so all renderers share one signature.

        Returns:
            The rendered HTML fragment, possibly empty.
        """
        ...
