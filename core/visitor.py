"""Visitor interface - Double dispatch over the closed set of document variants."""

import logging
from abc import ABC, abstractmethod
from typing import Any

from .documents import PDFDocument, TXTDocument

logger = logging.getLogger(__name__)


class DocumentVisitor(ABC):
    """
    Interface abstraite pour tous les visiteurs de documents.

    Declares one abstract branch per document variant. A visitor that does
    not implement every branch cannot be instantiated, so adding a variant
    requires updating every visitor.
    """

    @abstractmethod
    def visit_pdf(self, document: PDFDocument) -> Any:
        """Handle a PDF document."""
        pass

    @abstractmethod
    def visit_txt(self, document: TXTDocument) -> Any:
        """Handle a TXT document."""
        pass


class DisplayVisitor(DocumentVisitor):
    """Affiche le contenu de chaque document."""

    def visit_pdf(self, document: PDFDocument) -> str:
        return self._display(document)

    def visit_txt(self, document: TXTDocument) -> str:
        return self._display(document)

    def _display(self, document) -> str:
        message = f"[Visitor] Displaying {document.doc_type} content."
        logger.debug(f"Visiting {document!r}")
        print(message)
        return message
