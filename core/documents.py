"""Document model - Document types, variants and the document collection."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Tuple, Type

if TYPE_CHECKING:
    from .visitor import DocumentVisitor


class DocumentType(str, Enum):
    """Identifiants des types de documents reconnus."""

    PDF = "PDF"
    TXT = "TXT"
    DOCX = "DOCX"

    def __str__(self) -> str:
        return self.value


# Exact, case-sensitive values accepted by the format check
RECOGNIZED_TYPES = frozenset(t.value for t in DocumentType)


class Document(ABC):
    """Interface abstraite pour tous les documents visitables."""

    @property
    @abstractmethod
    def doc_type(self) -> DocumentType:
        """Return the document kind."""
        pass

    @abstractmethod
    def accept(self, visitor: "DocumentVisitor") -> Any:
        """
        Dispatch to the visitor branch matching this document's kind.

        Args:
            visitor: Visitor to call back into

        Returns:
            Whatever the visitor branch returns
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class PDFDocument(Document):
    """PDF document."""

    @property
    def doc_type(self) -> DocumentType:
        return DocumentType.PDF

    def accept(self, visitor: "DocumentVisitor") -> Any:
        return visitor.visit_pdf(self)


class TXTDocument(Document):
    """Plain text document."""

    @property
    def doc_type(self) -> DocumentType:
        return DocumentType.TXT

    def accept(self, visitor: "DocumentVisitor") -> Any:
        return visitor.visit_txt(self)


# DOCX passes the format check but has no visitable variant
_DOCUMENT_CLASSES: Dict[str, Type[Document]] = {
    DocumentType.PDF.value: PDFDocument,
    DocumentType.TXT.value: TXTDocument,
}


def create_document(kind: str) -> Document:
    """
    Create a document of the given kind.

    Args:
        kind: Document kind ("PDF" or "TXT")

    Returns:
        New Document instance

    Raises:
        ValueError: If no document variant exists for the kind
    """
    document_class = _DOCUMENT_CLASSES.get(kind)
    if document_class is None:
        available = list(_DOCUMENT_CLASSES.keys())
        raise ValueError(
            f"No document variant for '{kind}'. Available: {available}"
        )
    return document_class()


class DocumentCollection:
    """Collection ordonnée de documents, propriétaire de ses éléments."""

    def __init__(self) -> None:
        self._documents: List[Document] = []

    def add(self, document: Document) -> None:
        """
        Append a document, keeping insertion order.

        Raises:
            TypeError: If the object is not a Document
        """
        if not isinstance(document, Document):
            raise TypeError(
                f"Expected a Document, got {type(document).__name__}"
            )
        self._documents.append(document)

    def process(self, visitor: "DocumentVisitor") -> List[Any]:
        """
        Apply the visitor to every document in insertion order.

        Args:
            visitor: Visitor applied to each document

        Returns:
            List of visit results, one per document
        """
        return [document.accept(visitor) for document in self._documents]

    def get_all(self) -> Tuple[Document, ...]:
        """Return a read-only view of all documents in insertion order."""
        return tuple(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(tuple(self._documents))

    @classmethod
    def from_kinds(cls, kinds: List[str]) -> "DocumentCollection":
        """Build a collection from a list of document kinds."""
        collection = cls()
        for kind in kinds:
            collection.add(create_document(kind))
        return collection

