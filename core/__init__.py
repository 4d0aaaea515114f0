"""Core document processing modules."""

from .chain import Handler, FormatChecker, SecurityChecker, build_chain
from .documents import (
    Document,
    DocumentCollection,
    DocumentType,
    PDFDocument,
    TXTDocument,
    create_document,
)
from .pipeline import DocumentPipeline
from .strategy import (
    DocumentProcessor,
    PrintStrategy,
    ProcessingStrategy,
    SaveStrategy,
    StrategyFactory,
)
from .visitor import DisplayVisitor, DocumentVisitor

__all__ = [
    "Handler",
    "FormatChecker",
    "SecurityChecker",
    "build_chain",
    "Document",
    "DocumentCollection",
    "DocumentType",
    "PDFDocument",
    "TXTDocument",
    "create_document",
    "DocumentPipeline",
    "DocumentProcessor",
    "PrintStrategy",
    "ProcessingStrategy",
    "SaveStrategy",
    "StrategyFactory",
    "DisplayVisitor",
    "DocumentVisitor",
]
