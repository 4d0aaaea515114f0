"""Tests for documents, the collection and visitors."""

import io
import sys
import unittest
from contextlib import redirect_stdout
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from core.documents import (
    DocumentCollection,
    DocumentType,
    PDFDocument,
    TXTDocument,
    create_document,
)
from core.visitor import DisplayVisitor, DocumentVisitor


class RecordingVisitor(DocumentVisitor):
    """Visitor recording which branch handled each document."""

    def __init__(self):
        self.visits = []

    def visit_pdf(self, document):
        self.visits.append(("pdf", document))
        return "pdf"

    def visit_txt(self, document):
        self.visits.append(("txt", document))
        return "txt"


class TestDocuments(unittest.TestCase):
    """Test document variants."""

    def test_doc_types(self):
        """Test each variant reports its kind."""
        self.assertEqual(PDFDocument().doc_type, DocumentType.PDF)
        self.assertEqual(TXTDocument().doc_type, "TXT")

    def test_create_document(self):
        """Test creating documents by kind."""
        self.assertIsInstance(create_document("PDF"), PDFDocument)
        self.assertIsInstance(create_document("TXT"), TXTDocument)

    def test_create_docx_document(self):
        """Test DOCX has no visitable variant."""
        with self.assertRaises(ValueError) as ctx:
            create_document("DOCX")

        self.assertIn("DOCX", str(ctx.exception))


class TestVisitorDispatch(unittest.TestCase):
    """Test double dispatch."""

    def test_dispatch_by_document_type(self):
        """Test the document's type selects the visitor branch."""
        visitor = RecordingVisitor()
        pdf = PDFDocument()
        txt = TXTDocument()

        self.assertEqual(txt.accept(visitor), "txt")
        self.assertEqual(pdf.accept(visitor), "pdf")
        self.assertEqual(visitor.visits, [("txt", txt), ("pdf", pdf)])

    def test_incomplete_visitor_cannot_be_created(self):
        """Test a visitor missing a branch is rejected."""

        class PdfOnlyVisitor(DocumentVisitor):
            def visit_pdf(self, document):
                return None

        with self.assertRaises(TypeError):
            PdfOnlyVisitor()

    def test_display_visitor(self):
        """Test DisplayVisitor output."""
        with redirect_stdout(io.StringIO()) as out:
            PDFDocument().accept(DisplayVisitor())
            TXTDocument().accept(DisplayVisitor())

        self.assertEqual(
            out.getvalue().splitlines(),
            [
                "[Visitor] Displaying PDF content.",
                "[Visitor] Displaying TXT content.",
            ],
        )


class TestDocumentCollection(unittest.TestCase):
    """Test DocumentCollection functionality."""

    def test_process_in_insertion_order(self):
        """Test visiting [PDF, TXT] hits each branch once, in order."""
        collection = DocumentCollection()
        collection.add(PDFDocument())
        collection.add(TXTDocument())
        visitor = RecordingVisitor()

        results = collection.process(visitor)

        self.assertEqual(results, ["pdf", "txt"])
        self.assertEqual([branch for branch, _ in visitor.visits], ["pdf", "txt"])

    def test_empty_collection(self):
        """Test an empty collection never calls the visitor."""
        visitor = RecordingVisitor()

        self.assertEqual(DocumentCollection().process(visitor), [])
        self.assertEqual(visitor.visits, [])

    def test_get_all(self):
        """Test get_all returns the same documents in insertion order."""
        documents = [PDFDocument(), TXTDocument(), PDFDocument()]
        collection = DocumentCollection()
        for document in documents:
            collection.add(document)

        view = collection.get_all()

        self.assertEqual(len(view), 3)
        for stored, original in zip(view, documents):
            self.assertIs(stored, original)
        self.assertIsInstance(view, tuple)

    def test_get_all_is_read_only(self):
        """Test the returned view cannot grow the collection."""
        collection = DocumentCollection.from_kinds(["PDF"])
        view = collection.get_all()

        with self.assertRaises(AttributeError):
            view.append(TXTDocument())
        self.assertEqual(len(collection), 1)

    def test_duplicates_kept(self):
        """Test the collection does not deduplicate."""
        document = PDFDocument()
        collection = DocumentCollection()
        collection.add(document)
        collection.add(document)

        self.assertEqual(len(collection), 2)

    def test_add_non_document(self):
        """Test adding a non-document raises error."""
        with self.assertRaises(TypeError):
            DocumentCollection().add("PDF")

    def test_from_kinds(self):
        """Test building a collection from kinds."""
        collection = DocumentCollection.from_kinds(["TXT", "PDF"])

        self.assertEqual([d.doc_type for d in collection], ["TXT", "PDF"])


if __name__ == "__main__":
    unittest.main()
