"""Document Pipeline - Demonstration flow combining chain, strategy and visitor."""

import logging
from typing import Any, Dict, List, Optional

from .chain import build_chain
from .documents import DocumentCollection
from .strategy import DocumentProcessor, StrategyFactory
from .visitor import DisplayVisitor, DocumentVisitor

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 24

DEFAULTS: Dict[str, Any] = {
    "doc_type": "PDF",
    "strategy": "print",
    "chain": ["format", "security"],
    "collection": ["PDF", "TXT"],
    "wait_for_input": True,
}


class DocumentPipeline:
    """Pipeline de démonstration: vérification, stratégie, puis visite."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        config_path: Optional[str] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialise le pipeline avec la configuration.

        Args:
            config: Configuration dictionary (if provided directly)
            config_path: Chemin vers le fichier de configuration YAML
            overrides: Values taking precedence over the configuration

        Raises:
            ValueError: On unknown strategy, handler or document kind, or when
                chain or collection is not a list
        """
        if config is None:
            from config.settings import load_config

            config = load_config(config_path)

        from config.settings import get_pipeline_config

        settings = {**DEFAULTS, **get_pipeline_config(config), **(overrides or {})}
        for key in ("chain", "collection"):
            if not isinstance(settings[key], list):
                raise ValueError(
                    f"'{key}' must be a list, got {type(settings[key]).__name__}"
                )

        self.doc_type: str = settings["doc_type"]
        self.wait_for_input: bool = bool(settings["wait_for_input"])
        self.chain = build_chain(settings["chain"])
        self.processor = DocumentProcessor()
        if settings["strategy"] and settings["strategy"] != "none":
            self.processor.set_strategy(
                StrategyFactory.create_strategy(settings["strategy"])
            )
        self.collection = DocumentCollection.from_kinds(settings["collection"])

    def run_checks(self, doc_type: Optional[str] = None) -> Dict[str, Any]:
        """
        Run the check chain and, if it passes, the active strategy.

        Args:
            doc_type: Document type (None = configured type)

        Returns:
            Dict with success flag, document type, strategy name and message
        """
        if doc_type is None:
            doc_type = self.doc_type

        if not self.chain.handle(doc_type):
            return {
                "success": False,
                "doc_type": doc_type,
                "strategy": None,
                "message": None,
            }

        strategy = self.processor.strategy
        return {
            "success": True,
            "doc_type": doc_type,
            "strategy": strategy.name if strategy else None,
            "message": self.processor.execute_strategy(doc_type),
        }

    def run_visitor(self, visitor: Optional[DocumentVisitor] = None) -> List[Any]:
        """Visit every document of the collection (DisplayVisitor by default)."""
        visitor = visitor or DisplayVisitor()
        logger.debug(f"Visiting {len(self.collection)} documents")
        return self.collection.process(visitor)

    def run(self, doc_type: Optional[str] = None) -> Dict[str, Any]:
        """Run the full demonstration."""
        result = self.run_checks(doc_type)
        print(SEPARATOR)
        result["visited"] = self.run_visitor()
        return result
