"""Processing strategies - Interchangeable behaviours and their context."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

logger = logging.getLogger(__name__)

NO_STRATEGY_MESSAGE = "No strategy selected."


class ProcessingStrategy(ABC):
    """Interface abstraite pour toutes les stratégies de traitement."""

    @property
    def name(self) -> str:
        """Return strategy name."""
        return self.__class__.__name__.replace("Strategy", "").lower()

    @abstractmethod
    def process(self, doc_type: str) -> str:
        """
        Traite un document du type donné.

        Args:
            doc_type: Document type identifier

        Returns:
            The message emitted for the document
        """
        pass


class PrintStrategy(ProcessingStrategy):
    """Impression du document."""

    def process(self, doc_type: str) -> str:
        message = f"[Strategy] Printing {doc_type} document..."
        print(message)
        return message


class SaveStrategy(ProcessingStrategy):
    """Sauvegarde du document."""

    def process(self, doc_type: str) -> str:
        message = f"[Strategy] Saving {doc_type} document..."
        print(message)
        return message


class DocumentProcessor:
    """Contexte qui détient au plus une stratégie active."""

    def __init__(self, strategy: Optional[ProcessingStrategy] = None):
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[ProcessingStrategy]:
        return self._strategy

    def set_strategy(self, strategy: Optional[ProcessingStrategy]) -> None:
        """Replace the active strategy; None clears it."""
        if self._strategy is not None:
            logger.debug(f"Replacing strategy '{self._strategy.name}'")
        self._strategy = strategy

    def execute_strategy(self, doc_type: str) -> str:
        """
        Run the active strategy on a document type.

        Args:
            doc_type: Document type identifier

        Returns:
            The strategy's message, or the no-strategy notice
        """
        if self._strategy is None:
            print(NO_STRATEGY_MESSAGE)
            return NO_STRATEGY_MESSAGE

        logger.debug(f"Executing strategy '{self._strategy.name}' on {doc_type}")
        return self._strategy.process(doc_type)


class StrategyFactory:
    """Factory pour créer les stratégies de traitement par nom."""

    _strategies: Dict[str, Type[ProcessingStrategy]] = {
        "print": PrintStrategy,
        "save": SaveStrategy,
    }

    @classmethod
    def register_strategy(
        cls, name: str, strategy_class: Type[ProcessingStrategy]
    ) -> None:
        """
        Enregistre une nouvelle stratégie.

        Args:
            name: Nom de la stratégie
            strategy_class: Classe de la stratégie
        """
        cls._strategies[name] = strategy_class

    @classmethod
    def create_strategy(cls, name: str) -> ProcessingStrategy:
        """
        Crée une instance de la stratégie demandée.

        Raises:
            ValueError: Si la stratégie n'existe pas
        """
        if name not in cls._strategies:
            available = cls.get_available_strategies()
            raise ValueError(
                f"Stratégie '{name}' inconnue. Stratégies disponibles: {available}"
            )
        return cls._strategies[name]()

    @classmethod
    def get_available_strategies(cls) -> List[str]:
        """Return list of registered strategy names."""
        return list(cls._strategies.keys())
