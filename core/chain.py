"""Chain of Responsibility - Ordered document checks with short-circuiting."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Type

from .documents import RECOGNIZED_TYPES

logger = logging.getLogger(__name__)


class Handler(ABC):
    """Maillon abstrait de la chaîne de vérification."""

    def __init__(self) -> None:
        self._next: Optional["Handler"] = None

    @property
    def name(self) -> str:
        """Return handler name."""
        return self.__class__.__name__.replace("Checker", "").lower()

    @property
    def next_handler(self) -> Optional["Handler"]:
        """Return the successor, if any."""
        return self._next

    def set_next(self, handler: Optional["Handler"]) -> Optional["Handler"]:
        """
        Set the successor of this handler.

        Args:
            handler: Next handler in the chain (None makes this node terminal)

        Returns:
            The handler passed in, so chains can be linked fluently
        """
        self._next = handler
        return handler

    @abstractmethod
    def handle(self, doc_type: str) -> bool:
        """
        Check a document type and delegate to the successor.

        Args:
            doc_type: Document type identifier (PDF, TXT, DOCX, ...)

        Returns:
            True if this check and every following check passed
        """
        pass

    def _pass_on(self, doc_type: str) -> bool:
        if self._next is None:
            return True
        logger.debug(f"{self.name} -> {self._next.name} for {doc_type}")
        return self._next.handle(doc_type)


class FormatChecker(Handler):
    """Vérifie que le format du document est reconnu."""

    def handle(self, doc_type: str) -> bool:
        print(f"[Chain] Checking format of {doc_type}...")
        if doc_type in RECOGNIZED_TYPES:
            return self._pass_on(doc_type)

        print("Format not supported.")
        logger.warning(f"Rejected unsupported document type: {doc_type!r}")
        return False


class SecurityChecker(Handler):
    """Security check; always passes."""

    def handle(self, doc_type: str) -> bool:
        print(f"[Chain] Security check passed for {doc_type}.")
        return self._pass_on(doc_type)


HANDLERS: Dict[str, Type[Handler]] = {
    "format": FormatChecker,
    "security": SecurityChecker,
}


def build_chain(names: List[str]) -> Handler:
    """
    Build a linked chain of handlers in the given order.

    Args:
        names: Handler names, e.g. ["format", "security"]

    Returns:
        Head of the chain

    Raises:
        ValueError: If the list is empty or contains an unknown name
    """
    if not names:
        raise ValueError("Chain must contain at least one handler")

    handlers = []
    for name in names:
        if name not in HANDLERS:
            raise ValueError(
                f"Handler '{name}' inconnu. Handlers disponibles: {list(HANDLERS)}"
            )
        handlers.append(HANDLERS[name]())

    for current, following in zip(handlers, handlers[1:]):
        current.set_next(following)

    return handlers[0]
