"""
Extract preconditions from method documentation.

Two annotation forms are recognized, one per line or both on the same line:

    @param int count        (or the Sphinx spelling ":param int count:")
    @pre is_positive 1

A @param line yields a basic or class check on the next documented
parameter; a @pre line yields a named custom check on the given position.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional

from .core.config import BASE_TYPES, PARAM_PATTERN, PRE_PATTERN
from .core.errors import ConditionLookupError
from .core.models import CheckKind, ConditionKind, MethodConditionTable, PreconditionDescriptor

logger = logging.getLogger(__name__)

DocSource = Callable[[str], Optional[str]]


def parse_docstring(doc_text: Optional[str]) -> List[PreconditionDescriptor]:
    """
    Parse a raw documentation block into precondition descriptors.

    Args:
        doc_text: Documentation text, decorations included

    Returns:
        Descriptors in the order the annotations appear
    """
    descriptors: List[PreconditionDescriptor] = []
    if not doc_text:
        return descriptors

    param_count = 1
    for line in doc_text.splitlines():
        match = PARAM_PATTERN.search(line)
        if match:
            type_name = match.group(1)
            check = CheckKind.BASIC if type_name in BASE_TYPES else CheckKind.CLASS
            descriptors.append(PreconditionDescriptor(check, type_name, param_count))
            param_count += 1

        match = PRE_PATTERN.search(line)
        if match:
            descriptors.append(
                PreconditionDescriptor(CheckKind.CUSTOM, match.group(1), int(match.group(2)))
            )

    return descriptors


class ConditionExtractor:
    """Owns the condition table for one contract-bearing object"""

    def __init__(self, doc_source: DocSource):
        """
        Args:
            doc_source: Returns the raw documentation of a method by name
        """
        self.doc_source = doc_source
        self.conditions: Dict[ConditionKind, MethodConditionTable] = {
            ConditionKind.PRE: {},
            ConditionKind.POST: {},
        }
        self._lock = threading.Lock()

    def extract_preconditions(self, method_name: str, doc_text: Optional[str]) -> None:
        """Record the preconditions found in doc_text for method_name"""
        descriptors = parse_docstring(doc_text)
        self.conditions[ConditionKind.PRE][method_name] = descriptors
        logger.debug("Extracted %d preconditions for %s", len(descriptors), method_name)

    def load(self, method_name: str, descriptors: List[PreconditionDescriptor]) -> None:
        """Preload explicit descriptors, bypassing documentation"""
        with self._lock:
            self.conditions[ConditionKind.PRE][method_name] = list(descriptors)

    def extracted(self, method_name: str) -> bool:
        return method_name in self.conditions[ConditionKind.PRE]

    def has_precondition(self, method_name: str) -> bool:
        """
        Check whether a method has any preconditions.

        Extraction happens on the first call for a method and is never
        repeated for the same extractor.
        """
        if not self.extracted(method_name):
            with self._lock:
                if not self.extracted(method_name):
                    self.extract_preconditions(method_name, self.doc_source(method_name))
        return bool(self.conditions[ConditionKind.PRE][method_name])

    def get_conditions(self, kind, method_name: str) -> List[PreconditionDescriptor]:
        """
        Return the conditions of a method.

        Args:
            kind: "pre" or ConditionKind.PRE
            method_name: Method to look up

        Raises:
            ConditionLookupError: If kind is not "pre" or the method was
                never extracted
        """
        try:
            kind = ConditionKind(kind)
        except ValueError:
            raise ConditionLookupError(f"Unknown condition kind: {kind!r}") from None
        if kind is not ConditionKind.PRE:
            raise ConditionLookupError(f"No {kind.value}conditions are extracted")
        try:
            return list(self.conditions[kind][method_name])
        except KeyError:
            raise ConditionLookupError(
                f"Preconditions for {method_name!r} have not been extracted"
            ) from None
