# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-19
# Description: ListItemExtractor
# -----------------------------------------------------------------------------
import re
from typing import Iterator, List

from utility.logging_utils import get_class_logger

# "<digits>.<one whitespace char>" starts an item; the item runs up to the next
# marker or the end of the text. Markers are not anchored to line starts.
_ITEM_PATTERN = re.compile(r"\d+\.\s(.*?)(?=\d+\.\s|\Z)", re.DOTALL)


class ListItemExtractor:
    def __init__(self, logger=None):
        self.logger = logger or get_class_logger(self.__class__)

    def iter_items(self, text: str) -> Iterator[str]:
        """
        Lazily yields numbered list items from a completion, in source order.
        The marker is excluded and surrounding whitespace is stripped.
        """
        for match in _ITEM_PATTERN.finditer(text or ""):
            yield match.group(1).strip()

    def extract(self, text: str) -> List[str]:
        """
        Returns all numbered list items. An empty list means no list was
        found, which is a valid outcome rather than an error.
        """
        items = list(self.iter_items(text))
        if items:
            self.logger.info("Extracted %d list items (text_chars=%d)", len(items), len(text or ""))
        else:
            self.logger.info("No numbered list found in completion (text_chars=%d)", len(text or ""))
        return items
