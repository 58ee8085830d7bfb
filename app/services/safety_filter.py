import logging
import re
from typing import Iterable, List

from app.core.config import Settings

logger = logging.getLogger(__name__)


class SafetyFilter:
    """ Flags custom answers that describe harming students.
    Runs before any model call so these answers are never scored."""

    def __init__(self, patterns: Iterable[str]):
        self.patterns: List[re.Pattern] = [re.compile(pattern) for pattern in patterns]
        logger.info("Safety filter loaded with %d patterns", len(self.patterns))

    @classmethod
    def from_settings(cls, settings: Settings) -> "SafetyFilter":
        return cls(settings.SAFETY_PATTERNS)

    def is_catastrophic(self, text: str) -> bool:
        lower = (text or "").lower()
        return any(pattern.search(lower) for pattern in self.patterns)
