"""
Keyword Query Filter

Approximate screening of queries before they reach the AI backend. This is
substring and pattern matching only, not semantic PII detection: it misses
paraphrased secrets and flags harmless text that happens to contain a
denylisted word ("tokenizer" contains "token").
"""

import re
import uuid
from collections.abc import Sequence

from ai_search.core.logging import get_logger
from ai_search.search.models import FilterVerdict

logger = get_logger(__name__)

DEFAULT_SENSITIVE_TERMS: tuple[str, ...] = (
    "password",
    "secret",
    "token",
    "api key",
    "social security",
    "credit card",
)

# "00000000", the leading group of the nil UUID
NIL_UUID_PREFIX = str(uuid.UUID(int=0))[:8]

_HEX_UUID = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
_UUID_TOKEN_RE = re.compile(
    rf"[0-9a-f]{{32}}|{_HEX_UUID}|\{{{_HEX_UUID}\}}|\({_HEX_UUID}\)",
    re.IGNORECASE,
)

GUID_REJECTION_REASON = "Query appears to contain a GUID which is not suitable for AI processing."
SENSITIVE_REJECTION_TEMPLATE = "Query potentially contains sensitive information ({term})."


def is_uuid_token(token: str) -> bool:
    """
    Return True if ``token`` is a well-formed UUID.

    Accepted forms: 32 hex digits, hyphenated 8-4-4-4-12, and the hyphenated
    form wrapped in braces or parentheses.
    """
    return _UUID_TOKEN_RE.fullmatch(token) is not None


class KeywordQueryFilter:
    """
    Rejects queries that look like they carry identifiers or secrets.

    Checks, in order:
    1. any whitespace-delimited token is a UUID, or the text contains the
       nil-UUID prefix
    2. the text contains a denylisted term (case-insensitive, first match
       in denylist order wins)

    The denylist is copied at construction and never mutated, so one
    instance is safe to share across concurrent requests.
    """

    def __init__(self, sensitive_terms: Sequence[str] = DEFAULT_SENSITIVE_TERMS):
        self._sensitive_terms: tuple[str, ...] = tuple(term.lower() for term in sensitive_terms)

    @property
    def sensitive_terms(self) -> tuple[str, ...]:
        return self._sensitive_terms

    async def classify(self, query: str) -> FilterVerdict:
        lowered = query.lower()

        if NIL_UUID_PREFIX in lowered or any(is_uuid_token(token) for token in query.split()):
            logger.debug("Query rejected", check="guid")
            return FilterVerdict.reject(GUID_REJECTION_REASON)

        for term in self._sensitive_terms:
            if term in lowered:
                logger.debug("Query rejected", check="sensitive_term", term=term)
                return FilterVerdict.reject(SENSITIVE_REJECTION_TEMPLATE.format(term=term))

        return FilterVerdict.accept()
