# statement_extractor/logic.py
import json
import logging
import math
from typing import Iterable, List, NamedTuple, Optional

from .errors import MalformedPageOutput
from .schema import ExtractionResult, ParsedPage

logger = logging.getLogger("statement-extractor.logic")

FENCE_MARKERS = ("```json", "```")

def strip_fences(raw: str) -> str:
    """Remove code fence markers and surrounding whitespace; nothing else."""
    text = (raw or "").strip()
    for marker in FENCE_MARKERS:
        text = text.replace(marker, "")
    return text.strip()

class PageParse(NamedTuple):
    index: int
    raw: str
    page: Optional[ParsedPage] = None
    error: Optional[MalformedPageOutput] = None

    @property
    def ok(self) -> bool:
        return self.error is None

def _as_balance(value) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return None
    return None

def _reject_constant(name: str):
    # NaN and Infinity are not JSON and cannot be sent back in a response
    raise ValueError(name)

def _finite_float(text: str) -> float:
    value = float(text)
    if math.isinf(value) or math.isnan(value):
        raise ValueError(text)
    return value

def parse_page(raw: str, index: int) -> PageParse:
    """
    Decode one page's model output. Never raises: a failure is returned as
    the `error` of the PageParse so the caller decides what it contributes.
    """
    cleaned = strip_fences(raw)
    if not cleaned:
        return PageParse(index, raw, error=MalformedPageOutput(index, "empty response"))
    try:
        data = json.loads(cleaned, parse_constant=_reject_constant, parse_float=_finite_float)
    except json.JSONDecodeError as e:
        return PageParse(index, raw, error=MalformedPageOutput(index, f"JSONDecodeError: {e}"))
    except ValueError as e:
        return PageParse(index, raw, error=MalformedPageOutput(index, f"non-finite number: {e}"))
    if not isinstance(data, dict):
        return PageParse(index, raw, error=MalformedPageOutput(index, f"expected a JSON object, got {type(data).__name__}"))

    transactions = data.get("transactions")
    if not isinstance(transactions, list):
        transactions = []
    return PageParse(
        index,
        raw,
        page=ParsedPage(
            initial_balance=_as_balance(data.get("initial_balance")),
            transactions=transactions,
        ),
    )

def merge_pages(pages: Iterable[PageParse]) -> ExtractionResult:
    """
    Fold page results in order: the balance comes from the first page only,
    transactions are concatenated. Failed pages are logged and add nothing.
    """
    initial_balance: Optional[float] = None
    transactions: List = []
    for p in pages:
        if not p.ok:
            logger.error(f"Error parsing JSON from page {p.index + 1}: {p.error.reason}")
            logger.error(f"Raw data: {p.raw!r}")
            continue
        if p.index == 0:
            initial_balance = p.page.initial_balance
        transactions.extend(p.page.transactions)
    return ExtractionResult(initial_balance=initial_balance, transactions=transactions)
