# statement_extractor/extractor.py
import asyncio
import logging
from typing import Awaitable, Callable, List, NamedTuple, Optional, Sequence

from .config import PAGE_DELAY_SECONDS
from .errors import InvalidInput, UpstreamFailure
from .llm import EXTRACTION_PROMPT, describe_image
from .logic import merge_pages, parse_page
from .schema import ExtractionResult

logger = logging.getLogger("statement-extractor.extractor")

DescribeImage = Callable[[str, str], Awaitable[str]]

class Pacer:
    """Minimum pause between consecutive upstream calls."""

    def __init__(self, interval: float = PAGE_DELAY_SECONDS, sleep: Optional[Callable[[float], Awaitable[None]]] = None):
        self.interval = max(0.0, float(interval))
        self._sleep = sleep or asyncio.sleep

    async def wait(self) -> None:
        if self.interval > 0:
            await self._sleep(self.interval)

class ExtractionRun(NamedTuple):
    result: ExtractionResult
    pages_total: int
    pages_skipped: int

class Extractor:
    """
    Runs every page image through the vision model, one at a time and in
    order, then merges the per-page JSON into a single ExtractionResult.
    """

    def __init__(self, describe: DescribeImage = describe_image, pacer: Optional[Pacer] = None, prompt: str = EXTRACTION_PROMPT):
        self.describe = describe
        self.pacer = pacer or Pacer()
        self.prompt = prompt

    async def collect(self, images: Sequence[str]) -> List[str]:
        responses: List[str] = []
        total = len(images)
        for i, image in enumerate(images):
            logger.info(f"Extracting data from page {i + 1}/{total}...")
            try:
                text = await self.describe(image, self.prompt)
            except Exception as e:
                raise UpstreamFailure(i, e) from e
            responses.append(text or "")
            if i < total - 1:
                await self.pacer.wait()
        return responses

    async def run(self, images) -> ExtractionRun:
        if images is None or not isinstance(images, list):
            raise InvalidInput("No images provided")

        responses = await self.collect(images)
        pages = [parse_page(raw, i) for i, raw in enumerate(responses)]
        result = merge_pages(pages)
        skipped = sum(1 for p in pages if not p.ok)

        logger.info(f"Extracted {len(result.transactions)} transactions ({skipped}/{len(pages)} page(s) skipped)")
        return ExtractionRun(result=result, pages_total=len(pages), pages_skipped=skipped)

    async def extract(self, images) -> ExtractionResult:
        run = await self.run(images)
        return run.result
