"""Shared fakes for the vision model and the inter-page pause."""

from typing import Dict, List

import pytest

from statement_extractor.extractor import Extractor, Pacer


class FakeVision:
    """Returns canned replies keyed by image payload and records every call."""

    def __init__(self, replies: Dict[str, str], fail_on: Dict[str, Exception] = None, events: List[str] = None):
        self.replies = replies
        self.fail_on = fail_on or {}
        self.events = events if events is not None else []
        self.calls: List[str] = []
        self.prompts: List[str] = []

    async def __call__(self, image: str, prompt: str) -> str:
        self.calls.append(image)
        self.events.append(f"call:{image}")
        self.prompts.append(prompt)
        if image in self.fail_on:
            raise self.fail_on[image]
        return self.replies.get(image, "")


class RecordingSleep:
    def __init__(self, events: List[str] = None):
        self.delays: List[float] = []
        self.events = events if events is not None else []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)
        self.events.append("sleep")


PAGE_A = (
    '```json\n{"initial_balance": 500, "transactions":[{"date":"2024-01-02",'
    '"description":"Coffee","type":"debit","amount":-4.5}]}\n```'
)
PAGE_B = (
    '{"transactions":[{"date":"2024-01-03","description":"Salary",'
    '"type":"credit","amount":2000}]}'
)


@pytest.fixture
def events():
    return []


@pytest.fixture
def sleeper(events):
    return RecordingSleep(events)


@pytest.fixture
def make_extractor(sleeper):
    def _make(vision: FakeVision, interval: float = 1.0) -> Extractor:
        return Extractor(describe=vision, pacer=Pacer(interval, sleep=sleeper))
    return _make
