# statement_extractor/schema.py
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

CATEGORIES = (
    "food",
    "shopping",
    "leisure",
    "transport",
    "utilities",
    "healthcare",
    "transfer",
    "unknown",
)

# Illustrative members of each bucket, shown to the model
CATEGORY_EXAMPLES = {
    "food": "restaurants, groceries, cafes, food delivery",
    "shopping": "retail stores, online shopping, clothing, electronics",
    "leisure": "entertainment, movies, games, sports, hobbies",
    "transport": "fuel, parking, public transport, ride-sharing, car services",
    "utilities": "electricity, water, gas, internet, phone bills",
    "healthcare": "medical, pharmacy, insurance, dental",
    "transfer": "bank transfers, atm withdrawals, peer-to-peer payments",
    "unknown": "unclear or unidentifiable transactions",
}

# Transactions are passed through exactly as the model emitted them
RawTransaction = Any

class ExtractRequest(BaseModel):
    images: List[str]

class ExtractionResult(BaseModel):
    initial_balance: Optional[float] = None
    transactions: List[RawTransaction] = Field(default_factory=list)

class ErrorResponse(BaseModel):
    error: str

# Consumer-side shapes, built downstream from an ExtractionResult
class Transaction(BaseModel):
    date: str
    description: str
    amount: float
    category: str

class AnalysisData(BaseModel):
    initial_balance: float
    final_balance: float
    total_income: float
    total_expenditure: float
    expenditure_by_category: Dict[str, float] = Field(default_factory=dict)
    transaction_details: List[Transaction] = Field(default_factory=list)

class ParsedPage(BaseModel):
    initial_balance: Optional[float] = None
    transactions: List[RawTransaction] = Field(default_factory=list)
