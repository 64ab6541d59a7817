import httpx
from typing import Dict, List, Optional

from .config import GROQ_API_KEY, VISION_API_URL, VISION_MAX_TOKENS, VISION_MODEL, VISION_TIMEOUT
from .schema import CATEGORIES, CATEGORY_EXAMPLES

_PROMPT_HEAD = r"""
Extract ALL visible transaction data from this bank statement page. Return ONLY a JSON object with this structure:

{
  "initial_balance": 1000.00,
  "transactions": [
    {
      "date": "YYYY-MM-DD",
      "description": "transaction description",
      "type": "TYPE HERE",
      "amount": -123.45
    }
  ]
}

IMPORTANT INSTRUCTIONS:
- Extract the INITIAL/OPENING balance from the statement (usually shown at the top or beginning)
- If you can't find an explicit initial balance, use the balance from the first transaction
- For transactions, use negative amounts for debits/expenditures, positive for credits/income
- Include the running balance after each transaction if visible
- If you can't read a field clearly, use null
- Return only the JSON object, no other text
- Only give the initial balance from the first page, not subsequent pages
- The initial balance should be the first value in the JSON object, outside the transactions array
- Do not deviate from the structure, do not add extra fields
- ALL CREDITS ARE POSITIVE, ALL DEBITS ARE NEGATIVE

categorization rules:
""".strip()


def build_category_rules() -> str:
    return "\n".join(f"- {name}: {CATEGORY_EXAMPLES[name]}" for name in CATEGORIES)


EXTRACTION_PROMPT = _PROMPT_HEAD + "\n" + build_category_rules()


def build_messages(image_b64: str, prompt: str = EXTRACTION_PROMPT) -> List[Dict]:
    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": prompt},
                {
                    "type": "image_url",
                    "image_url": {"url": f"data:image/jpeg;base64,{image_b64}"},
                },
            ],
        }
    ]


def _headers() -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if GROQ_API_KEY:
        headers["Authorization"] = f"Bearer {GROQ_API_KEY}"
    return headers


def _content_of(data) -> str:
    if isinstance(data, dict):
        choices = data.get("choices") or []
        if choices and isinstance(choices[0], dict):
            message = choices[0].get("message") or {}
            content = message.get("content")
            if isinstance(content, str):
                return content
    return ""


async def describe_image(
    image_b64: str,
    prompt: str = EXTRACTION_PROMPT,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    Sends one page image plus the prompt to the vision model and returns the
    reply text ("" when the model sent no content).
    Raises httpx.HTTPError for network and HTTP status errors.
    """
    payload = {
        "model": VISION_MODEL,
        "messages": build_messages(image_b64, prompt),
        "max_tokens": VISION_MAX_TOKENS,
        "stream": False,
    }
    if client is None:
        async with httpx.AsyncClient(timeout=VISION_TIMEOUT) as own_client:
            r = await own_client.post(VISION_API_URL, json=payload, headers=_headers())
    else:
        r = await client.post(VISION_API_URL, json=payload, headers=_headers())
    r.raise_for_status()
    return _content_of(r.json())
