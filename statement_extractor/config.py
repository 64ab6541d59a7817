import os

# OpenAI-compatible chat completions endpoint (Groq by default)
VISION_API_URL = os.getenv("VISION_API_URL", "https://api.groq.com/openai/v1/chat/completions")
GROQ_API_KEY = os.getenv("GROQ_API_KEY", "")

VISION_MODEL = os.getenv("VISION_MODEL", "meta-llama/llama-4-maverick-17b-128e-instruct")
VISION_MAX_TOKENS = int(os.getenv("VISION_MAX_TOKENS", "2000"))
VISION_TIMEOUT = float(os.getenv("VISION_TIMEOUT", "180"))

# Pause between consecutive page requests; 0 disables it
PAGE_DELAY_SECONDS = float(os.getenv("PAGE_DELAY_SECONDS", "1.0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
