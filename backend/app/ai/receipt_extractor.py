"""
Receipt VAT Extractor
Sends a receipt image to a vision model and reads back the VAT amount.

Flow:
  1. Encode the image as a base64 data URL
  2. Ask the model for {"vatAmount": <number>} in JSON mode
  3. Parse the number; a missing value means no VAT was printed (0)

Every provider is reached through the OpenAI-compatible chat completions API,
so switching between Gemini, OpenAI and OpenRouter is a settings change.
Any failure surfaces as ReceiptExtractionError; there is no retry.
"""

import base64
import json
import logging
import math

from openai import AsyncOpenAI

from app.config import get_settings
from app.ai.prompts import RECEIPT_VAT_PROMPT, RECEIPT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

ACCEPTED_MIME_TYPES = ("image/png", "image/jpeg", "image/webp")
EXTRACTION_FAILED_MESSAGE = "Failed to extract VAT from receipt. Please try again."

PROVIDER_CONFIG = {
    "gemini": {
        "base_url": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "api_key_setting": "GEMINI_API_KEY",
    },
    "openai": {
        "base_url": "https://api.openai.com/v1",
        "api_key_setting": "OPENAI_API_KEY",
    },
    "openrouter": {
        "base_url": "https://openrouter.ai/api/v1",
        "api_key_setting": "OPENROUTER_API_KEY",
    },
}


class ReceiptExtractionError(Exception):
    """Raised when the VAT amount could not be read from a receipt."""

    def __init__(self, message: str = EXTRACTION_FAILED_MESSAGE):
        super().__init__(message)
        self.message = message


class ReceiptVATExtractor:
    def __init__(self, client: AsyncOpenAI | None = None, model: str | None = None):
        settings = get_settings()
        self.provider = settings.RECEIPT_PROVIDER
        self.model = model or settings.RECEIPT_MODEL
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            settings = get_settings()
            config = PROVIDER_CONFIG.get(self.provider, PROVIDER_CONFIG["gemini"])
            self._client = AsyncOpenAI(
                base_url=config["base_url"],
                api_key=getattr(settings, config["api_key_setting"]),
            )
        return self._client

    def _build_messages(self, image_bytes: bytes, mime_type: str) -> list[dict]:
        encoded = base64.b64encode(image_bytes).decode("ascii")
        return [
            {"role": "system", "content": RECEIPT_SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "image_url", "image_url": {"url": f"data:{mime_type};base64,{encoded}"}},
                    {"type": "text", "text": RECEIPT_VAT_PROMPT},
                ],
            },
        ]

    @staticmethod
    def parse_vat_amount(content: str) -> float:
        payload = json.loads(content)
        if not isinstance(payload, dict):
            raise ValueError("Expected a JSON object")

        value = payload.get("vatAmount")
        if value is None:
            return 0.0
        if isinstance(value, bool):
            raise ValueError("vatAmount must be a number")

        amount = float(value)
        if not math.isfinite(amount):
            raise ValueError("vatAmount must be finite")
        return max(amount, 0.0)

    async def extract_vat(self, image_bytes: bytes, mime_type: str) -> float:
        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                messages=self._build_messages(image_bytes, mime_type),
                response_format={"type": "json_object"},
                temperature=0,
            )
            content = response.choices[0].message.content or ""
            return self.parse_vat_amount(content.strip())
        except Exception as e:
            logger.warning("Receipt VAT extraction failed: %s", e)
            raise ReceiptExtractionError() from e
