"""Gemini AI provider implementation."""

import json
import logging
import time
import google.generativeai as genai

from core.interfaces import EnrichmentProvider
from core.config import GEMINI_MODEL, EXAMPLE_WORD_COUNT, ENRICHMENT_TIMEOUT_SECONDS

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class GeminiProvider(EnrichmentProvider):
    """Gemini AI provider implementation."""

    def __init__(self, api_key: str, model_name: str = GEMINI_MODEL,
                 timeout: float = ENRICHMENT_TIMEOUT_SECONDS):
        genai.configure(api_key=api_key)
        self.model = genai.GenerativeModel(model_name)
        self.model_name = model_name
        self.timeout = timeout

    def _execute(self, prompt: str) -> tuple[str, int]:
        start_time = time.time()
        response = self.model.generate_content(
            prompt,
            generation_config={'response_mime_type': 'application/json'},
            request_options={'timeout': self.timeout}
        )
        end_time = time.time()
        ms = int((end_time - start_time) * 1000)
        return (response.text, ms)

    def _sanitize_response(self, text: str) -> str:
        s = text.strip()
        s = s.replace('```json', '').replace('```', '')
        return s[s.find('{'):s.rfind('}')+1]

    def _parse_mnemonic(self, response: str) -> dict:
        sanitized = self._sanitize_response(response)
        try:
            data = json.loads(sanitized)
        except ValueError as e:
            logger.error(f"Failed to parse mnemonic: {e}")
            logger.error(f"Raw response:\n{response}")

            # Try to diagnose the issue
            if '{' not in response:
                logger.error("Diagnosis: No opening brace '{' found in response")
            elif '}' not in response:
                logger.error("Diagnosis: No closing brace '}' found in response")
            elif sanitized.count('{') != sanitized.count('}'):
                logger.error(f"Diagnosis: Mismatched braces - {{ count: {sanitized.count('{')}, }} count: {sanitized.count('}')}")
            else:
                logger.error("Diagnosis: Unknown parsing issue - possibly malformed JSON")
            raise ValueError(f"Unparseable mnemonic response: {e}") from e

        if not isinstance(data, dict):
            logger.warning(f"Mnemonic response is not a dict: {type(data)}")
            raise ValueError("Mnemonic response is not a JSON object")

        missing_keys = [k for k in ('mnemonic', 'examples') if k not in data]
        if missing_keys:
            logger.warning(f"AI response missing keys: {missing_keys}")
            logger.warning(f"Raw response:\n{response}")
            raise ValueError(f"Mnemonic response missing keys: {missing_keys}")

        return {'mnemonic': data['mnemonic'], 'examples': data['examples']}

    def get_mnemonic(self, char: str, romaji: str) -> tuple[dict, int]:
        prompt = f"""
            Generate a short mnemonic and {EXAMPLE_WORD_COUNT} common example words
            (in romaji with English translation) for the Japanese character: {char} ({romaji}).

            Respond with ONLY a JSON object in this exact format:
            {{
                "mnemonic": "A short, catchy mnemonic to remember the character's shape and sound.",
                "examples": [
                    {{"word": "romaji_word", "meaning": "english_meaning"}}
                ]
            }}

            Return ONLY the JSON object, no other text, no markdown formatting.
        """
        response, ms = self._execute(prompt)
        return (self._parse_mnemonic(response), ms)
