"""
Gemini client that turns a free-text request into a JSON work plan.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from google import genai
from google.genai import types

from .state import FormState

@dataclass(frozen=True)
class GenerationConfig:
    """Fixed request settings, built once at startup and shared by every call."""
    model: str
    system_instruction: str
    response_schema: Dict[str, Any] = field(hash=False)
    response_mime_type: str = "application/json"
    timeout_seconds: Optional[float] = None

    def to_content_config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            system_instruction=self.system_instruction,
            response_mime_type=self.response_mime_type,
            response_schema=self.response_schema,
        )

class ContentGenerator:
    """Sends prompts to the generation service with the fixed config attached."""

    def __init__(self, config: GenerationConfig, client: Optional[Any] = None, api_key: Optional[str] = None):
        self.config = config
        self.content_config = config.to_content_config()
        self.client = client if client is not None else self._initialize_client(api_key)

    def _initialize_client(self, api_key: Optional[str]) -> genai.Client:
        """Initialize the Gemini client."""
        if not api_key:
            logging.warning("Gemini API Key is missing. Falling back to the SDK's environment lookup.")

        http_options = None
        if self.config.timeout_seconds:
            # HttpOptions.timeout is in milliseconds
            http_options = types.HttpOptions(timeout=int(self.config.timeout_seconds * 1000))

        client = genai.Client(api_key=api_key, http_options=http_options)
        logging.info(f"Gemini client initialized for model '{self.config.model}'.")
        return client

    def generate(self, text: str) -> Optional[str]:
        """
        Generates a plan for the given prompt and returns the raw response text.
        The text is expected to be JSON matching the configured schema but is not parsed here.
        Service and network errors propagate to the caller.
        """
        logging.info(f"Requesting generation from '{self.config.model}' ({len(text)} chars).")
        response = self.client.models.generate_content(
            model=self.config.model,
            contents=text,
            config=self.content_config,
        )
        return response.text

    async def generate_async(self, text: str) -> Optional[str]:
        """Awaitable variant of generate(); cancelling the awaiting task abandons the request."""
        logging.info(f"Requesting async generation from '{self.config.model}' ({len(text)} chars).")
        response = await self.client.aio.models.generate_content(
            model=self.config.model,
            contents=text,
            config=self.content_config,
        )
        return response.text

def build_request_text(form: FormState) -> str:
    """Composes the prompt body from the user-entered form fields."""
    lines = [
        f"Business name: {form['businessName']}",
        f"Project name: {form['projectName']}",
        f"Student department: {form['studentDepartment']}",
    ]
    if form["additionalContext"].strip():
        lines.append(f"Additional context: {form['additionalContext']}")
    return "\n".join(lines)
