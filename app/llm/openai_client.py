import json
import logging
from typing import Optional

import httpx
import openai
from openai import AsyncOpenAI

from app.core.config import Settings
from app.core.errors import SecondaryCallError, UpstreamCallError, UpstreamParseError

logger = logging.getLogger(__name__)


class OpenAIClient:
    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        # one outbound call per step, failures surface immediately
        self.client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY, max_retries=0, http_client=http_client)
        self.model_name = settings.TEXT_MODEL
        self.image_model = settings.IMAGE_MODEL
        self.image_size = settings.IMAGE_SIZE


    async def generate_json(self, messages: list[dict]) -> dict:
        """ Chat completion in JSON mode, parsed into a dict"""
        logger.debug("Requesting JSON completion from %s", self.model_name)

        try:
            response = await self.client.chat.completions.create(
                model=self.model_name,
                messages=messages,
                response_format={"type": "json_object"},
            )
        except openai.OpenAIError as e:
            raise UpstreamCallError(f"Text generation failed: {e}") from e

        if not response.choices:
            raise UpstreamParseError("Text generation returned no choices")
        content = response.choices[0].message.content

        # ---------- TOKEN USAGE ----------
        if response.usage:
            usage = response.usage
            logger.debug(
                "Token usage: prompt=%s completion=%s total=%s",
                usage.prompt_tokens, usage.completion_tokens, usage.total_tokens,
            )

        # ---------- VALIDATION ----------
        if not content:
            raise UpstreamParseError("Text generation returned empty content", content)
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("Failed to parse JSON from %s: %s", self.model_name, content)
            raise UpstreamParseError(f"Invalid JSON from text generation: {e}", content) from e

        if not isinstance(data, dict):
            logger.error("Expected a JSON object from %s, got: %s", self.model_name, content)
            raise UpstreamParseError("Text generation did not return a JSON object", content)

        return data


    async def generate_image(self, prompt: str) -> Optional[str]:
        """ Generate one image and return its URL (or a data URL for base64 output)"""
        logger.debug("Requesting %s image from %s", self.image_size, self.image_model)

        try:
            result = await self.client.images.generate(
                model=self.image_model,
                prompt=prompt,
                size=self.image_size,
                n=1,
            )
        except openai.OpenAIError as e:
            raise SecondaryCallError(f"Image generation failed: {e}") from e

        if not result.data:
            return None
        image = result.data[0]
        if image.url:
            return image.url
        # gpt-image models only return base64
        if image.b64_json:
            return f"data:image/png;base64,{image.b64_json}"
        return None


    async def close(self):
        await self.client.close()
