import logging
from typing import Optional

from app.core.errors import SecondaryCallError
from app.llm.openai_client import OpenAIClient

logger = logging.getLogger(__name__)


class ImageServices:
    """ Best-effort illustrations. A failed image never fails the request."""

    def __init__(self, llm: OpenAIClient, enabled: bool = True):
        self.llm = llm
        self.enabled = enabled

    async def try_generate(self, prompt: str, purpose: str) -> Optional[str]:
        if not self.enabled:
            return None
        try:
            image_url = await self.llm.generate_image(prompt)
        except SecondaryCallError:
            logger.exception("Image generation error for %s", purpose)
            return None
        if image_url is None:
            logger.warning("Image generation for %s returned no image", purpose)
        return image_url
