import logging
import time
from uuid import uuid4

from app.llm.openai_client import OpenAIClient
from app.prompts.prompt_game_rules import DEFAULT_SCENARIO_PROMPT
from app.prompts.prompt_manager import get_scenario_messages, get_scenario_image_prompt
from app.schemas import ScenarioRequest, ScenarioLLMResponse, ScenarioOption, ScenarioResponse
from app.services.image_services import ImageServices

logger = logging.getLogger(__name__)

MAX_OPTIONS = 4


def new_scenario_id() -> str:
    return f"scenario-{int(time.time() * 1000)}-{uuid4().hex[:6]}"


class ScenarioServices:
    """ Generates one classroom scenario per request"""

    def __init__(self, llm: OpenAIClient, images: ImageServices):
        self.llm = llm
        self.images = images


    async def generate_scenario(self, request: ScenarioRequest) -> ScenarioResponse:
        """ Text call, defaulting, then a best-effort illustration"""
        logger.info("Generating scenario for %s (round %s)", request.month, request.round)

        data = await self.llm.generate_json(get_scenario_messages(request))
        generated = ScenarioLLMResponse.model_validate(data)

        scenario_id = generated.id
        if scenario_id is None or scenario_id in request.usedScenarioIds:
            if scenario_id is not None:
                logger.warning("Model reused scenario id %r, assigning a new one", scenario_id)
            scenario_id = new_scenario_id()

        options = [
            ScenarioOption(
                id=option.id or f"opt-{index}",
                text=option.text or f"Option {index}",
            )
            for index, option in enumerate(generated.options[:MAX_OPTIONS], start=1)
        ]
        if len(options) < MAX_OPTIONS:
            logger.warning("Scenario %s came back with %d options", scenario_id, len(options))

        prompt = generated.prompt or DEFAULT_SCENARIO_PROMPT

        image_url = await self.images.try_generate(
            get_scenario_image_prompt(request.month, prompt), purpose="scenario"
        )

        return ScenarioResponse(
            id=scenario_id,
            title=generated.title or f"{request.month} Situation",
            prompt=prompt,
            options=options,
            imageUrl=image_url,
        )
