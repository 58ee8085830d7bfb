import logging
import random

from app.core.scoring import (
    CATASTROPHIC_LEARNING_DELTA, CATASTROPHIC_LIKABILITY_DELTA, DELTA_LIMIT, NOISE_SPREAD, STUDENTS_LIMIT,
    add_noise, catastrophic_students_loss, clamp, signed,
)
from app.llm.openai_client import OpenAIClient
from app.prompts.prompt_game_rules import CATASTROPHIC_COMMENTARY, CATASTROPHIC_HEADLINE, DEFAULT_COMMENTARY
from app.prompts.prompt_manager import get_evaluation_messages, get_catastrophic_image_prompt, get_decision_image_prompt
from app.schemas import EvaluateRequest, EvaluationLLMResponse, EvaluationResponse, CustomChoice
from app.services.image_services import ImageServices
from app.services.safety_filter import SafetyFilter

logger = logging.getLogger(__name__)


class EvaluationServices:
    """ Scores the player's decision for one round.

    Custom answers go through the safety filter first. A match skips the
    text model entirely and returns the fixed catastrophic outcome;
    everything else is scored by the model, perturbed and clamped.
    """

    def __init__(self, llm: OpenAIClient, images: ImageServices, safety_filter: SafetyFilter,
                 rng: random.Random = None):
        self.llm = llm
        self.images = images
        self.safety_filter = safety_filter
        self.rng = rng or random.Random()


    async def evaluate(self, request: EvaluateRequest) -> EvaluationResponse:
        if self.is_catastrophic(request):
            return await self.catastrophic_outcome(request)
        return await self.scored_outcome(request)


    def is_catastrophic(self, request: EvaluateRequest) -> bool:
        if not isinstance(request.choice, CustomChoice):
            return False
        return self.safety_filter.is_catastrophic(request.choice.customText)


    async def catastrophic_outcome(self, request: EvaluateRequest) -> EvaluationResponse:
        logger.warning("Custom answer for scenario %s tripped the safety filter", request.scenarioId)

        decision_image_url = await self.images.try_generate(
            get_catastrophic_image_prompt(), purpose="catastrophic decision"
        )
        return EvaluationResponse(
            learningDelta=CATASTROPHIC_LEARNING_DELTA,
            likabilityDelta=CATASTROPHIC_LIKABILITY_DELTA,
            studentsDelta=-catastrophic_students_loss(request.classSize),
            commentary=CATASTROPHIC_COMMENTARY,
            logHeadline=CATASTROPHIC_HEADLINE,
            decisionImageUrl=decision_image_url,
        )


    async def scored_outcome(self, request: EvaluateRequest) -> EvaluationResponse:
        logger.info("Scoring %s choice for scenario %s", request.choice.type, request.scenarioId)

        data = await self.llm.generate_json(get_evaluation_messages(request))
        scored = EvaluationLLMResponse.model_validate(data)

        learning_delta = clamp(add_noise(scored.learningDelta, NOISE_SPREAD, self.rng), -DELTA_LIMIT, DELTA_LIMIT)
        likability_delta = clamp(add_noise(scored.likabilityDelta, NOISE_SPREAD, self.rng), -DELTA_LIMIT, DELTA_LIMIT)
        students_delta = clamp(scored.studentsDelta, -STUDENTS_LIMIT, STUDENTS_LIMIT)

        log_headline = scored.logHeadline or (
            f"Learning {signed(learning_delta)}, "
            f"Likability {signed(likability_delta)}, "
            f"Students {signed(students_delta)}."
        )

        decision_image_url = None
        if scored.imagePrompt:
            decision_image_url = await self.images.try_generate(
                get_decision_image_prompt(scored.imagePrompt, request.choice), purpose="decision"
            )

        return EvaluationResponse(
            learningDelta=learning_delta,
            likabilityDelta=likability_delta,
            studentsDelta=students_delta,
            commentary=scored.commentary or DEFAULT_COMMENTARY,
            logHeadline=log_headline,
            decisionImageUrl=decision_image_url,
        )
