import json
import logging

from app.prompts.prompt_game_rules import (
    SCENARIO_SYSTEM_PROMPT, SCENARIO_FORMAT_RULES, EVALUATION_SYSTEM_PROMPT, EVALUATION_FORMAT_RULES,
    IMAGE_SCENE, IMAGE_SCENE_WITH_TOWN, IMAGE_STYLE, SCENARIO_IMAGE_STYLE, CATASTROPHIC_IMAGE_PROMPT,
)
from app.schemas import ScenarioRequest, EvaluateRequest, Choice, CustomChoice, OptionChoice

logger = logging.getLogger(__name__)

CHOICE_SUMMARY_LIMIT = 200


def get_scenario_messages(request: ScenarioRequest) -> list[dict]:
    stats = request.stats
    payload = {
        "month": request.month,
        "round": request.round,
        "context": {
            "learningScore": stats.learningScore,
            "likabilityScore": stats.likabilityScore,
            "studentsRemaining": stats.studentsRemaining,
            "classSize": stats.classSize,
        },
        "usedScenarioIds": request.usedScenarioIds,
    }
    logger.debug("Scenario prompt built (month=%s, round=%s, used=%d)",
                 request.month, request.round, len(request.usedScenarioIds))
    return [
        {"role": "system", "content": SCENARIO_SYSTEM_PROMPT},
        {"role": "user", "content": json.dumps(payload)},
        {"role": "user", "content": SCENARIO_FORMAT_RULES},
    ]


def get_evaluation_messages(request: EvaluateRequest) -> list[dict]:
    stats = request.stats
    payload = {
        "month": request.month,
        "round": request.round,
        "classSize": request.classSize,
        "currentScores": {
            "learningScore": stats.learningScore,
            "likabilityScore": stats.likabilityScore,
            "studentsRemaining": stats.studentsRemaining,
        },
        "scenarioId": request.scenarioId,
        "choice": request.choice.model_dump(),
    }
    logger.debug("Evaluation prompt built (scenario=%s, choice=%s)", request.scenarioId, request.choice.type)
    return [
        {"role": "system", "content": EVALUATION_SYSTEM_PROMPT},
        {"role": "user", "content": json.dumps(payload)},
        {"role": "user", "content": EVALUATION_FORMAT_RULES},
    ]


def get_scenario_image_prompt(month: str, scenario_prompt: str) -> str:
    return " ".join([
        IMAGE_SCENE_WITH_TOWN,
        f"Month: {month}.",
        "Show the situation described here, but do not include any text in the image:",
        scenario_prompt,
        "",
        SCENARIO_IMAGE_STYLE,
    ])


def get_catastrophic_image_prompt() -> str:
    return CATASTROPHIC_IMAGE_PROMPT


def summarize_choice(choice: Choice) -> str:
    """Short description of the player's answer for the recap image"""
    if isinstance(choice, CustomChoice):
        return f'Teacher chose a custom response: "{choice.customText[:CHOICE_SUMMARY_LIMIT]}"'
    if isinstance(choice, OptionChoice) and choice.optionId:
        return f'Teacher chose option id "{choice.optionId}".'
    return ""


def get_decision_image_prompt(image_prompt: str, choice: Choice) -> str:
    return " ".join([IMAGE_SCENE, image_prompt, summarize_choice(choice), IMAGE_STYLE])
