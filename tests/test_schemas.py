import pytest
from pydantic import ValidationError

from app.schemas import (
    CustomChoice,
    EvaluateRequest,
    EvaluationLLMResponse,
    OptionChoice,
    ScenarioLLMResponse,
    ScenarioRequest,
)


class TestScenarioRequest:
    def test_month_is_normalized(self):
        request = ScenarioRequest(month="  sePTember ", round=1)
        assert request.month == "September"

    def test_unknown_month_rejected(self):
        with pytest.raises(ValidationError):
            ScenarioRequest(month="Smarch", round=1)

    def test_defaults(self):
        request = ScenarioRequest(month="August", stats=None, usedScenarioIds=None)
        assert request.round == 1
        assert request.usedScenarioIds == []
        assert request.stats.learningScore == 50
        assert request.stats.classSize == 22
        assert request.stats.studentsRemaining == 22

    def test_students_remaining_follows_class_size(self):
        request = ScenarioRequest(month="August", stats={"classSize": 18})
        assert request.stats.studentsRemaining == 18

    def test_scores_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            ScenarioRequest(month="August", stats={"learningScore": 140})


class TestEvaluateRequest:
    def test_choice_variants(self):
        option = EvaluateRequest(month="May", choice={"type": "option", "optionId": "opt-1"})
        custom = EvaluateRequest(month="May", choice={"type": "custom", "customText": None})

        assert isinstance(option.choice, OptionChoice)
        assert isinstance(custom.choice, CustomChoice)
        assert custom.choice.customText == ""

    def test_unknown_choice_type_rejected(self):
        with pytest.raises(ValidationError):
            EvaluateRequest(month="May", choice={"type": "shrug"})

    def test_students_remaining_defaults_to_class_size(self):
        request = EvaluateRequest(month="May", classSize=30, stats=None,
                                  choice={"type": "option", "optionId": "a"})
        assert request.stats.studentsRemaining == 30
        assert request.stats.likabilityScore == 50


class TestScenarioLLMResponse:
    def test_missing_fields(self):
        parsed = ScenarioLLMResponse.model_validate({})
        assert parsed.id is None
        assert parsed.title is None
        assert parsed.prompt is None
        assert parsed.options == []

    def test_ill_typed_fields(self):
        parsed = ScenarioLLMResponse.model_validate({
            "id": 42,
            "title": "   ",
            "prompt": ["not", "text"],
            "options": "four options",
        })
        assert parsed.id == "42"
        assert parsed.title is None
        assert parsed.prompt is None
        assert parsed.options == []

    def test_partial_options(self):
        parsed = ScenarioLLMResponse.model_validate({
            "options": [{"id": "a", "text": "Ask"}, {"text": "Wait"}, "junk", {"id": "d", "text": ""}],
        })
        assert [(o.id, o.text) for o in parsed.options] == [
            ("a", "Ask"), (None, "Wait"), (None, None), ("d", None),
        ]


class TestEvaluationLLMResponse:
    def test_missing_numbers_default_to_zero(self):
        parsed = EvaluationLLMResponse.model_validate({"commentary": "Nice."})
        assert (parsed.learningDelta, parsed.likabilityDelta, parsed.studentsDelta) == (0, 0, 0)
        assert parsed.logHeadline is None
        assert parsed.imagePrompt is None

    def test_loose_numbers(self):
        parsed = EvaluationLLMResponse.model_validate({
            "learningDelta": "7",
            "likabilityDelta": -3.2,
            "studentsDelta": "a few",
        })
        assert (parsed.learningDelta, parsed.likabilityDelta, parsed.studentsDelta) == (7, -3, 0)
