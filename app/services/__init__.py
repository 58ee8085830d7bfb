from app.services.image_services import ImageServices
from app.services.safety_filter import SafetyFilter
from app.services.scenario_services import ScenarioServices
from app.services.evaluation_services import EvaluationServices
