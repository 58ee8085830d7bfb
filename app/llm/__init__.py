from app.llm.openai_client import OpenAIClient
from app.llm.llm_manager import get_llm
