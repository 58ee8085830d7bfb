from fastapi import Request

from app.llm.openai_client import OpenAIClient


def get_llm(request: Request) -> OpenAIClient:
    """ Process wide client, created once by the app factory"""
    return request.app.state.llm
