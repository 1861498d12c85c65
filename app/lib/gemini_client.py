# app/lib/gemini_client.py
from google import genai
from app.config import config

_client: genai.Client | None = None

def get_client() -> genai.Client:
    """
    Shared Gemini client, created on first use.
    Construction fails when no API key is available; callers treat that like any other upstream error.
    """
    global _client
    if _client is None:
        _client = genai.Client(api_key=config.gemini_api_key or None)
    return _client
