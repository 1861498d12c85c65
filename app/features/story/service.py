# app/features/story/service.py
import json
from typing import Any, Dict, Optional
from google.genai import types
from pydantic import ValidationError
from app.config import config
from app.errors import UpstreamEmpty
from app.lib import gemini_client
from app.logger import get_logger
from .prompt import build_system_prompt, build_user_text
from .schemas import GenerationRequest, StoryResult, RESPONSE_SCHEMA

log = get_logger(__name__)

def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON and cannot be rendered back to the caller
    raise ValueError(f"non-standard JSON constant {name}")

def _first_part_text(response: Any) -> Optional[str]:
    """Text of candidates[0].content.parts[0], or None if any link is missing."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return None
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return None
    return getattr(parts[0], "text", None)

def _generation_config(system_prompt: str) -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        system_instruction=system_prompt,
        response_mime_type="application/json",
        response_schema=RESPONSE_SCHEMA,
    )

async def generate_story(req: GenerationRequest) -> Dict[str, Any]:
    system_prompt = build_system_prompt(theme=req.theme, value_instruction=req.value_instruction)
    contents = [
        types.Content(role="user", parts=[types.Part(text=build_user_text(req.user_topic))]),
    ]

    client = gemini_client.get_client()
    response = await client.aio.models.generate_content(
        model=config.gemini_model,
        contents=contents,
        config=_generation_config(system_prompt),
    )

    raw = _first_part_text(response)
    if not raw:
        log.error(f"[story] Gemini returned no usable content for topic={req.user_topic!r}")
        raise UpstreamEmpty()

    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise ValueError(f"Model did not return valid JSON: {e}\nRaw: {raw}") from e

    if config.strict_story_schema:
        try:
            StoryResult.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Model JSON failed validation: {e}\nData: {data}") from e

    return data
