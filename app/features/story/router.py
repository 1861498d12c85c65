# app/features/story/router.py
from typing import Any, Dict
from fastapi import APIRouter
from app.errors import InternalError, StoryError
from app.logger import get_logger
from .schemas import GenerationRequest, StoryResult
from .service import generate_story

router = APIRouter(prefix="/api", tags=["story"])
log = get_logger(__name__)

_RESPONSES = {
    200: {"model": StoryResult, "description": "Generated bilingual story"},
    400: {"description": "Missing required parameters"},
    405: {"description": "Method Not Allowed"},
    500: {"description": "Generation failed"},
}

@router.post("/generate", response_model=None, responses=_RESPONSES)
@router.post("/genarate", response_model=None, include_in_schema=False)
async def generate_story_endpoint(req: GenerationRequest) -> Dict[str, Any]:
    """
    Generate one bilingual (English/Farsi) children's story.
    The model's JSON is returned unchanged; every failure is reported as {"message": ...}.
    """
    try:
        return await generate_story(req)
    except StoryError:
        raise
    except Exception as e:
        log.exception(f"Gemini API error: {e}")
        raise InternalError() from e
