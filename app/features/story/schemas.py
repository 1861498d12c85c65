# app/features/story/schemas.py
from typing import List
from google.genai import types
from pydantic import BaseModel, ConfigDict, Field

class GenerationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_topic: str = Field(..., alias="userTopic", min_length=1, description="What the story is about")
    theme: str = Field(..., min_length=1, description="Cultural theme, e.g. Nowruz")
    value_instruction: str = Field(..., alias="valueInstruction", min_length=1, description="Cultural value the story must teach")

class StoryPair(BaseModel):
    en: str
    fa: str

class StoryResult(BaseModel):
    title_en: str
    title_fa: str
    cultural_footnote: str
    story_pairs: List[StoryPair]

# -------- Gemini response schema --------

STORY_FIELDS = ["title_en", "title_fa", "cultural_footnote", "story_pairs"]
PAIR_FIELDS = ["en", "fa"]

def _story_response_schema() -> types.Schema:
    def string(description: str) -> types.Schema:
        return types.Schema(type=types.Type.STRING, description=description)

    def obj(props: dict, ordering: List[str]) -> types.Schema:
        # field order in the generated JSON follows property_ordering
        return types.Schema(
            type=types.Type.OBJECT,
            properties=props,
            property_ordering=ordering,
            required=list(ordering),
        )

    pair = obj({
        "en": string("The story text in English."),
        "fa": string("The culturally localized story text in Farsi."),
    }, PAIR_FIELDS)

    return obj({
        "title_en": string("The story title in English."),
        "title_fa": string("The story title in Farsi."),
        "cultural_footnote": string(
            "A short, playful footnote explaining the main cultural element (e.g., Haft-Seen) for parents."
        ),
        "story_pairs": types.Schema(type=types.Type.ARRAY, items=pair),
    }, STORY_FIELDS)

RESPONSE_SCHEMA = _story_response_schema()
