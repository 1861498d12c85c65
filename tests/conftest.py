# tests/conftest.py
import json
import pytest
from fastapi.testclient import TestClient

# Import the app instance
from app.main import app

# -------- Test client --------
@pytest.fixture(scope="session")
def client():
    return TestClient(app)

# -------- Sample data --------
def sample_story() -> dict:
    return {
        "title_en": "The Kind Cat of Nowruz",
        "title_fa": "گربه‌ی مهربان نوروز",
        "cultural_footnote": "The Haft-Seen table holds seven items starting with 'S' in Farsi.",
        "story_pairs": [
            {"en": "Mina found a little cat by the Haft-Seen.", "fa": "مینا کنار سفره‌ی هفت‌سین یک گربه‌ی کوچولو پیدا کرد."},
            {"en": "She shared her sabzeh and gave it warm milk.", "fa": "او سبزه‌اش را نشانش داد و به او شیر گرم داد."},
        ],
    }

def valid_request() -> dict:
    return {"userTopic": "a kind cat", "theme": "Nowruz", "valueInstruction": "kindness to animals"}

# -------- Mocks for Gemini --------
class _MockPart:
    def __init__(self, text):
        self.text = text

class _MockContent:
    def __init__(self, parts):
        self.parts = parts

class _MockCandidate:
    def __init__(self, content):
        self.content = content

class MockGenerateResponse:
    def __init__(self, candidates):
        self.candidates = candidates

    @classmethod
    def with_text(cls, text):
        return cls([_MockCandidate(_MockContent([_MockPart(text)]))])

    @classmethod
    def no_candidates(cls):
        return cls([])

    @classmethod
    def no_content(cls):
        return cls([_MockCandidate(None)])

    @classmethod
    def no_parts(cls):
        return cls([_MockCandidate(_MockContent([]))])

class _FakeModels:
    def __init__(self):
        self.calls = []
        self.response = MockGenerateResponse.with_text(json.dumps(sample_story(), ensure_ascii=False))
        self.error = None

    def reply_text(self, text):
        self.response = MockGenerateResponse.with_text(text)

    def reply_empty(self, kind="no_candidates"):
        # no_candidates | no_content | no_parts | empty_text
        if kind == "empty_text":
            self.response = MockGenerateResponse.with_text("")
        else:
            self.response = getattr(MockGenerateResponse, kind)()

    async def generate_content(self, **kwargs):
        # Mimic shape: resp.candidates[0].content.parts[0].text
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response

class FakeGeminiClient:
    def __init__(self):
        class _Aio: pass
        self.aio = _Aio()
        self.aio.models = _FakeModels()

    @property
    def models(self):
        return self.aio.models

@pytest.fixture(autouse=True)
def fake_gemini(monkeypatch):
    """
    Auto-mock the shared Gemini client so tests don't hit the network.
    Tests tweak .models.response / .models.error and inspect .models.calls.
    """
    from app.lib import gemini_client

    fake = FakeGeminiClient()
    monkeypatch.setattr(gemini_client, "_client", fake)
    yield fake

@pytest.fixture
def story_payload():
    return sample_story()

@pytest.fixture
def story_request():
    return valid_request()
