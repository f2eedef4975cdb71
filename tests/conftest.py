import os

import pytest

# resipi.app loads its config on import and refuses to start without a key.
os.environ.setdefault("API_KEY", "test-key")


class FakeLLM:
    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text

    async def close(self) -> None:
        pass


RECIPE = """### **Gulai Ayam Cili Padi**

**Description:**
Chicken simmered in santan with a kick of cili padi.

**Ingredients:**
- Santan
- Cili Padi
- Ayam

**Instructions:**
1. Pound the cili padi.
2. Simmer the ayam in santan with the cili padi.
"""


@pytest.fixture
def recipe_text() -> str:
    return RECIPE


@pytest.fixture
def llm() -> FakeLLM:
    return FakeLLM(text=RECIPE)


@pytest.fixture
def failing_llm() -> FakeLLM:
    return FakeLLM(error=ConnectionError("503 from https://example.invalid secret-detail"))
