from collections import OrderedDict
from typing import Any, Iterable
import uuid

from resipi.domain.controller import RecipeRequestController
from resipi.domain.ingredients import IngredientSet
from resipi.domain.llm_service import TextGenerator
from resipi.domain.models import GenerationStatus, RecipeResult


class RecipeSession:
    """Everything one browser sees: its ingredients and its latest recipe."""

    def __init__(
        self,
        *,
        llm: TextGenerator,
        ingredients: Iterable[str] = (),
    ) -> None:
        self.ingredients = IngredientSet(ingredients)
        self.controller = RecipeRequestController(llm)

    @property
    def status(self) -> GenerationStatus:
        return self.controller.status

    @property
    def result(self) -> RecipeResult:
        return self.controller.result

    @property
    def can_generate(self) -> bool:
        return bool(self.ingredients) and self.status != GenerationStatus.in_flight

    def add(self, name: str) -> None:
        self.ingredients.add(name)

    def remove(self, position: int) -> None:
        self.ingredients.remove(position)

    async def generate(self) -> RecipeResult:
        return await self.controller.generate(self.ingredients.snapshot())

    def to_dict(self) -> dict[str, Any]:
        return {
            "ingredients": list(self.ingredients),
            "status": self.status.value,
            "result": self.result.to_dict(),
        }


class SessionStore:
    """In memory sessions, least recently used dropped first when full."""

    def __init__(
        self,
        *,
        llm: TextGenerator,
        initial_ingredients: Iterable[str] = (),
        max_sessions: int = 1000,
    ) -> None:
        self.llm = llm
        self.initial_ingredients = tuple(initial_ingredients)
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, RecipeSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def get_or_create(self, session_id: str | None) -> tuple[str, RecipeSession]:
        if session_id is not None and session_id in self._sessions:
            self._sessions.move_to_end(session_id)
            return session_id, self._sessions[session_id]

        session_id = uuid.uuid4().hex
        session = RecipeSession(llm=self.llm, ingredients=self.initial_ingredients)
        self._sessions[session_id] = session
        while len(self._sessions) > self.max_sessions:
            self._sessions.popitem(last=False)
        return session_id, session

    def discard(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)
