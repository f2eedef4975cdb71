import logging
from typing import Callable, Sequence

from resipi.domain.errors import ValidationError
from resipi.domain.llm_service import TextGenerator
from resipi.domain.models import GenerationStatus, RecipeResult
from resipi.domain.prompts import RecipePrompt


logger = logging.getLogger(__name__)


EMPTY_INGREDIENTS_MESSAGE = "Please add at least one ingredient."
FAILURE_MESSAGE = "Sorry, the AI chef had a problem. Please try again."


class RecipeRequestController:
    """Runs one recipe request at a time and remembers what came back.

    Nothing stops `generate` being awaited twice at once; whichever request
    resolves last wins. Callers disable their trigger while `status` is
    `GenerationStatus.in_flight`.
    """

    def __init__(self, llm: TextGenerator) -> None:
        self.llm = llm
        self.status = GenerationStatus.idle
        self.result = RecipeResult.empty()
        self._listeners: list[Callable[["RecipeRequestController"], None]] = []

    def subscribe(
        self, callback: Callable[["RecipeRequestController"], None]
    ) -> Callable[[], None]:
        """Call `callback` after every change. Returns an unsubscribe function."""
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback)

    def _set(self, status: GenerationStatus, result: RecipeResult) -> None:
        self.status = status
        self.result = result
        logger.debug("Recipe request %s, result %s", status.value, result.kind.value)
        for callback in list(self._listeners):
            callback(self)

    async def generate(self, ingredients: Sequence[str]) -> RecipeResult:
        if not ingredients:
            raise ValidationError(EMPTY_INGREDIENTS_MESSAGE)

        prompt = str(RecipePrompt(ingredients))
        self._set(GenerationStatus.in_flight, RecipeResult.empty())

        try:
            text = await self.llm.generate_text(prompt)
        except Exception:
            logger.exception("Recipe generation failed for %s", list(ingredients))
            self._set(GenerationStatus.done, RecipeResult.failure(FAILURE_MESSAGE))
        else:
            self._set(GenerationStatus.done, RecipeResult.from_text(text))

        return self.result
