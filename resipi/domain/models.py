from enum import Enum
from typing import Self

import markdown2  # pyright: ignore[reportMissingTypeStubs]


class GenerationStatus(Enum):
    idle = "idle"
    in_flight = "in_flight"
    done = "done"


class ResultKind(Enum):
    empty = "empty"
    text = "text"
    failure = "failure"


class RecipeResult:
    """Exactly one of nothing yet, recipe markdown, or a message for the user."""

    @classmethod
    def empty(cls) -> Self:
        return cls(ResultKind.empty)

    @classmethod
    def from_text(cls, text: str) -> Self:
        return cls(ResultKind.text, text=text)

    @classmethod
    def failure(cls, message: str) -> Self:
        return cls(ResultKind.failure, message=message)

    def __init__(
        self,
        kind: ResultKind,
        *,
        text: str | None = None,
        message: str | None = None,
    ) -> None:
        self.kind = kind
        self.text = text if kind is ResultKind.text else None
        self.message = message if kind is ResultKind.failure else None

    def __repr__(self) -> str:
        return f"<RecipeResult(kind={self.kind.value})>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecipeResult):
            return NotImplemented
        return (self.kind, self.text, self.message) == (
            other.kind,
            other.text,
            other.message,
        )

    @property
    def is_empty(self) -> bool:
        return self.kind is ResultKind.empty

    @property
    def html(self) -> str:
        if self.text is None:
            return ""
        return markdown2.markdown(  # pyright: ignore[reportUnknownVariableType, reportUnknownMemberType]
            self.text,
            extras=["fences", "tables", "strike"],
            safe_mode="escape",
        )

    def to_dict(self) -> dict[str, str | None]:
        return {
            "kind": self.kind.value,
            "text": self.text,
            "message": self.message,
        }
