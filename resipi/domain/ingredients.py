from typing import Iterable, Iterator


def normalise(name: str) -> str:
    return name.strip()


class IngredientSet:
    """Ordered ingredient names, unique ignoring case.

    Adding something already present, or something that is only whitespace,
    does nothing. Removing a position that does not exist does nothing.
    """

    def __init__(self, names: Iterable[str] | None = None) -> None:
        self._names: list[str] = []
        for name in names or ():
            self.add(name)

    def __repr__(self) -> str:
        return f"<IngredientSet({self._names!r})>"

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __getitem__(self, position: int) -> str:
        return self._names[position]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        key = normalise(name).casefold()
        return any(n.casefold() == key for n in self._names)

    def add(self, name: str) -> None:
        name = normalise(name)
        if not name or name in self:
            return
        self._names.append(name)

    def remove(self, position: int) -> None:
        if 0 <= position < len(self._names):
            del self._names[position]

    def snapshot(self) -> tuple[str, ...]:
        return tuple(self._names)
