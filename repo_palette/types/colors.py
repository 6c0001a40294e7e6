"""Color collection data models."""

from collections.abc import Iterable, Iterator


class ColorSet:
    """
    Insertion-ordered set of canonical hex colors.

    Iteration yields colors in first-seen order, which decides tile
    placement in the rendered grid.
    """

    def __init__(self, colors: Iterable[str] = ()) -> None:
        self._colors: dict[str, None] = {}
        self.update(colors)

    def add(self, color: str) -> None:
        """Add a color, keeping the position of its first occurrence."""
        self._colors.setdefault(color, None)

    def update(self, colors: Iterable[str]) -> None:
        """Add every color from an iterable, in order."""
        for color in colors:
            self.add(color)

    def to_list(self) -> list[str]:
        return list(self._colors)

    def __contains__(self, color: object) -> bool:
        return color in self._colors

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorSet):
            return self.to_list() == other.to_list()
        return NotImplemented

    def __repr__(self) -> str:
        return f"ColorSet({self.to_list()!r})"
