"""Browser-style page history with back and forward navigation."""

from __future__ import annotations


class History:
    """Pages visited in order, with a cursor on the current page."""

    def __init__(self, homepage: str) -> None:
        self._pages = [homepage]
        self._index = 0

    @property
    def current(self) -> str:
        """The page currently shown."""
        return self._pages[self._index]

    def visit(self, page: str) -> None:
        """Open ``page`` after the current one, discarding any forward history."""
        del self._pages[self._index + 1:]
        self._pages.append(page)
        self._index += 1

    def back(self, steps: int) -> int:
        """Go back up to ``steps`` pages; return how many were actually taken."""
        if steps <= 0:
            raise ValueError("steps must be positive")
        if self._index == 0:
            raise IndexError("you cannot go back")
        moved = min(steps, self._index)
        self._index -= moved
        return moved

    def forward(self, steps: int) -> int:
        """Go forward up to ``steps`` pages; return how many were actually taken."""
        if steps <= 0:
            raise ValueError("steps must be positive")
        remaining = len(self._pages) - 1 - self._index
        if remaining == 0:
            raise IndexError("you cannot go forward")
        moved = min(steps, remaining)
        self._index += moved
        return moved

    def __repr__(self) -> str:
        return f"{type(self).__name__}(current={self.current!r})"