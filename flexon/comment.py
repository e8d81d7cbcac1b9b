"""Comments found in JSON-with-comments documents."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, repr=False)
class Comment:
    """A single-line or multi-line comment and where it sits in the source.

    ``span`` holds the start and end byte offsets; for a single-line
    comment the end does not include the newline.
    """

    text: str
    multiline: bool = False
    span: tuple[int, int] | None = None

    def __len__(self) -> int:
        """The length of the comment in UTF-8 bytes."""
        return len(self.text.encode("utf-8"))

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return repr(self.text)

    def is_multiline(self) -> bool:
        """Whether this is a multi-line comment."""
        return self.multiline

    def as_str(self) -> str:
        """The comment text."""
        return self.text

    def into_string(self) -> str:
        """The comment text as an independent string."""
        return str(self.text)

    def _span(self) -> tuple[int, int]:
        if self.span is None:
            raise ValueError("comment has no recorded span")
        return self.span

    def start(self) -> int:
        """The starting byte offset of the comment."""
        return self._span()[0]

    def end(self) -> int:
        """The ending byte offset of the comment."""
        return self._span()[1]