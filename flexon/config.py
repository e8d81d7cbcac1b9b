"""Settings that control which relaxations of JSON the parser accepts."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class RTConfig:
    """Parser settings chosen at run time.

    By default commas are required, trailing commas are rejected and
    comments are not allowed. Builder methods return a new configuration.
    """

    commas_optional: bool = False
    trailing_commas_allowed: bool = False
    comments_allowed: bool = False

    def require_comma(self, v: bool) -> RTConfig:
        """Make commas mandatory (True) or optional (False).

        Optional commas imply that trailing commas are allowed.
        """
        return replace(self, commas_optional=not v, trailing_commas_allowed=not v)

    def allow_trailing_comma(self, v: bool) -> RTConfig:
        """Allow or reject trailing commas; no effect when commas are optional."""
        return replace(self, trailing_commas_allowed=v or self.commas_optional)

    def allow_comments(self, v: bool) -> RTConfig:
        """Allow or reject comments."""
        return replace(self, comments_allowed=v)

    def comma(self) -> bool:
        """Whether commas may be left out."""
        return self.commas_optional

    def trailing_comma(self) -> bool:
        """Whether a comma may follow the last element."""
        return self.trailing_commas_allowed

    def comments(self) -> bool:
        """Whether comments are accepted."""
        return self.comments_allowed


@dataclass(frozen=True)
class CTConfig:
    """Fixed parser settings, each relaxation switched on at most once.

    Each builder method may only be used while its setting is still at the
    default; using it again raises TypeError.
    """

    commas_required: bool = True
    trailing_commas: bool = False
    comments_allowed: bool = False

    def optional_comma(self) -> CTConfig:
        """Make commas optional; trailing commas then become allowed too."""
        if not self.commas_required:
            raise TypeError("commas are already optional")
        return replace(self, commas_required=False, trailing_commas=True)

    def allow_trailing_comma(self) -> CTConfig:
        """Allow trailing commas."""
        if self.trailing_commas:
            raise TypeError("trailing commas are already allowed")
        return replace(self, trailing_commas=True)

    def allow_comments(self) -> CTConfig:
        """Allow comments."""
        if self.comments_allowed:
            raise TypeError("comments are already allowed")
        return replace(self, comments_allowed=True)

    def comma(self) -> bool:
        """Whether commas may be left out."""
        return not self.commas_required

    def trailing_comma(self) -> bool:
        """Whether a comma may follow the last element."""
        return self.trailing_commas or not self.commas_required

    def comments(self) -> bool:
        """Whether comments are accepted."""
        return self.comments_allowed