"""Tokens and the TokenList algebra.

A TokenList is a window ``[start, stop)`` over a single immutable buffer
of tokens. Every list derived from one tokenize call (through split,
slicing or consume_until) shares that buffer; trimming and consuming
only move the window bounds, so chains of operations per parsed line
never copy tokens around.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from tokenparse.tokenizer.errors import UnexpectedTokenError, kind_name


@dataclass(frozen=True)
class Token:
    """A classified span of source text.

    Attributes:
        kind: Tag of the rule that produced the token.
        text: Resolved content (section interior with escapes applied).
        raw: Exact source span, delimiters included.
        offset: 0-based character offset of the span.
        line: 1-based line of the span start.
        column: 1-based column of the span start.
    """

    kind: Any
    text: str
    raw: str = ""
    offset: int = 0
    line: int = 1
    column: int = 1

    def __str__(self) -> str:
        return f"[{kind_name(self.kind)}:{self.text}]"


class TokenList:
    """Ordered, mutable sequence of tokens with split/trim/consume operations."""

    __slots__ = ("_buffer", "_start", "_stop")

    def __init__(self, tokens: Iterable[Token] = ()):
        self._buffer: Tuple[Token, ...] = tuple(tokens)
        self._start = 0
        self._stop = len(self._buffer)

    @classmethod
    def _view(cls, buffer: Tuple[Token, ...], start: int, stop: int) -> "TokenList":
        view = cls.__new__(cls)
        view._buffer = buffer
        view._start = start
        view._stop = stop
        return view

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._stop - self._start

    def __bool__(self) -> bool:
        return self._stop > self._start

    def __iter__(self) -> Iterator[Token]:
        for i in range(self._start, self._stop):
            yield self._buffer[i]

    def __getitem__(self, index: Union[int, slice]) -> Union[Token, "TokenList"]:
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step != 1:
                return TokenList(list(self)[index])
            stop = max(start, stop)
            return self._view(self._buffer, self._start + start, self._start + stop)
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("TokenList index out of range")
        return self._buffer[self._start + index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TokenList):
            return list(self) == list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TokenList({list(self)!r})"

    def __str__(self) -> str:
        return " ".join(str(token) for token in self)

    def kinds(self) -> List[Any]:
        return [token.kind for token in self]

    def text(self) -> str:
        """Concatenated resolved text of all tokens."""
        return "".join(token.text for token in self)

    def raw(self) -> str:
        """Concatenated raw source text of all tokens."""
        return "".join(token.raw for token in self)

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def split(self, kind: Any) -> List["TokenList"]:
        """Partition the list at every token of ``kind``.

        The delimiter tokens are dropped. N delimiters always yield N+1
        groups; groups may be empty (consecutive delimiters, or a
        delimiter at either edge).

        Args:
            kind: Kind tag to split on.

        Returns:
            List of TokenList views sharing this list's buffer.
        """
        groups: List[TokenList] = []
        group_start = self._start
        for i in range(self._start, self._stop):
            if self._buffer[i].kind == kind:
                groups.append(self._view(self._buffer, group_start, i))
                group_start = i + 1
        groups.append(self._view(self._buffer, group_start, self._stop))
        return groups

    def trim_start(self, *kinds: Any) -> "TokenList":
        while self._start < self._stop and self._buffer[self._start].kind in kinds:
            self._start += 1
        return self

    def trim_end(self, *kinds: Any) -> "TokenList":
        while self._stop > self._start and self._buffer[self._stop - 1].kind in kinds:
            self._stop -= 1
        return self

    def trim(self, *kinds: Any) -> "TokenList":
        """Drop tokens of the given kinds from both edges, in place.

        Interior tokens are left alone. Returns self for chaining.
        """
        return self.trim_start(*kinds).trim_end(*kinds)

    def peek(self) -> Optional[Token]:
        """First remaining token, or None when the list is empty."""
        return self._buffer[self._start] if self else None

    def next_is(self, *kinds: Any) -> bool:
        """True when the first remaining token has one of ``kinds``."""
        return bool(self) and self._buffer[self._start].kind in kinds

    def consume(self, *kinds: Any, required: bool = True) -> Optional[Token]:
        """Remove and return the first token if its kind is accepted.

        Args:
            *kinds: Accepted kinds; none means any kind is accepted.
            required: When False, an empty list yields None instead of raising.

        Returns:
            The consumed token, or None at the end of a non-required consume.

        Raises:
            UnexpectedTokenError: The first token has the wrong kind, or the
                list is empty and ``required`` is set.
        """
        token = self.peek()
        if token is None:
            if required:
                raise UnexpectedTokenError(kinds, None)
            return None
        if kinds and token.kind not in kinds:
            raise UnexpectedTokenError(kinds, token)
        self._start += 1
        return token

    def consume_all(self, *kinds: Any) -> str:
        """Remove leading tokens while their kind is in ``kinds``.

        Never fails; stops at the first token of another kind or at the end
        of the list.

        Returns:
            The concatenated text of the removed tokens (empty if none).
        """
        parts: List[str] = []
        while self._start < self._stop and self._buffer[self._start].kind in kinds:
            parts.append(self._buffer[self._start].text)
            self._start += 1
        return "".join(parts)

    def consume_until(self, *kinds: Any) -> "TokenList":
        """Remove and return the tokens preceding the first token of ``kinds``.

        The stop token itself stays in this list.
        """
        begin = self._start
        while self._start < self._stop and self._buffer[self._start].kind not in kinds:
            self._start += 1
        return self._view(self._buffer, begin, self._start)

    def skip(self, *kinds: Any) -> int:
        """Drop leading tokens of ``kinds`` and return how many were dropped."""
        begin = self._start
        self.trim_start(*kinds)
        return self._start - begin

    def without(self, *kinds: Any) -> "TokenList":
        """New list holding every token whose kind is not in ``kinds``."""
        return TokenList(token for token in self if token.kind not in kinds)


__all__ = ["Token", "TokenList", "kind_name"]
