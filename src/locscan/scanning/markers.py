"""Comment marker configuration."""

from dataclasses import dataclass
from typing import Optional, Sequence, Union

from ..exceptions import InvalidMarkersError


@dataclass(frozen=True)
class CommentMarkers:
    """Tokens that identify comment lines for one language.

    Attributes:
        line_markers: Prefixes that make a whole line a comment (``#``, ``//``).
        block_start: Token opening a multi-line comment block, if any.
        block_end: Token closing the block. May equal ``block_start``.
    """

    line_markers: tuple[str, ...] = ()
    block_start: Optional[str] = None
    block_end: Optional[str] = None

    def __post_init__(self) -> None:
        # Accept a bare string for the common single-marker case.
        if isinstance(self.line_markers, str):
            object.__setattr__(self, "line_markers", (self.line_markers,))
        else:
            object.__setattr__(self, "line_markers", tuple(self.line_markers))
        self.validate()

    def validate(self) -> None:
        """Reject marker combinations the classifier cannot honour.

        Raises:
            InvalidMarkersError: If a token is empty, only one block
                delimiter is given, or no marker is given at all.
        """
        for marker in self.line_markers:
            if not isinstance(marker, str) or not marker.strip():
                raise InvalidMarkersError(f"line marker {marker!r} is empty")
        if self.block_start is not None and not self.block_start.strip():
            raise InvalidMarkersError("block start marker is empty")
        if self.block_end is not None and not self.block_end.strip():
            raise InvalidMarkersError("block end marker is empty")
        if self.block_end is not None and self.block_start is None:
            raise InvalidMarkersError("block end supplied without block start")
        if self.block_start is not None and self.block_end is None:
            raise InvalidMarkersError("block start supplied without block end")
        if not self.line_markers and self.block_start is None:
            raise InvalidMarkersError("no line or block markers supplied")

    @property
    def has_block(self) -> bool:
        return self.block_start is not None

    @property
    def prefixes(self) -> tuple[str, ...]:
        """Every token that marks a line as a comment when found at its start."""
        if self.block_start is None:
            return self.line_markers
        return self.line_markers + (self.block_start,)

    @classmethod
    def from_tokens(cls, tokens: Union[str, Sequence[str]]) -> "CommentMarkers":
        """Build markers from a flat token list.

        With three or more tokens the first is the block start, the last the
        block end and the ones in between are line markers:
        ``["=begin", "#", "=end"]`` or ``["(*", "#", "--", "*)"]``.
        Shorter lists are line markers only.
        """
        if isinstance(tokens, str):
            tokens = [tokens]
        tokens = list(tokens)
        if len(tokens) >= 3:
            return cls(
                line_markers=tuple(tokens[1:-1]),
                block_start=tokens[0],
                block_end=tokens[-1],
            )
        return cls(line_markers=tuple(tokens))

    def describe(self) -> str:
        parts = [" ".join(self.line_markers)] if self.line_markers else []
        if self.block_start is not None:
            parts.append(f"{self.block_start} ... {self.block_end}")
        return ", ".join(parts)
