from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class StyleTag(Enum):
    LEFT_FLUSHED = "left_flushed"
    LEFT_ALIGNED = "left_aligned"
    CENTERED = "centered"
    RIGHT_ALIGNED = "right_aligned"
    RIGHT_FLUSHED = "right_flushed"
    HORIZONTAL_RULER = "horizontal_ruler"
    FULL_SCREEN_HORIZONTAL_RULER = "full_screen_horizontal_ruler"


@dataclass(frozen=True)
class Line:
    content: str
    length: int  # display columns, escapes and emoji codes excluded
    style: StyleTag = StyleTag.LEFT_ALIGNED

    def __str__(self) -> str:
        return self.content

    def is_empty(self) -> bool:
        return not self.content


BLANK_LINE = Line("", 0, StyleTag.LEFT_ALIGNED)


@dataclass(frozen=True)
class Build:
    """One renderable snapshot of a slide.

    `size` and `max_length` describe the whole slide so every build of a
    slide is laid out at the same position.
    """

    content: Tuple[Line, ...]
    size: int
    max_length: int
    header: Line
    footer: Line


@dataclass(frozen=True)
class Slide:
    content: Tuple[Line, ...]
    builds: Tuple[int, ...]
    code: Tuple[str, ...]
    max_length: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "content", tuple(self.content))
        object.__setattr__(self, "builds", tuple(self.builds))
        object.__setattr__(self, "code", tuple(self.code))
        if not self.content:
            raise ValueError("a slide needs at least one line")
        if not self.builds:
            raise ValueError("a slide needs at least one build")
        if any(later < earlier for earlier, later in zip(self.builds, self.builds[1:])):
            raise ValueError(f"build boundaries must not decrease: {self.builds}")
        if self.builds[-1] != len(self.content):
            raise ValueError(
                f"last build boundary {self.builds[-1]} does not match line count {len(self.content)}"
            )
        if len(self.code) != len(self.builds):
            raise ValueError("every build needs a code entry")
        object.__setattr__(self, "max_length", max(line.length for line in self.content))

    @property
    def last_build(self) -> int:
        return len(self.builds) - 1

    def has_build(self, n: int) -> bool:
        return 0 <= n < len(self.builds)

    def build(self, n: int, header: Line, footer: Line) -> Optional[Build]:
        if not self.has_build(n):
            return None
        return Build(
            content=self.content[: self.builds[n]],
            size=len(self.content),
            max_length=self.max_length,
            header=header,
            footer=footer,
        )

    def code_for(self, n: int) -> str:
        if not self.has_build(n):
            return ""
        return self.code[n]
