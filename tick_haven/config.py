"""Search configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchConfig:
    """Immutable configuration shared by both search algorithms.

    Attributes:
        max_path_cells: Longest walk (in cells) a greedy branch or fallback
            leg may grow to before it is abandoned.
        variant: Perception variant of the puzzle (1 = Moore spyglass,
            2 = Manhattan radius 2). Accepted for compatibility with puzzle
            inputs; the searches do not read it.
    """

    max_path_cells: int = 65
    variant: int = 1

    def __post_init__(self) -> None:
        if self.max_path_cells < 2:
            raise ValueError(
                f"max_path_cells must be >= 2, got {self.max_path_cells}"
            )
        if self.variant not in (1, 2):
            raise ValueError(f"variant must be 1 or 2, got {self.variant}")
