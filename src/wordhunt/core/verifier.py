from __future__ import annotations
from typing import List, NamedTuple, Sequence

from wordhunt.core.wordsearch import WordPlacement

OUT_OF_BOUNDS = "?"


class VerificationResult(NamedTuple):
    placement: WordPlacement
    found: str
    ok: bool


def extract_word(grid: Sequence[Sequence[str]], placement: WordPlacement) -> str:
    """Relê da grade as letras no caminho da colocação ('?' fora da grade)."""
    rows = len(grid)
    letters: List[str] = []
    for r, c in placement.cells():
        if 0 <= r < rows and 0 <= c < len(grid[r]):
            letters.append(grid[r][c])
        else:
            letters.append(OUT_OF_BOUNDS)
    return "".join(letters)


def verify_placements(
    grid: Sequence[Sequence[str]], placements: Sequence[WordPlacement]
) -> List[VerificationResult]:
    results: List[VerificationResult] = []
    for p in placements:
        found = extract_word(grid, p)
        results.append(VerificationResult(p, found, found == p.word))
    return results
