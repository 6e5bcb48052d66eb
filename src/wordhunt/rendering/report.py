from typing import List, Sequence

from wordhunt.core.verifier import VerificationResult
from wordhunt.core.wordsearch import WordPlacement


def print_removed_words(removed: Sequence[str], max_length: int) -> None:
    if not removed:
        return
    print(f"Removed {len(removed)} words that are too long for {max_length}x{max_length} grid:")
    for w in removed:
        print(f"  - {w} ({len(w.upper())} characters)")


def format_grid(grid: Sequence[Sequence[str]]) -> List[str]:
    return ["".join(f"{ch} " for ch in row) for row in grid]


def print_grid(grid: Sequence[Sequence[str]]) -> None:
    print("\nWord search puzzle grid:")
    for line in format_grid(grid):
        print(line)


def print_placements(placements: Sequence[WordPlacement]) -> None:
    print("\nWords placed in the puzzle:")
    for p in placements:
        print(f"- {p.word}: Row {p.row}, Col {p.col}, Direction {p.direction.name}")
    print(f"\nTotal words placed: {len(placements)}")


def print_verification(results: Sequence[VerificationResult]) -> None:
    print("\nVerifying word placements:")
    for res in results:
        p = res.placement
        if res.ok:
            print(f"✓ {p.word} found correctly at ({p.row},{p.col})")
        else:
            print(f"✗ {p.word} NOT found at ({p.row},{p.col}) - found '{res.found}' instead")
