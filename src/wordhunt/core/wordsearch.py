from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Optional, Tuple
import random
import string


class Direction(Enum):
    """As 8 direções de uma palavra na grade: (d_row, d_col)."""

    RIGHT = (0, 1)
    LEFT = (0, -1)
    DOWN = (1, 0)
    UP = (-1, 0)
    DOWN_RIGHT = (1, 1)
    DOWN_LEFT = (1, -1)
    UP_RIGHT = (-1, 1)
    UP_LEFT = (-1, -1)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value


@dataclass(frozen=True)
class WordPlacement:
    """Uma palavra colocada: texto, célula inicial e direção."""

    word: str
    row: int
    col: int
    direction: Direction

    def cells(self) -> Iterator[Tuple[int, int]]:
        d_row, d_col = self.direction.delta
        for i in range(len(self.word)):
            yield self.row + d_row * i, self.col + d_col * i

    @property
    def end(self) -> Tuple[int, int]:
        d_row, d_col = self.direction.delta
        n = len(self.word) - 1
        return self.row + d_row * n, self.col + d_col * n


EMPTY = ""
MAX_ATTEMPTS = 100


class WordSearch:
    """
    Caça-palavras NxN com 8 direções (→ ← ↓ ↑ ↘ ↙ ↗ ↖).

    Cada palavra recebe até `max_attempts` sorteios de (linha, coluna, direção).
    Um sorteio é aceito quando a palavra cabe na grade e todas as células do
    caminho estão vazias ou já têm a mesma letra (cruzamentos). Palavras que
    esgotam as tentativas são puladas sem travar o processo; no final as
    células vazias recebem letras A–Z aleatórias.

    Interface pública:
      - WordSearch(words, size=10, rng=None, max_attempts=100)
      - generate() -> List[WordPlacement]
      - .grid : List[List[str]]
      - .placements : List[WordPlacement]   (ordem de colocação)
      - .placed_words : Dict[str, WordPlacement]
      - .unplaced_words : List[str]
    """

    def __init__(
        self,
        words: List[str],
        size: int = 10,
        *,
        rng: Optional[random.Random] = None,
        max_attempts: int = MAX_ATTEMPTS,
        alphabet: str = string.ascii_uppercase,
    ) -> None:
        self.size = int(size)
        self.words: List[str] = list(words)
        self.max_attempts = int(max_attempts)
        self._rng = rng if rng is not None else random.Random()
        self._alphabet = alphabet
        self._directions = list(Direction)

        n = self.size
        self.grid: List[List[str]] = [[EMPTY for _ in range(n)] for _ in range(n)]
        self.placements: List[WordPlacement] = []
        self.unplaced_words: List[str] = []

    @property
    def placed_words(self) -> Dict[str, WordPlacement]:
        return {p.word: p for p in self.placements}

    # ------------------------- API principal -------------------------

    def generate(self) -> List[WordPlacement]:
        """Coloca as palavras no grid e preenche vazios com A–Z."""
        for word in self.words:
            placement = self._try_place_word(word)
            if placement is None:
                self.unplaced_words.append(word)
                print(f"Warning: Could not place word '{word}' after {self.max_attempts} attempts")
                continue
            self.placements.append(placement)

        self._fill_empty_cells()
        return list(self.placements)

    def _try_place_word(self, word: str) -> Optional[WordPlacement]:
        n = self.size
        attempts = 0
        while attempts < self.max_attempts:
            row = self._rng.randrange(n)
            col = self._rng.randrange(n)
            direction = self._rng.choice(self._directions)
            attempts += 1

            if self.can_place(word, row, col, direction):
                self._place(word, row, col, direction)
                return WordPlacement(word, row, col, direction)
        return None

    # ------------------------- Primitivas de grade -------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def can_place(self, word: str, row: int, col: int, direction: Direction) -> bool:
        """Verifica se uma palavra pode ser colocada numa posição e direção."""
        if not word:
            return False
        d_row, d_col = direction.delta
        end_row = row + d_row * (len(word) - 1)
        end_col = col + d_col * (len(word) - 1)
        if not (self.in_bounds(row, col) and self.in_bounds(end_row, end_col)):
            return False

        for i, ch in enumerate(word):
            cell = self.grid[row + d_row * i][col + d_col * i]
            if cell != EMPTY and cell != ch:
                return False
        return True

    def place(self, word: str, row: int, col: int, direction: Direction) -> Optional[WordPlacement]:
        """Coloca `word` em (row, col) se for possível; retorna a colocação ou None."""
        if not self.can_place(word, row, col, direction):
            return None
        self._place(word, row, col, direction)
        placement = WordPlacement(word, row, col, direction)
        self.placements.append(placement)
        return placement

    def _place(self, word: str, row: int, col: int, direction: Direction) -> None:
        d_row, d_col = direction.delta
        for i, ch in enumerate(word):
            self.grid[row + d_row * i][col + d_col * i] = ch

    def _fill_empty_cells(self) -> None:
        """Preenche as células vazias da grelha com letras aleatórias."""
        for r in range(self.size):
            for c in range(self.size):
                if self.grid[r][c] == EMPTY:
                    self.grid[r][c] = self._rng.choice(self._alphabet)
