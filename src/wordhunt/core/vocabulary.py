from __future__ import annotations
from pathlib import Path
from typing import List, NamedTuple, Optional, Sequence, Union
import random

from wordhunt.core.exceptions import NotEnoughWordsError, VocabularyError

MIN_WORDS = 10

# Vocabulário padrão (1º ano, inglês)
DEFAULT_VOCABULARY: List[str] = [
    "ache", "enormous", "equal", "exclaim", "exhausted", "expensive", "fancy",
    "fasten", "filthy", "flat", "flee", "fog", "footprint", "forest",
    "freezing", "gather", "giant", "glad", "gleaming", "glum", "grab",
    "grateful", "grin", "grip", "groan", "hatch", "heap", "hide", "hobby",
    "honest", "howl", "illustrator", "injury", "jealous", "knob", "lively",
    "loosen", "mask", "misty", "modern", "mountain", "narrow", "obey", "pain",
    "passenger", "pattern", "pest", "polish", "pretend", "promise", "rapid",
    "remove", "repeat", "rescue", "restart", "return", "ripe", "rise", "roar",
    "rough", "rusty", "scold", "scratch", "seed", "selfish", "serious",
    "shell", "shovel", "shriek", "sibling", "silent", "simple", "slippery",
    "sly", "sneaky", "sob", "spiral", "splendid", "sprinkle", "squirm",
    "startle", "steep", "stormy", "striped", "surround", "switch",
    "terrified", "thick", "thunder", "ticket", "timid", "transportation",
    "travel", "trust", "upset", "weed", "whimper", "whirl", "wicked", "yank",
]


class FilterResult(NamedTuple):
    kept: List[str]
    removed: List[str]


def load_vocabulary(path: Union[str, Path], minimum: int = MIN_WORDS) -> List[str]:
    """Lê um arquivo de vocabulário (uma palavra por linha, linhas vazias ignoradas)."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            words = [line.strip() for line in f]
    except OSError as e:
        raise VocabularyError(f"failed to open vocabulary file: {e}") from e
    except UnicodeDecodeError as e:
        raise VocabularyError(f"error reading vocabulary file: {e}") from e

    words = [w for w in words if w]
    if len(words) < minimum:
        raise VocabularyError(
            f"vocabulary file must contain at least {minimum} words, found {len(words)}"
        )
    return words


def filter_words_by_length(words: Sequence[str], max_length: int) -> FilterResult:
    """
    Separa as palavras que cabem na grade das que são longas demais.
    Mede a forma em maiúsculas, que é a colocada na grade ("straße" -> "STRASSE").
    """
    kept: List[str] = []
    removed: List[str] = []
    for w in words:
        (kept if len(w.upper()) <= max_length else removed).append(w)
    return FilterResult(kept, removed)


def ensure_enough_words(words: Sequence[str], minimum: int, grid_size: int) -> None:
    if len(words) < minimum:
        raise NotEnoughWordsError(
            f"Not enough words available after filtering. Need at least {minimum} words, "
            f"but only {len(words)} words fit in a {grid_size}x{grid_size} grid"
        )


def select_words(
    words: Sequence[str],
    count: int = MIN_WORDS,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Sorteia até `count` palavras sem reposição e devolve em maiúsculas.
    A palavra sorteada troca de lugar com a última e sai da lista (O(1)).
    """
    rng = rng if rng is not None else random.Random()
    pool = list(words)
    selected: List[str] = []
    while len(selected) < count and pool:
        i = rng.randrange(len(pool))
        selected.append(pool[i].upper())
        pool[i] = pool[-1]
        pool.pop()
    return selected
