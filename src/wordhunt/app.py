# src/wordhunt/app.py
from __future__ import annotations

import contextlib
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from wordhunt.config import GeneratorConfig
from wordhunt.core.exceptions import RenderError
from wordhunt.core.verifier import VerificationResult, verify_placements
from wordhunt.core.vocabulary import (
    DEFAULT_VOCABULARY,
    ensure_enough_words,
    filter_words_by_length,
    load_vocabulary,
    select_words,
)
from wordhunt.core.wordsearch import WordPlacement, WordSearch
from wordhunt.rendering import report
from wordhunt.rendering.wordsearch_renderer import WordSearchRenderer


@dataclass
class PuzzleResult:
    words: List[str]
    grid: List[List[str]]
    placements: List[WordPlacement]
    verification: List[VerificationResult]
    image_path: Path
    answers_path: Optional[Path] = None
    removed_words: List[str] = field(default_factory=list)

    @property
    def all_verified(self) -> bool:
        return all(r.ok for r in self.verification)


class WordHuntApp:
    """
    Orquestrador da aplicação:
      - Resolve o vocabulário (arquivo ou lista padrão)
      - Filtra por tamanho e sorteia as palavras
      - Dispara a geração (WordSearch)
      - Renderiza a imagem e imprime o relatório/verificação
    """

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None) -> None:
        self.config = config.validate()
        # Um único gerador por execução (seed None = entropia do SO)
        self.rng = rng if rng is not None else random.Random(config.seed)

    # -------------------- Vocabulário --------------------
    def load_words(self) -> List[str]:
        cfg = self.config
        if cfg.vocab_file:
            print(f"Loading custom vocabulary from: {cfg.vocab_file}")
            words = load_vocabulary(cfg.vocab_file, minimum=cfg.min_words)
            print(f"Loaded {len(words)} words from custom vocabulary file")
        else:
            words = list(DEFAULT_VOCABULARY)
            print(f"Using default first-grade vocabulary ({len(words)} words)")
        return words

    # -------------------- Execução --------------------
    def run(self) -> PuzzleResult:
        cfg = self.config
        print("Generating word search puzzle...")
        if cfg.seed is not None:
            print(f"🎯 Seed: {cfg.seed}")

        vocabulary = self.load_words()

        kept, removed = filter_words_by_length(vocabulary, cfg.grid_size)
        report.print_removed_words(removed, cfg.grid_size)
        print(f"After filtering: {len(kept)} words available for puzzle generation")
        ensure_enough_words(kept, cfg.min_words, cfg.grid_size)

        words = select_words(kept, cfg.word_count, self.rng)

        ws = WordSearch(words, size=cfg.grid_size, rng=self.rng, max_attempts=cfg.max_attempts)
        placements = ws.generate()

        renderer = WordSearchRenderer(ws, words, cell_size=cfg.cell_size)
        image_path, answers_path = self.write_images(renderer)

        width, height = renderer.size
        print(f"Word search puzzle created successfully: {image_path} ({width}x{height} pixels)")

        report.print_grid(ws.grid)
        report.print_placements(placements)
        verification = verify_placements(ws.grid, placements)
        report.print_verification(verification)

        return PuzzleResult(
            words=words,
            grid=ws.grid,
            placements=placements,
            verification=verification,
            image_path=image_path,
            answers_path=answers_path,
            removed_words=removed,
        )

    def write_images(self, renderer: WordSearchRenderer) -> Tuple[Path, Optional[Path]]:
        """Renderiza tudo antes de gravar; se uma gravação falhar, apaga as anteriores."""
        image_path = Path(self.config.output)
        images = [(renderer.render(), image_path)]
        if self.config.answers:
            images.append((renderer.render(answers=True), self.answers_path_for(image_path)))

        written: List[Path] = []
        try:
            for img, path in images:
                written.append(renderer.write(img, path))
        except RenderError:
            for path in written:
                with contextlib.suppress(OSError):
                    path.unlink()
            raise
        return written[0], (written[1] if self.config.answers else None)

    @staticmethod
    def answers_path_for(image_path: Path) -> Path:
        return image_path.with_name(f"{image_path.stem}_answers{image_path.suffix or '.png'}")
