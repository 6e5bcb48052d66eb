from __future__ import annotations
import contextlib
import os
from pathlib import Path
from typing import List, Optional, Tuple, Union
from PIL import Image, ImageDraw, ImageFont

from wordhunt.core.exceptions import RenderError


class WordSearchRenderer:
    """
    Renderizador de caça-palavras:
      - Cabeçalho: título "Find these words:" + lista de palavras (4 por linha)
      - Grade: uma letra centralizada por célula, fonte monoespaçada
      - Respostas (opcional): células das palavras colocadas destacadas
    """

    BACKGROUND = (255, 255, 255)
    TEXT = (0, 0, 0)
    HIGHLIGHT_FILL = (220, 240, 255)   # azul claro

    TITLE = "Find these words:"
    TITLE_HEIGHT = 25       # espaço do título
    WORD_ROW_SPACING = 20   # distância vertical entre linhas de palavras
    WORDS_PER_ROW = 4
    HEADER_PADDING = 15     # respiro entre a lista e a grade
    WORD_SPACING = 80       # distância horizontal entre palavras
    MARGIN_X = 10
    TITLE_BASELINE = 20
    FIRST_WORD_BASELINE = 45

    def __init__(
        self,
        wordsearch,                 # instância de WordSearch
        words: Optional[List[str]] = None,
        *,
        cell_size: int = 40,
        font_path: Optional[str] = None,
    ) -> None:
        self.ws = wordsearch
        self.n = int(wordsearch.size)
        self.cell = int(cell_size)
        self.words: List[str] = list(words if words is not None else wordsearch.words)

        self.header_font = self._load_font(font_path, 13)
        self.letter_font = self._load_font(font_path, max(8, int(self.cell * 0.5)))

    @staticmethod
    def _load_font(font_path: Optional[str], size: int):
        # fonte monoespaçada; fallback para default do PIL
        for candidate in (font_path, "DejaVuSansMono.ttf"):
            if not candidate:
                continue
            try:
                return ImageFont.truetype(candidate, size=size)
            except OSError:
                continue
        return ImageFont.load_default()

    # ---------- dimensões ----------

    @property
    def header_height(self) -> int:
        word_rows = (len(self.words) + self.WORDS_PER_ROW - 1) // self.WORDS_PER_ROW
        return self.TITLE_HEIGHT + word_rows * self.WORD_ROW_SPACING + self.HEADER_PADDING

    @property
    def size(self) -> Tuple[int, int]:
        return self.n * self.cell, self.n * self.cell + self.header_height

    # ---------- API ----------

    def render(self, answers: bool = False) -> Image.Image:
        img = Image.new("RGB", self.size, self.BACKGROUND)
        draw = ImageDraw.Draw(img)

        self._draw_word_list(draw)
        # destaques ANTES das letras (para não cobri-las)
        if answers:
            self._draw_answers_fill(draw)
        self._draw_letters(draw)
        return img

    def save(self, filename: Union[str, Path], answers: bool = False) -> Path:
        return self.write(self.render(answers=answers), filename)

    def write(self, img: Image.Image, filename: Union[str, Path]) -> Path:
        """Grava num .tmp ao lado do destino e troca no final; falha não deixa arquivo."""
        path = Path(filename)
        tmp = path.with_name(f".{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            img.save(tmp, format="PNG")
            os.replace(tmp, path)
        except (OSError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise RenderError(f"failed to write image '{path}': {e}") from e
        print(f"🖼️  Image '{path.name}' written.")
        return path

    # ---------- desenho ----------

    def _draw_text_at_baseline(self, draw: ImageDraw.ImageDraw, x: int, baseline: int, text: str) -> None:
        # bbox de "A" vai do topo da linha até a base; subir o texto por essa altura
        _, _, _, bottom = self.header_font.getbbox("A")
        draw.text((x, baseline - bottom), text, fill=self.TEXT, font=self.header_font)

    def _draw_word_list(self, draw: ImageDraw.ImageDraw) -> None:
        self._draw_text_at_baseline(draw, self.MARGIN_X, self.TITLE_BASELINE, self.TITLE)
        for i, word in enumerate(self.words):
            row, col = divmod(i, self.WORDS_PER_ROW)
            x = self.MARGIN_X + col * self.WORD_SPACING
            y = self.FIRST_WORD_BASELINE + row * self.WORD_ROW_SPACING
            self._draw_text_at_baseline(draw, x, y, word)

    def _draw_letters(self, draw: ImageDraw.ImageDraw) -> None:
        """Centraliza cada glifo compensando o offset do bbox (x0,y0)."""
        top = self.header_height
        for r in range(self.n):
            for c in range(self.n):
                ch = self.ws.grid[r][c]
                if not ch:
                    continue
                cx = c * self.cell + self.cell / 2
                cy = top + r * self.cell + self.cell / 2
                bx0, by0, bx1, by1 = self.letter_font.getbbox(ch)
                x = cx - (bx1 - bx0) / 2 - bx0
                y = cy - (by1 - by0) / 2 - by0
                draw.text((x, y), ch, fill=self.TEXT, font=self.letter_font)

    def _draw_answers_fill(self, draw: ImageDraw.ImageDraw) -> None:
        top = self.header_height
        for placement in self.ws.placements:
            for rr, cc in placement.cells():
                x0 = cc * self.cell
                y0 = top + rr * self.cell
                draw.rectangle([x0, y0, x0 + self.cell - 1, y0 + self.cell - 1], fill=self.HIGHLIGHT_FILL)
