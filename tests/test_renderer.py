"""Tests for the PNG renderer."""

import random

import pytest
from PIL import Image

from wordhunt.core.exceptions import RenderError
from wordhunt.core.wordsearch import Direction, WordSearch
from wordhunt.rendering.wordsearch_renderer import WordSearchRenderer

WORDS = ["FOREST", "GLAD", "HEAP", "KNOB", "MASK", "RIPE", "SEED", "TRUST", "WEED", "YANK"]


@pytest.fixture
def puzzle():
    ws = WordSearch(WORDS, size=10, rng=random.Random(11))
    ws.generate()
    return ws


class TestDimensions:
    def test_ten_words_on_ten_by_ten(self, puzzle):
        renderer = WordSearchRenderer(puzzle, WORDS)
        # 25 (título) + 3 linhas * 20 + 15
        assert renderer.header_height == 100
        assert renderer.size == (400, 500)

    @pytest.mark.parametrize("count,header", [(0, 40), (1, 60), (4, 60), (5, 80)])
    def test_header_grows_with_word_rows(self, puzzle, count, header):
        renderer = WordSearchRenderer(puzzle, WORDS[:count])
        assert renderer.header_height == header

    def test_cell_size_scales_width(self, puzzle):
        renderer = WordSearchRenderer(puzzle, WORDS, cell_size=20)
        assert renderer.size == (200, 300)


class TestRender:
    def test_white_background(self, puzzle):
        img = WordSearchRenderer(puzzle, WORDS).render()
        assert img.mode == "RGB"
        assert img.getpixel((399, 0)) == (255, 255, 255)

    def test_answers_highlight_placed_cells(self):
        ws = WordSearch([], size=3)
        ws.place("CAT", 0, 0, Direction.RIGHT)
        ws.generate()
        renderer = WordSearchRenderer(ws, ["CAT"])
        top = renderer.header_height
        plain = renderer.render(answers=False)
        key = renderer.render(answers=True)
        assert plain.getpixel((1, top + 1)) == (255, 255, 255)
        assert key.getpixel((1, top + 1)) == WordSearchRenderer.HIGHLIGHT_FILL
        # linha de baixo não faz parte da palavra
        assert key.getpixel((1, top + renderer.cell + 1)) == (255, 255, 255)


class TestSave:
    def test_writes_png(self, puzzle, tmp_path):
        path = WordSearchRenderer(puzzle, WORDS).save(tmp_path / "out.png")
        assert path.exists()
        with Image.open(path) as img:
            assert img.format == "PNG"
            assert img.size == (400, 500)

    def test_unwritable_path_raises(self, puzzle, tmp_path):
        blocker = tmp_path / "file.txt"
        blocker.write_text("x", encoding="utf-8")
        target = blocker / "out.png"
        with pytest.raises(RenderError, match="failed to write image"):
            WordSearchRenderer(puzzle, WORDS).save(target)
        assert not target.exists()

    def test_directory_at_target_raises_render_error(self, puzzle, tmp_path):
        """Writing over an existing directory surfaces as RenderError and leaves nothing behind."""
        target = tmp_path / "out.png"
        target.mkdir()
        with pytest.raises(RenderError, match="failed to write image"):
            WordSearchRenderer(puzzle, WORDS).save(target)
        assert target.is_dir()
        assert sorted(p.name for p in tmp_path.iterdir()) == ["out.png"]

    def test_overwrites_existing_file(self, puzzle, tmp_path):
        target = tmp_path / "out.png"
        target.write_bytes(b"old")
        WordSearchRenderer(puzzle, WORDS).save(target)
        with Image.open(target) as img:
            assert img.size == (400, 500)
        assert sorted(p.name for p in tmp_path.iterdir()) == ["out.png"]
