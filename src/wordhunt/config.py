from __future__ import annotations
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union
import json

from wordhunt.core.exceptions import ConfigError


@dataclass(frozen=True)
class GeneratorConfig:
    grid_size: int = 10
    cell_size: int = 40
    word_count: int = 10
    min_words: int = 10
    max_attempts: int = 100
    output: str = "output.png"
    vocab_file: Optional[str] = None
    seed: Optional[int] = None
    answers: bool = False

    def validate(self) -> "GeneratorConfig":
        for name in ("grid_size", "cell_size", "word_count", "min_words", "max_attempts"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigError(f"'{name}' must be a positive integer, got {value!r}")
        if not isinstance(self.output, str) or not self.output:
            raise ConfigError(f"'output' must be a non-empty path string, got {self.output!r}")
        if self.vocab_file is not None and not isinstance(self.vocab_file, str):
            raise ConfigError(f"'vocab_file' must be a path string, got {self.vocab_file!r}")
        if self.seed is not None and (not isinstance(self.seed, int) or isinstance(self.seed, bool)):
            raise ConfigError(f"'seed' must be an integer, got {self.seed!r}")
        if not isinstance(self.answers, bool):
            raise ConfigError(f"'answers' must be true or false, got {self.answers!r}")
        return self

    def merge(self, **overrides: Any) -> "GeneratorConfig":
        """Aplica os valores vindos da CLI (None = manter o valor atual)."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def load_config(path: Optional[Union[str, Path]]) -> GeneratorConfig:
    """
    Lê a seção "wordsearch" de um config.json. Sem arquivo, usa os padrões.
    Chaves desconhecidas são ignoradas.
    """
    if path is None:
        return GeneratorConfig()

    p = Path(path)
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigError(f"failed to open config file '{p}': {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid JSON in config file '{p}': {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config file '{p}' must contain a JSON object")

    section: Dict[str, Any] = data.get("wordsearch") or {}
    if not isinstance(section, dict):
        raise ConfigError("'wordsearch' section must be a JSON object")

    known = {f.name for f in fields(GeneratorConfig)}
    return GeneratorConfig(**{k: v for k, v in section.items() if k in known})
