import typer
from typing_extensions import Annotated
from typing import Optional

from wordhunt.app import WordHuntApp
from wordhunt.config import load_config
from wordhunt.core.exceptions import WordHuntError

app = typer.Typer(add_completion=False, help="Gerador de caça-palavras com lista de palavras em PNG.")


@app.command()
def generate(
    vocab: Annotated[Optional[str], typer.Option(
        "--vocab", "-v",
        help="Path to custom vocabulary file (one word per line)."
    )] = None,
    config_file: Annotated[Optional[str], typer.Option(
        "--config", "-c",
        help="Caminho para um config.json com a seção 'wordsearch'."
    )] = None,
    output: Annotated[Optional[str], typer.Option(
        "--output", "-o",
        help="Arquivo PNG de saída."
    )] = None,
    size: Annotated[Optional[int], typer.Option(
        "--size", "-s",
        help="Lado da grade (células)."
    )] = None,
    words: Annotated[Optional[int], typer.Option(
        "--words", "-n",
        help="Quantidade de palavras sorteadas."
    )] = None,
    seed: Annotated[Optional[int], typer.Option(
        "--seed",
        help="Semente para geração determinística."
    )] = None,
    answers: Annotated[bool, typer.Option(
        "--answers",
        help="Gera também o gabarito com as palavras destacadas."
    )] = False,
):
    """Gera um caça-palavras em formato de imagem."""
    try:
        config = load_config(config_file).merge(
            vocab_file=vocab,
            output=output,
            grid_size=size,
            word_count=words,
            seed=seed,
            answers=answers or None,
        )
        WordHuntApp(config).run()
    except WordHuntError as e:
        print(f"❌ Error: {e}")
        raise typer.Exit(code=1)


def run():
    app()


if __name__ == "__main__":
    run()
