from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence

import typer
from typing_extensions import Annotated

from bktreex import BKTree
from bktreex.errors import BKTreeError

DEMO_WORDS: tuple[str, ...] = (
    "isValid",
    "isInvalid",
    "valid",
    "invalid",
    "validated",
)


class MetricChoice(str, Enum):
    levenshtein = "levenshtein"
    hamming = "hamming"


app = typer.Typer(
    add_completion=False,
    pretty_exceptions_enable=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Suggest corrections for a misspelled word using a BK-tree.",
)


def load_words(path: Path) -> List[str]:
    """Read one word per line, skipping blank lines."""

    with path.open("r", encoding="utf-8") as handle:
        return [line.strip() for line in handle if line.strip()]


def suggest(
    word: str,
    words: Sequence[str],
    *,
    max_dist: int = 2,
    metric: str = "levenshtein",
    sort: bool = False,
) -> List[tuple[str, int]]:
    tree = BKTree(metric, value_type=str)
    tree.insert_all(words)
    matches = tree.find(word, max_dist).collect()
    if sort:
        matches.sort(key=lambda match: match[1])
    return matches


@app.command()
def spell(
    word: Annotated[str, typer.Argument(help="Possibly misspelled word to look up.")],
    words: Annotated[
        Optional[Path],
        typer.Option(
            "--words",
            help="Word list, one entry per line. Defaults to a small demo list.",
        ),
    ] = None,
    max_dist: Annotated[
        int,
        typer.Option("--max-dist", min=0, help="Largest distance reported as a match."),
    ] = 2,
    metric: Annotated[
        MetricChoice,
        typer.Option("--metric", case_sensitive=False, help="Distance metric."),
    ] = MetricChoice.levenshtein,
    sort: Annotated[
        bool,
        typer.Option("--sort/--no-sort", help="Order suggestions by distance."),
    ] = False,
    show_distance: Annotated[
        bool,
        typer.Option("--show-distance", help="Append the distance to each suggestion."),
    ] = False,
) -> None:
    if words is None:
        vocabulary: Sequence[str] = DEMO_WORDS
    else:
        try:
            vocabulary = load_words(words)
        except (OSError, UnicodeDecodeError) as exc:
            typer.echo(f"error: cannot read word list {words}: {exc}", err=True)
            raise typer.Exit(code=1) from exc

    try:
        matches = suggest(word, vocabulary, max_dist=max_dist, metric=metric.value, sort=sort)
    except BKTreeError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"Found misspell word '{word}'.")
    for match, distance in matches:
        suffix = f" ({distance})" if show_distance else ""
        typer.echo(f"Did you mean '{match}'?{suffix}")


def main() -> None:
    app()


__all__ = ["DEMO_WORDS", "app", "load_words", "main", "suggest"]
