from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, List, Tuple, TypedDict

import typer
import yaml

from .analysis import analyze, analyze_documents
from .baseline import analyze_naive
from .config import WordStatsConfig, load_config
from .generator import generate_text
from .models import Document, TextStats
from .report import render_benchmark

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Word statistics CLI.", no_args_is_help=True)


@app.callback()
def _configure_logging(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log progress to stderr."
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("analyze")
def analyze_command(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    top_words: int | None = typer.Option(
        None, "--top-words", help="How many frequent words to report."
    ),
    longest_words: int | None = typer.Option(
        None, "--longest-words", help="How many long words to report."
    ),
    alphabet: str | None = typer.Option(
        None, "--alphabet", help="Alphabetic classification ('unicode' or 'ascii')."
    ),
) -> None:
    """Analyze text files and emit a JSON summary."""
    cfg = _load_config_or_fail(config)
    _apply_analysis_overrides(cfg, top_words, longest_words, alphabet)
    documents, _ = _load_documents(input_path)
    LOGGER.info("Loaded %d document(s) from %s", len(documents), input_path)
    results = analyze_documents(documents, cfg)
    typer.echo(json.dumps({"documents": _build_summary(results)}, indent=2))


@app.command()
def benchmark(
    size: int | None = typer.Option(
        None, "--size", "-n", help="Number of generated words to analyze."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Compare the naive baseline against the optimized analyzer."""
    cfg = _load_config_or_fail(config)
    if size is not None:
        cfg.benchmark_size = size
    _validate_or_fail(cfg)

    text = generate_text(cfg.benchmark_size, cfg.vocabulary)
    LOGGER.info("Benchmarking %d words (%d bytes)", cfg.benchmark_size, len(text))
    baseline_stats = analyze_naive(text, cfg)
    optimized_stats = analyze(text, cfg)
    for line in render_benchmark(
        len(text.encode("utf-8")), baseline_stats, optimized_stats, cfg.preview_count
    ):
        typer.echo(line)


@app.command()
def generate(
    size: int = typer.Option(..., "--size", "-n", help="Number of words to emit."),
    output_path: Path | None = typer.Option(None, "--output-path", dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Generate repeatable benchmark text from the configured vocabulary."""
    cfg = _load_config_or_fail(config)
    text = generate_text(size, cfg.vocabulary)
    if output_path is None:
        typer.echo(text)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    typer.echo(f"Wrote {max(size, 0)} words to {output_path}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = WordStatsConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


# File types the CLI knows how to expand into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt"}


class RankedWordPayload(TypedDict):
    word: str
    count: int


class DocumentSummary(TypedDict):
    doc_id: str
    word_count: int
    char_count: int
    top_words: List[RankedWordPayload]
    longest_words: List[str]
    elapsed_ms: float


def _load_config_or_fail(path: Path | None) -> WordStatsConfig:
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _validate_or_fail(config: WordStatsConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _apply_analysis_overrides(
    config: WordStatsConfig,
    top_words: int | None,
    longest_words: int | None,
    alphabet: str | None,
) -> None:
    """Apply CLI overrides to analysis config fields when provided."""
    if top_words is not None:
        config.top_words_limit = top_words
    if longest_words is not None:
        config.longest_words_limit = longest_words
    if alphabet:
        config.alphabet = alphabet.lower().strip()
    _validate_or_fail(config)


def _load_documents(input_path: Path) -> Tuple[List[Document], Dict[str, Path]]:
    """Expand the input path into documents plus a doc_id -> original path mapping."""
    if input_path.is_file():
        doc = _document_from_file(input_path, input_path.name)
        return [doc], {doc.doc_id: input_path}

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    documents: List[Document] = []
    mapping: Dict[str, Path] = {}
    for file in files:
        # Relative paths keep doc IDs stable regardless of where the tree lives.
        relative_id = file.relative_to(input_path).as_posix()
        documents.append(_document_from_file(file, relative_id))
        mapping[relative_id] = file
    return documents, mapping


def _document_from_file(path: Path, doc_id: str) -> Document:
    """Read a text file from disk and wrap it in a Document."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text: {exc}") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(results: Dict[str, TextStats]) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each analyzed document."""
    summary: List[DocumentSummary] = []
    for doc_id, stats in sorted(results.items()):
        summary.append(
            {
                "doc_id": doc_id,
                "word_count": stats.word_count,
                "char_count": stats.char_count,
                "top_words": [
                    {"word": ranked.word, "count": ranked.score}
                    for ranked in stats.top_words
                ],
                "longest_words": list(stats.longest_words),
                "elapsed_ms": stats.elapsed_ms,
            }
        )
    return summary


if __name__ == "__main__":
    main()
