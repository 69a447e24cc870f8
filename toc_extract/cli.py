"""
CLI entry point: extract a table of contents from the shell.

    toc-extract extract path/to/course.pdf -o toc.html
    toc-extract text extracted.txt --json
    toc-extract entries extracted.txt        # print the outline
    toc-extract config show
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from toc_extract.api import extract_toc_from_pdf
from toc_extract.backends import REGISTRY, TextExtractionError
from toc_extract.config import load_config
from toc_extract.core import extract_toc
from toc_extract.models import ExtractionResult, RawDocument
from toc_extract.tools.config import config_app

app = typer.Typer(
    name="toc-extract",
    help="Extract a table of contents from course-material PDFs and render it as HTML.",
)
app.add_typer(config_app, name="config")


def _setup_logging(verbose: int) -> None:
    if verbose:
        level = logging.DEBUG if verbose > 1 else logging.INFO
        logging.basicConfig(level=level, format="%(message)s")


def _read_text(path: Path) -> str:
    """Read a text file, or stdin for '-'."""
    if str(path) == "-":
        return sys.stdin.read()
    if not path.is_file():
        typer.echo(f"Error: file not found: {path}", err=True)
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8", errors="replace")


def _result_payload(result: ExtractionResult, document: RawDocument) -> dict:
    return {
        "success": True,
        "toc_html": result.html,
        "outcome": result.outcome.value,
        "mode": result.mode.value if result.mode else None,
        "entries": [e.model_dump() for e in result.entries],
        "pdf_info": {
            "pages": document.page_count,
            "title": document.title,
            "author": document.author,
        },
    }


def _emit(result: ExtractionResult, document: RawDocument, output: Path | None, as_json: bool) -> None:
    out = json.dumps(_result_payload(result, document), indent=2) if as_json else result.html
    if output is None:
        typer.echo(out)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(out, encoding="utf-8")
    typer.echo(f"{len(result.entries)} entries ({result.outcome.value}) → {output}", err=True)


@app.command("extract")
def extract_cmd(
    pdf: Path = typer.Argument(..., help="Path to the PDF file", path_type=Path),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to file instead of stdout"),
    backend: str = typer.Option(
        "pymupdf",
        "--backend",
        "-b",
        help=f"Backend: {', '.join(REGISTRY)}",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON (html, entries, pdf info)"),
    verbose: int = typer.Option(0, "-v", "--verbose", count=True, help="-v info, -vv debug"),
) -> None:
    """Extract the TOC of a PDF as an HTML fragment."""
    _setup_logging(verbose)
    if backend not in REGISTRY:
        typer.echo(f"Error: unknown backend '{backend}'. Choose: {', '.join(REGISTRY)}", err=True)
        raise typer.Exit(1)
    try:
        document, result = extract_toc_from_pdf(pdf, backend=backend, config=load_config())
    except TextExtractionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    _emit(result, document, output, as_json)


@app.command("text")
def text_cmd(
    path: Path = typer.Argument(..., help="Plain-text file ('-' for stdin)", path_type=Path),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write to file instead of stdout"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON (html, entries)"),
    verbose: int = typer.Option(0, "-v", "--verbose", count=True, help="-v info, -vv debug"),
) -> None:
    """Extract the TOC from already-extracted text."""
    _setup_logging(verbose)
    document = RawDocument(text=_read_text(path))
    result = extract_toc(document, load_config())
    _emit(result, document, output, as_json)


@app.command("entries")
def entries_cmd(
    path: Path = typer.Argument(..., help="Plain-text file or PDF ('-' for stdin)", path_type=Path),
    verbose: int = typer.Option(0, "-v", "--verbose", count=True, help="-v info, -vv debug"),
) -> None:
    """Print accepted entries as an indented outline."""
    _setup_logging(verbose)
    config = load_config()
    if path.suffix.lower() == ".pdf":
        try:
            _, result = extract_toc_from_pdf(path, config=config)
        except TextExtractionError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)
    else:
        result = extract_toc(_read_text(path), config)

    if not result.entries:
        typer.echo(f"No entries found ({result.outcome.value}).")
        return
    for entry in result.entries:
        indent = "  " * (entry.level - 1)
        typer.echo(f"{indent}- {entry.title} (p. {entry.page})")
    typer.echo(f"\n{len(result.entries)} entries, {result.mode.value} mode, stopped: {result.stop_reason.value}")


def main() -> None:
    """Entry point for the toc-extract console script."""
    app()


if __name__ == "__main__":
    main()
