"""linkmeta CLI — resolve URLs from the command line.

Usage:
    linkmeta --url "https://youtu.be/abc123"
    linkmeta --batch "https://github.com/encode/httpx" --batch "https://example.org"
    linkmeta --url "https://medium.com/@someone/post" --verbose
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys

import typer

from .errors import ProcessingFailed

app = typer.Typer(add_completion=False, pretty_exceptions_enable=False)


def _dump(item) -> dict:
    return item.model_dump(by_alias=True, exclude_none=True)


@app.command()
def main(
    url: str = typer.Option(None, help="URL to resolve (book page, article, repository, video...)"),
    batch: list[str] = typer.Option(None, help="Multiple URLs to resolve concurrently"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log provider selection and failures"),
) -> None:
    """Print the normalized metadata of a URL as JSON."""
    sys.stdout.reconfigure(encoding="utf-8")
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    from .service import resolve_batch, resolve_item

    # ── Batch mode ────────────────────────────────────────────────
    if batch:
        results = asyncio.run(resolve_batch(batch))
        output = []
        failed = False
        for target, result in zip(batch, results):
            if isinstance(result, ProcessingFailed):
                failed = True
                output.append({"productUrl": target, "error": str(result)})
            else:
                output.append(_dump(result))
        typer.echo(json.dumps(output, indent=2, ensure_ascii=False))
        raise typer.Exit(1 if failed else 0)

    # ── Single URL mode ───────────────────────────────────────────
    if not url:
        typer.echo("Error: --url or --batch is required.\n"
                   "  linkmeta --url 'https://example.com'\n"
                   "  linkmeta --batch 'https://url1.com' --batch 'https://url2.com'")
        raise typer.Exit(1)

    try:
        item = asyncio.run(resolve_item(url))
    except ProcessingFailed as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1)
    typer.echo(json.dumps(_dump(item), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    app()
