"""Typer-based command line interface for codepoint-core."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

import structlog
import click
import typer

from ..config import AppConfig, dump_default_config, load_config
from ..exceptions import BufferLengthError, ConfigError
from ..logging import configure_logging
from ..models import DecodeStatus, Encoding
from ..sequence import CodepointSequence

app = typer.Typer(help="Inspect UTF-8, UTF-16 and UTF-32 files codepoint by codepoint")
logger = structlog.get_logger(__name__)


@app.callback()
def main(ctx: typer.Context, config: Optional[Path] = typer.Option(None, "--config", metavar="PATH")) -> None:
    try:
        ctx.obj = load_config(config)
    except ConfigError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2) from exc
    configure_logging(ctx.obj.logging.normalized_level())


def _current_config() -> AppConfig:
    ctx = click.get_current_context()
    config: AppConfig | None = ctx.obj
    return config if config is not None else load_config()


def _open_sequence(path: Path, encoding: Encoding) -> Optional[CodepointSequence]:
    data = path.read_bytes()
    try:
        return CodepointSequence.create(encoding, data)
    except BufferLengthError as exc:
        typer.echo(f"{path}: {exc}", err=True)
        raise typer.Exit(code=2) from exc


@app.command()
def decode(
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    encoding: Optional[Encoding] = typer.Option(None, "--encoding", "-e", help="Encoding of PATH"),
    start: int = typer.Option(0, "--start", min=0, help="Code unit index to start decoding at"),
    limit: Optional[int] = typer.Option(None, "--limit", min=1, help="Cap decoded items"),
) -> None:
    config = _current_config()
    cap = limit or config.decode.limit
    sequence = _open_sequence(path, encoding or config.decode.encoding)
    items: List[Dict[str, object]] = []
    if sequence is not None:
        with sequence:
            for index, decoded in sequence.iter_codepoints(start):
                items.append(
                    {
                        "index": index,
                        "consumed": decoded.consumed,
                        "status": decoded.codepoint.status.value,
                        "codepoint": decoded.codepoint.label(),
                    }
                )
                if cap and len(items) >= cap:
                    break
    logger.debug("decode.completed", path=str(path), items=len(items))
    typer.echo(json.dumps(items, indent=2))


@app.command()
def stats(
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    encoding: Optional[Encoding] = typer.Option(None, "--encoding", "-e", help="Encoding of PATH"),
) -> None:
    config = _current_config()
    sequence = _open_sequence(path, encoding or config.decode.encoding)
    summary = {"units": 0, "scalars": 0, "faulty": 0}
    if sequence is not None:
        with sequence:
            summary["units"] = sequence.length
            for codepoint in sequence:
                if codepoint.status is DecodeStatus.SCALAR:
                    summary["scalars"] += 1
                else:
                    summary["faulty"] += 1
    typer.echo(json.dumps(summary))


@app.command()
def init_config(
    destination: Path = typer.Argument(Path.cwd() / ".codepoint" / "config.yaml", help="Where to write the config"),
) -> None:
    dump_default_config(destination)
    typer.echo(f"Default configuration written to {destination}")


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
