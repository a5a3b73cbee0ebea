"""Command-line entry point: print a digest for each file argument."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path
from typing import Optional

import typer

from filehash.config import ConfigError, load_config
from filehash.digest.algorithms import DigestAlgorithm
from filehash.digest.engine import hash_file
from filehash.io.classify import PathCheckResult, classify_all
from filehash.util.logging import configure_logging

app = typer.Typer(add_completion=False, help="Calculate a cryptographic hash for one or more files.")

LOGGER = logging.getLogger(__name__)


class FileOutcome(str, Enum):
    """Terminal state of a single path."""

    HASHED = "hashed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class HashRunSummary:
    """Per-path outcomes of one run, in argument order."""

    outcomes: list[tuple[str, FileOutcome]] = field(default_factory=list)

    def record(self, path: str, outcome: FileOutcome) -> None:
        self.outcomes.append((path, outcome))

    def count(self, outcome: FileOutcome) -> int:
        return sum(1 for _, item in self.outcomes if item is outcome)

    @property
    def all_hashed(self) -> bool:
        return all(item is FileOutcome.HASHED for _, item in self.outcomes)


def _error_detail(exc: OSError) -> str:
    return exc.strerror or str(exc)


def hash_paths(
    checked: Sequence[PathCheckResult],
    algorithm: DigestAlgorithm,
    *,
    chunk_size: int,
) -> HashRunSummary:
    """Hash every classified path in order, reporting each one as it completes.

    Rejected paths go to stderr; open/read failures go to stdout next to the
    digests. Neither stops the loop.
    """

    summary = HashRunSummary()
    for item in checked:
        if not item.hashable:
            LOGGER.info("Skipping %s", item.path)
            typer.echo(f"{item.reason}: unable to hash this file", err=True)
            summary.record(item.path, FileOutcome.SKIPPED)
            continue

        try:
            digest = hash_file(item.path, algorithm, chunk_size=chunk_size)
        except OSError as exc:
            LOGGER.info("Hashing failed for %s: %s", item.path, exc)
            typer.echo(f"{item.path}: error during hashing: {_error_detail(exc)}")
            summary.record(item.path, FileOutcome.FAILED)
            continue

        typer.echo(f"{digest}: {item.path}")
        summary.record(item.path, FileOutcome.HASHED)
    return summary


def _version_callback(value: bool) -> None:
    if not value:
        return
    try:
        current = package_version("filehash")
    except PackageNotFoundError:
        current = "unknown"
    typer.echo(f"filehash {current}")
    raise typer.Exit()


@app.command()
def digest_files(
    digest: DigestAlgorithm = typer.Option(
        ..., "--digest", "-d", case_sensitive=False, help="The cryptographic hash to be calculated"
    ),
    files: Optional[list[str]] = typer.Argument(
        None, metavar="FILE...", help="The file(s) for which the hash should be calculated"
    ),
    strict: Optional[bool] = typer.Option(
        None, "--strict/--no-strict", help="Exit with status 1 if any file could not be hashed"
    ),
    chunk_size: Optional[int] = typer.Option(None, "--chunk-size", min=1, help="Bytes read per streaming step"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", dir_okay=False, help="Also append log records to this file"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Print "<hex-digest>: <path>" for every regular file given."""

    try:
        cfg = load_config(
            overrides={
                "chunk_size": chunk_size,
                "strict": strict,
                "log_level": "INFO" if verbose else None,
            }
        )
    except ConfigError as exc:
        raise typer.BadParameter(str(exc)) from exc

    configure_logging(level=cfg.log_level, log_path=log_file)
    paths = list(files or [])
    LOGGER.info("Hashing %s path(s) with %s", len(paths), digest.value)

    summary = hash_paths(classify_all(paths), digest, chunk_size=cfg.chunk_size)
    LOGGER.info(
        "Done: hashed=%s skipped=%s failed=%s",
        summary.count(FileOutcome.HASHED),
        summary.count(FileOutcome.SKIPPED),
        summary.count(FileOutcome.FAILED),
    )

    if cfg.strict and not summary.all_hashed:
        raise typer.Exit(code=1)


def main() -> None:
    app()


__all__ = ["FileOutcome", "HashRunSummary", "app", "hash_paths", "main"]
