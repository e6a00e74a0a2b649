# SPDX-FileCopyrightText: 2025 secret-recovery contributors
# SPDX-License-Identifier: MIT

"""Command line interface: recover secrets from JSON share records."""

from __future__ import annotations

import logging
import sys

import click

from .batch import solve_all
from .bigint import to_decimal
from .interpolation import DivisionMode
from .policy import policy

DEFAULT_SOURCES = ("testcase1.json", "testcase2.json")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False))
@click.option(
    "--division",
    type=click.Choice([m.value for m in DivisionMode]),
    default=policy.division.value,
    show_default=True,
    help="Per-term truncating division or exact rational accumulation",
)
@click.option("--jobs", type=click.IntRange(min=1), default=policy.max_workers, show_default=True, help="Worker threads")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(files: tuple[str, ...], division: str, jobs: int, verbose: bool) -> None:
    """Print the secret f(0) for each share record in FILES.

    Without FILES, testcase1.json and testcase2.json in the current
    directory are used.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else policy.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    sources = files or DEFAULT_SOURCES

    failed = False
    for result in solve_all(sources, division=division, max_workers=jobs):
        if result.ok:
            click.echo(f"Secret for Test Case {result.case_id}: {to_decimal(result.secret)}")
        else:
            failed = True
            click.echo(
                f"Error processing test case {result.case_id} ({result.source}): {result.error}",
                err=True,
            )
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
