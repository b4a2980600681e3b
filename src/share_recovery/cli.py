# SPDX-FileCopyrightText: 2025 Share Recovery contributors
# SPDX-License-Identifier: MIT

"""Command line interface: ``share-recover INPUT``."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import click

from .config import TIE_BREAK_FIRST, TIE_BREAK_SMALLEST, load_config
from .digits import unlimited_int_digits
from .document import load_document
from .errors import RecoveryError
from .reconstruct import Reconstruction, recover_secret


def _print_report(result: Reconstruction) -> None:
    click.echo(f"secret: {result.secret}")
    click.echo(f"threshold: {result.threshold}")
    click.echo(f"shares: {result.share_count}")
    click.echo(f"combinations: {result.combination_count}")
    click.echo(f"agreement: {result.agreement}/{result.combination_count}")
    if result.tied:
        click.echo("warning: plurality is tied, winner chosen by tie-break rule")
    suspects = ", ".join(str(i) for i in result.suspects) or "none"
    click.echo(f"suspect shares: {suspects}")


@click.command(name="share-recover")
@click.argument("input_path", metavar="INPUT", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--report", is_flag=True, help="Print run details next to the secret.")
@click.option(
    "--tie-break",
    type=click.Choice([TIE_BREAK_SMALLEST, TIE_BREAK_FIRST]),
    default=None,
    help="Rule for a tied plurality vote.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(
    input_path: Path,
    report: bool,
    tie_break: str | None,
    verbose: bool,
) -> None:
    """Recover the secret from the share document INPUT (JSON or YAML)."""

    settings = load_config()
    if tie_break:
        settings = replace(settings, tie_break=tie_break)
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    with unlimited_int_digits():
        try:
            document = load_document(input_path)
            result = recover_secret(document, settings=settings)
        except RecoveryError as exc:
            raise click.ClickException(f"{exc.kind}: {exc}") from None

        if report:
            _print_report(result)
        else:
            click.echo(result.secret)


if __name__ == "__main__":
    main()
