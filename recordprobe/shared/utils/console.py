"""
Console output helpers
"""

import sys

import click


def safe_echo(text: str, *, err: bool = False) -> None:
    """Echo text, degrading characters the terminal encoding cannot show"""
    try:
        click.echo(text, err=err)
    except UnicodeEncodeError:
        stream = sys.stderr if err else sys.stdout
        encoding = getattr(stream, "encoding", None) or "ascii"
        click.echo(text.encode(encoding, errors="replace").decode(encoding), err=err)
