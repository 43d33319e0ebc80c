"""
recordprobe command line application
"""

import click

from recordprobe import __version__
from recordprobe.cli.commands.run import run_command


@click.group()
@click.version_option(version=__version__, prog_name="recordprobe")
def cli_app() -> None:
    """Run boundary-value probes against validatable records."""


cli_app.add_command(run_command)


def main() -> None:
    """Console entry point"""
    cli_app()
