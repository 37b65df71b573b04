# blockwatch/cli/main.py

"""
Block Watcher CLI

Usage: python -m blockwatch [command] [options]
"""

import click

from ..core.logging import WatcherLogger
from .commands import watch, block, head


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, verbose):
    """Block Watcher - print transactions of new blocks from a JSON-RPC node"""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    # Early console logging; commands reconfigure from WatcherConfig
    WatcherLogger.configure(
        log_level="DEBUG" if verbose else "INFO",
        console_enabled=True,
        file_enabled=False,
        force=True,
    )


cli.add_command(watch)
cli.add_command(block)
cli.add_command(head)
