# blockwatch/cli/commands.py

import click

from .. import create_watcher
from ..clients.rpc_client import NodeRpcClient
from ..core.errors import WatcherError
from ..core.logging import WatcherLogger, log_with_context, INFO, ERROR
from ..stream.notifier import PollingBlockNotifier
from ..watcher.block_watcher import BlockWatcher
from ..watcher.output import console_output, format_block

rpc_url_option = click.option('--rpc-url', help='JSON-RPC endpoint (overrides BLOCKWATCH_RPC_URL)')


def _create_container(ctx, **overrides):
    if ctx.obj.get('verbose'):
        overrides['log_level'] = 'DEBUG'
    try:
        return create_watcher(**overrides)
    except WatcherError as e:
        raise click.ClickException(str(e))


@click.command()
@rpc_url_option
@click.option('--poll-interval', type=click.FloatRange(min=0, min_open=True),
              help='Seconds between head polls (overrides BLOCKWATCH_POLL_INTERVAL)')
@click.option('--max-blocks', type=click.IntRange(min=1), help='Exit after this many blocks')
@click.pass_context
def watch(ctx, rpc_url, poll_interval, max_blocks):
    """Watch for new blocks and print one line per transaction

    Examples:
        # Local development node
        blockwatch watch --rpc-url http://127.0.0.1:8545

        # Print the next 10 blocks and exit
        blockwatch watch --max-blocks 10
    """
    logger = WatcherLogger.get_logger('cli.watch')
    container = _create_container(ctx, rpc_url=rpc_url, poll_interval=poll_interval)

    try:
        rpc = container.get(NodeRpcClient)
        log_with_context(logger, INFO, "Start listening...",
                         endpoint=rpc.endpoint_url,
                         chain_id=rpc.get_chain_id())

        notifier = container.get(PollingBlockNotifier)
        notifier.run(max_blocks=max_blocks)

    except KeyboardInterrupt:
        log_with_context(logger, INFO, "Interrupted, shutting down")

    except WatcherError as e:
        # already logged with context where it was raised
        raise click.ClickException(f"Watcher failed: {e}")

    except Exception as e:
        log_with_context(logger, ERROR, "Watcher terminated", exc_info=True,
                         error=str(e), exception_type=type(e).__name__)
        raise click.ClickException(f"Watcher failed: {e}")

    finally:
        watcher = container.peek(BlockWatcher)
        if watcher is not None:
            log_with_context(logger, INFO, "Watcher summary",
                             blocks_seen=watcher.blocks_seen,
                             transactions_seen=watcher.transactions_seen)
        container.shutdown()


@click.command()
@click.argument('height', type=click.IntRange(min=0))
@rpc_url_option
@click.pass_context
def block(ctx, height, rpc_url):
    """Fetch a single block and print one line per transaction"""
    container = _create_container(ctx, rpc_url=rpc_url)

    try:
        fetched = container.get(NodeRpcClient).get_block(height)
        for line in format_block(fetched):
            console_output(line)
    except Exception as e:
        raise click.ClickException(f"Block {height} failed: {e}")
    finally:
        container.shutdown()


@click.command()
@rpc_url_option
@click.pass_context
def head(ctx, rpc_url):
    """Print the current block number"""
    container = _create_container(ctx, rpc_url=rpc_url)

    try:
        console_output(str(container.get(NodeRpcClient).get_block_number()))
    except Exception as e:
        raise click.ClickException(f"Head lookup failed: {e}")
    finally:
        container.shutdown()
