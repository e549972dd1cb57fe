import logging
import sys

import click

from .operations import Arguments, perform
from .store.errors import UserStoreError
from .utils.config import (
    DEFAULT_CONFIG,
    get_config_path,
    get_default_file_name,
    get_log_dir,
    get_log_level,
    load_config,
    save_config,
)

CLI_HELP = """\
Maintain a JSON file of user records.

Each run loads the whole file, applies one operation and, for add and
remove, writes the whole file back.

\b
Operations:
  add       --item '{"id": "1", "email": "a@b.com", "age": 23}'
  findById  --id 1
  remove    --id 1
  list

\b
Examples:
  userstore --operation add --fileName users.json --item '{"id": "1", "email": "a@b.com", "age": 23}'
  userstore --operation findById --fileName users.json --id 1
  userstore --operation list --fileName users.json
"""


def configure_logging(config: dict) -> None:
    level = get_log_level(config)
    if level not in logging.getLevelNamesMapping():
        raise click.ClickException(f"Unknown log level in config: {level.lower()}")

    # Logging is best effort: an unusable log location never blocks an operation
    log_dir = get_log_dir()
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError:
        return

    if logging.getLogger().handlers:
        return

    try:
        handler = logging.FileHandler(log_dir / "userstore.log")
    except OSError:
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[handler],
    )


@click.group(
    invoke_without_command=True,
    help=CLI_HELP,
    context_settings={"help_option_names": ["-h", "--help"], "max_content_width": 120},
)
@click.option("--operation", "-operation", "operation", default="",
              help="Allowed values: [add|findById|remove|list]")
@click.option("--fileName", "-fileName", "file_name", default="", envvar="USERSTORE_FILE",
              help="Path to the JSON file with user's data.")
@click.option("--id", "-id", "record_id", default="", help="User identifier")
@click.option("--item", "-item", "item", default="",
              help='User JSON, for example {"id": "1", "email": "email@test.com", "age": 23}')
@click.option("--pretty", is_flag=True, help="Indent JSON output")
@click.pass_context
def cli(ctx, operation, file_name, record_id, item, pretty):
    if ctx.invoked_subcommand is not None:
        return

    config = load_config()
    configure_logging(config)

    args = Arguments(
        operation=operation,
        file_name=file_name or get_default_file_name(config),
        id=record_id,
        item=item,
    )

    try:
        perform(args, sys.stdout, indent=2 if pretty else None)
    except UserStoreError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.option("--init", "init", is_flag=True, help="Write the default config if none exists")
def config(init):
    """Show the config file location and contents."""
    config_path = get_config_path()

    if init:
        if config_path.exists():
            click.echo(f"Config already exists: {config_path}")
        else:
            save_config(DEFAULT_CONFIG)
            click.echo(f"Wrote default config: {config_path}")
        return

    click.echo(f"Config file: {config_path}")
    click.echo()

    if config_path.exists():
        click.echo(config_path.read_text())
    else:
        click.echo("(file does not exist, using defaults)")


if __name__ == "__main__":
    cli()
