#!/usr/bin/env python3
"""PrestaShop Connector - Entry point."""
import json
import logging
from pathlib import Path

import click
from colorama import Fore, Style, init

from config import app_config
from prestashop_connector import __version__
from prestashop_connector.api import LookupService, PrestaShopClient
from prestashop_connector.errors import PrestaShopError
from prestashop_connector.resources import OperationRunner
from prestashop_connector.schema.fields import get_attribute_options
from prestashop_connector.trigger import EVENTS, Poller, PollStateStore

# Initialize colorama
init(autoreset=True)


def print_banner():
    """Print application banner."""
    click.echo(f"{Fore.CYAN}{'=' * 44}")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}PrestaShop Connector{Fore.CYAN}                 ║")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}Webservice operations for workflows{Fore.CYAN}  ║")
    click.echo(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}")
    click.echo()


def load_items(path):
    """Read items from a JSON file: one object or a list of objects."""
    if path is None:
        return [{}]

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    return data if isinstance(data, list) else [data]


def make_client(output_format=None):
    if output_format:
        app_config.prestashop_api.output_format = output_format.upper()
    return PrestaShopClient(app_config.prestashop_api)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """PrestaShop Connector - Run webservice operations from the command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("resource")
@click.argument("operation")
@click.option(
    "--items",
    type=click.Path(exists=True),
    help="JSON file with the parameters of each item",
)
@click.option("--continue-on-fail", is_flag=True, help="Record failed items and keep going")
@click.option("--output-format", type=click.Choice(["JSON", "XML"], case_sensitive=False))
def run(resource, operation, items, continue_on_fail, output_format):
    """Run OPERATION on RESOURCE for every item (e.g. run product getAll)."""
    runner = OperationRunner(make_client(output_format))

    try:
        results = runner.run(resource, operation, load_items(items), continue_on_fail)
    except PrestaShopError as e:
        click.echo(f"{Fore.RED}❌ {e}", err=True)
        raise SystemExit(1)

    click.echo(json.dumps(results, indent=2, default=str))

    errors = sum(1 for result in results if "error" in result["json"])
    if errors:
        click.echo(f"{Fore.YELLOW}⚠️  {errors} items failed", err=True)


@cli.command()
@click.argument("event", type=click.Choice(EVENTS))
@click.option("--starting-id", type=int, default=0, help="Only entities with a greater id are detected")
def poll(event, starting_id):
    """Print entities created since the last poll of EVENT."""
    store = PollStateStore(Path(app_config.state_dir) / "poll_state.json")
    poller = Poller(make_client(), event, starting_id=starting_id, store=store)

    try:
        new_items = poller.poll()
    except PrestaShopError as e:
        click.echo(f"{Fore.RED}❌ {e}", err=True)
        raise SystemExit(1)

    click.echo(json.dumps(new_items, indent=2, default=str))
    click.echo(f"{Fore.GREEN}✅ {len(new_items)} new entities", err=True)


@cli.command()
@click.argument("name", type=click.Choice(sorted(LookupService.LOOKUPS)))
def lookup(name):
    """List the choices of a lookup (languages, order_states, ...)."""
    lookups = LookupService(make_client())

    try:
        options = lookups.get(name)
    except PrestaShopError as e:
        click.echo(f"{Fore.RED}❌ {e}", err=True)
        raise SystemExit(1)

    for option in options:
        click.echo(f"{str(option.value):>6}  {option.name}")


@cli.command()
@click.argument("resource", type=click.Choice(["customer", "order", "product", "specific_price"]))
def fields(resource):
    """List the filterable and sortable attributes of RESOURCE."""
    for option in get_attribute_options(resource):
        click.echo(f"{option.value:35s} {option.name}")


@cli.command()
def config_api():
    """Configure PrestaShop webservice credentials."""
    print_banner()

    click.echo(f"{Fore.YELLOW}PrestaShop Webservice Configuration")
    click.echo(f"{Fore.YELLOW}{'=' * 35}")

    base_url = click.prompt("Shop URL", default=app_config.prestashop_api.base_url)
    api_key = click.prompt("Webservice key", hide_input=True, default="")

    app_config.prestashop_api.base_url = base_url
    app_config.prestashop_api.api_key = api_key

    lookups = LookupService(make_client())
    try:
        language = lookups.get_default_language()
    except PrestaShopError as e:
        click.echo(f"{Fore.RED}❌ Could not reach the webservice: {e}")
        return

    click.echo(f"{Fore.GREEN}✅ Connected! Default language id: {language}")


if __name__ == "__main__":
    cli()
