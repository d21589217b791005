"""RECORDCHECK design commands.

Read-only views over the design client. Output goes to **stdout** as
tab-separated ``id<TAB>user_id<TAB>name`` lines, or JSON with ``--json``.
"""

from __future__ import annotations

import json
from dataclasses import asdict

import click

from recordcheck.adapters.design_client import FakeDesignClient
from recordcheck.domain import Design

JSON_OPTION = click.option(
    "--json", "as_json", is_flag=True, help="Print designs as JSON."
)

pass_client = click.make_pass_decorator(FakeDesignClient, ensure=True)


def _echo_designs(items: list[Design], as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps([asdict(d) for d in items]))
        return
    for design in items:
        click.echo(f"{design.id}\t{design.user_id}\t{design.name}")


@click.group()
def designs() -> None:
    """Inspect designs served by the design client."""


@designs.command("show")
@click.argument("design_id", type=int)
@JSON_OPTION
@pass_client
def show(client: FakeDesignClient, design_id: int, as_json: bool) -> None:
    """Show the design served for DESIGN_ID."""
    _echo_designs([client.request_design(design_id)], as_json)


@designs.command("list")
@JSON_OPTION
@pass_client
def list_designs(client: FakeDesignClient, as_json: bool) -> None:
    """List all designs."""
    _echo_designs(client.get_all_designs(), as_json)
