#!/usr/bin/env python
import json

import click

from githook import DISPATCHER_EXTENSION, create_app


@click.group()
@click.option("--config", default=None, help="Config class to use, like 'development'.")
@click.pass_context
def cli(ctx, config):
    ctx.obj = create_app(config=config)


@cli.command("send-event")
@click.argument("event_type")
@click.pass_obj
def send_event(app, event_type):
    "Dispatches EVENT_TYPE as though GitHub had sent it"
    with app.app_context():
        result = app.extensions[DISPATCHER_EXTENSION].dispatch(event_type)
    click.echo(f"{result.status_code} {json.dumps(result.body)}")


@cli.command()
@click.pass_obj
def events(app):
    "Lists the event types that have an action"
    for event_type in app.extensions[DISPATCHER_EXTENSION].event_types:
        click.echo(event_type)


if __name__ == "__main__":
    cli()
