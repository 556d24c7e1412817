"""CLI entry point for doubt-solver."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click

from doubt_solver import __version__

_config_option = click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    envvar='DOUBT_SOLVER_CONFIG',
    type=click.Path(exists=True, dir_okay=False),
    help='Path to YAML config file.',
)


def _load_runtime(config_path: str | None, overrides: dict):
    """Load settings and the configured template. Exits on missing or malformed files."""
    from doubt_solver.l3_interface_adapters.gateways.yaml_template_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlTemplateLoader,
    )
    from doubt_solver.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        load_settings,
    )

    try:
        settings = load_settings(config_path, overrides)
        template = YamlTemplateLoader().load(settings.app.template)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)
    return settings.app, settings.infra, template


def _build_container(config, infra, template):
    from doubt_solver.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: provider SDKs not loaded on --help
        DependencyContainer,
    )

    try:
        return DependencyContainer(config, template, infra=infra)
    except ValueError as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)


def _setup_logging(config) -> None:
    from doubt_solver.l4_frameworks_and_drivers.logging_setup import setup_logging  # noqa: PLC0415 -- deferred

    setup_logging(config.logging.level, Path(config.logging.file) if config.logging.file else None)


@click.group()
@click.version_option(version=__version__)
def cli():
    """doubt-solver -- problem-scoped DSA tutoring chat gateway."""


@cli.command()
@_config_option
@click.option('--host', default=None, help='Interface to bind (overrides server.host).')
@click.option('--port', default=None, type=int, help='Port to bind (overrides server.port).')
@click.option(
    '--env',
    'environment',
    default=None,
    envvar='DOUBT_SOLVER_ENV',
    help="Deployment environment; anything but 'production' exposes error detail.",
)
def serve(config_path, host, port, environment):
    """Serve POST /ai/chat over HTTP."""
    server_overrides: dict = {}
    if host:
        server_overrides['host'] = host
    if port:
        server_overrides['port'] = port
    if environment:
        server_overrides['environment'] = environment
    overrides = {'server': server_overrides} if server_overrides else {}

    config, infra, template = _load_runtime(config_path, overrides)
    _setup_logging(config)
    container = _build_container(config, infra, template)
    _preflight_provider(container.llm_client)

    import uvicorn  # noqa: PLC0415 -- deferred: server stack only needed for serve

    from doubt_solver.l4_frameworks_and_drivers.server import create_app  # noqa: PLC0415 -- deferred

    uvicorn.run(
        create_app(container.controller),
        host=config.server.host,
        port=config.server.port,
        log_level=config.logging.level.lower(),
    )


@cli.command()
@_config_option
@click.option('-t', '--title', default=None, help='Problem title.')
@click.option('-d', '--description', default=None, help='Problem description.')
@click.option('--test-cases', default=None, help='Example test cases.')
@click.option(
    '--start-code',
    'start_code_file',
    default=None,
    type=click.File('r', encoding='utf-8'),
    help='File holding the starter code.',
)
@click.argument('question')
def ask(config_path, title, description, test_cases, start_code_file, question):
    """Ask the tutor a single QUESTION about a problem and print the reply."""
    config, infra, template = _load_runtime(config_path, {})
    _setup_logging(config)
    container = _build_container(config, infra, template)

    body = {
        'messages': [{'role': 'user', 'content': question}],
        'title': title,
        'description': description,
        'testCases': test_cases,
        'startCode': start_code_file.read() if start_code_file else None,
    }
    reply = asyncio.run(container.controller.handle(body))
    if reply.status_code >= 400:
        click.echo(f'Error ({reply.status_code}): {reply.body["message"]}', err=True)
        if 'error' in reply.body:
            click.echo(reply.body['error'], err=True)
        sys.exit(1)
    click.echo(reply.body['message'])


@cli.command('templates')
def list_templates():
    """List available tutor templates."""
    from doubt_solver.l3_interface_adapters.gateways.yaml_template_loader import (  # noqa: PLC0415 -- deferred
        YamlTemplateLoader,
    )

    for meta in YamlTemplateLoader().list_templates():
        click.echo(f'{meta.key}\t{meta.name}\t{meta.description}')


def _preflight_provider(llm_client) -> None:
    ok, err = llm_client.check_connectivity()
    if not ok:
        click.echo(f'Warning: completion provider not reachable ({err}). Chat requests will fail.', err=True)
