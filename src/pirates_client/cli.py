"""
Command line program for the pirates API.

Issues a single request and prints the result:

    pirates get /pirates
    pirates post /pirates --payload '{"name": "Anne"}'
    pirates patch /pirates/2 --payload '{"name": "Anne Bonny"}'
    pirates delete /pirates/2
    pirates settings
"""

import asyncio
import json
import logging
import sys

import httpx
from invoke import Collection, Exit, Program, task

from pirates_client import __version__
from pirates_client.client import HttpClient
from pirates_client.config import ConfigException, bootstrap_logging, print_settings

logger = logging.getLogger(__name__)

REQUEST_HELP = {
    'path': "Request path appended to the base URL, e.g. /pirates",
    'base': "Override the configured API base URL",
}
PAYLOAD_HELP = {
    **REQUEST_HELP,
    'payload': "JSON text sent as the request body (required)",
}


def _bootstrap():
    try:
        bootstrap_logging(__name__)
    except ConfigException as e:
        raise Exit(e.guidance, code=1)


def _make_client(base=None) -> HttpClient:
    try:
        return HttpClient(base)
    except ConfigException as e:
        raise Exit(e.guidance, code=1)


def _parse_payload(payload, verb):
    if payload is None:
        raise Exit(f"{verb} requires --payload, e.g. --payload '{{\"name\": \"Anne\"}}'", code=1)
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise Exit(f"Invalid --payload JSON: {e}", code=1)


def _run(coro):
    try:
        return asyncio.run(coro)
    except httpx.HTTPError as e:
        raise Exit(f"Request failed: {e}", code=1)


def _print_response(response: httpx.Response):
    print(f"{response.status_code} {response.reason_phrase}")
    if response.content:
        print(response.text)


@task(help=REQUEST_HELP)
def get(c, path, base=None):
    """GET a path and pretty-print the JSON body."""
    _bootstrap()
    client = _make_client(base)
    try:
        data = _run(client.get(path))
    except json.JSONDecodeError as e:
        raise Exit(f"Response body is not JSON: {e}", code=1)
    print(json.dumps(data, indent=2))


@task(help=REQUEST_HELP)
def delete(c, path, base=None):
    """DELETE a path and print the raw response."""
    _bootstrap()
    client = _make_client(base)
    _print_response(_run(client.delete(path)))


@task(help=PAYLOAD_HELP)
def post(c, path, payload=None, base=None):
    """POST a JSON payload and print the raw response."""
    _bootstrap()
    body = _parse_payload(payload, "post")
    client = _make_client(base)
    _print_response(_run(client.post(path, body)))


@task(help=PAYLOAD_HELP)
def patch(c, path, payload=None, base=None):
    """PATCH a JSON payload and print the raw response."""
    _bootstrap()
    body = _parse_payload(payload, "patch")
    client = _make_client(base)
    _print_response(_run(client.patch(path, body)))


@task
def settings(c):
    """Show resolved runtime settings and where each came from."""
    _bootstrap()
    try:
        print_settings(file=sys.stdout)
    except ConfigException as e:
        raise Exit(e.guidance, code=1)


namespace = Collection(get, delete, post, patch, settings)

program = Program(name='pirates', binary='pirates', namespace=namespace, version=__version__)
