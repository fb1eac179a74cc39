"""
Command-line front end for the ZeptoMail client.

Commands:
    * ``send`` - send a single email
    * ``send-template`` - send a single template email
    * ``upload`` - upload a file to the file cache

The API key and endpoint come from ZEPTOMAIL_* settings; ``--api-key`` and
``--base-url`` override them.
"""

from __future__ import annotations

import asyncio
import mimetypes
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

import click
from pydantic import BaseModel, ValidationError

from zeptomail.client import ZeptoMailClient
from zeptomail.config import get_settings
from zeptomail.errors import ZeptoMailError
from zeptomail.factory import create_client
from zeptomail.models import (
    EmailAddress,
    EmailRequest,
    FileUploadRequest,
    Recipient,
    TemplateEmailRequest,
)
from zeptomail.shared.logging import setup_logging

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

ClientFactory = Callable[..., ZeptoMailClient]
RequestT = TypeVar("RequestT", bound=BaseModel)


def _parse_merge(values: tuple[str, ...]) -> dict[str, str] | None:
    if not values:
        return None
    merge: dict[str, str] = {}
    for item in values:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint="--merge")
        merge[key] = value
    return merge


def _build_request(build: Callable[[], RequestT]) -> RequestT:
    """Construct a request model, turning validation failures into usage errors."""
    try:
        return build()
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'request'}: {err['msg']}"
            for err in e.errors()
        )
        raise click.UsageError(f"Invalid request: {problems}") from e


def _run(ctx: click.Context, operation: str, request: BaseModel) -> None:
    """Build a client, run one operation and print its envelope."""
    settings = ctx.obj["settings"]
    if not settings.api_key:
        raise click.UsageError("No API key: pass --api-key or set ZEPTOMAIL_API_KEY", ctx=ctx)

    factory: ClientFactory = ctx.obj["client_factory"]

    async def _call() -> BaseModel:
        async with factory(settings) as client:
            return await getattr(client, operation)(request)

    try:
        envelope = asyncio.run(_call())
    except ZeptoMailError as e:
        click.echo(str(e), err=True)
        raise SystemExit(1) from e

    click.echo(envelope.model_dump_json(indent=2, exclude_none=True))


@click.group(context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--api-key", default=None, help="Send Mail token (default: ZEPTOMAIL_API_KEY).")
@click.option("--base-url", default=None, help="Override the regional API base URL.")
@click.option("--log-level", default=None, help="Log level for structured logs.")
@click.pass_context
def cli(
    ctx: click.Context,
    api_key: str | None,
    base_url: str | None,
    log_level: str | None,
) -> None:
    """Send email through the ZeptoMail API."""
    overrides: dict[str, Any] = {}
    if api_key:
        overrides["api_key"] = api_key
    if base_url:
        overrides["base_url"] = base_url
    if log_level:
        overrides["log_level"] = log_level

    settings = get_settings().model_copy(update=overrides)
    setup_logging(settings.log_level)

    # A caller-supplied obj replaces the client factory (used by tests).
    factory = ctx.obj if callable(ctx.obj) else create_client
    ctx.obj = {"settings": settings, "client_factory": factory}


@cli.command("send")
@click.option("--from", "sender", required=True, help="Sender address.")
@click.option("--from-name", default=None, help="Sender display name.")
@click.option("--to", "recipients", required=True, multiple=True, help="Recipient address (repeatable).")
@click.option("--subject", required=True)
@click.option("--html", "htmlbody", default=None, help="HTML body.")
@click.option("--text", "textbody", default=None, help="Plain text body.")
@click.option("--bounce-address", default=None)
@click.option("--client-reference", default=None)
@click.pass_context
def cli_send(
    ctx: click.Context,
    sender: str,
    from_name: str | None,
    recipients: tuple[str, ...],
    subject: str,
    htmlbody: str | None,
    textbody: str | None,
    bounce_address: str | None,
    client_reference: str | None,
) -> None:
    """Send a single email."""
    if htmlbody is None and textbody is None:
        raise click.UsageError("Provide --html and/or --text")

    request = _build_request(
        lambda: EmailRequest(
            sender=EmailAddress(address=sender, name=from_name),
            recipients=[Recipient.of(address) for address in recipients],
            subject=subject,
            htmlbody=htmlbody,
            textbody=textbody,
            bounce_address=bounce_address,
            client_reference=client_reference,
        )
    )
    _run(ctx, "send_email", request)


@cli.command("send-template")
@click.option("--template-key", required=True)
@click.option("--from", "sender", required=True, help="Sender address.")
@click.option("--to", "recipients", required=True, multiple=True, help="Recipient address (repeatable).")
@click.option("--merge", "merge", multiple=True, help="Template variable KEY=VALUE (repeatable).")
@click.option("--bounce-address", default=None)
@click.pass_context
def cli_send_template(
    ctx: click.Context,
    template_key: str,
    sender: str,
    recipients: tuple[str, ...],
    merge: tuple[str, ...],
    bounce_address: str | None,
) -> None:
    """Send a single email rendered from a stored template."""
    merge_info = _parse_merge(merge)
    request = _build_request(
        lambda: TemplateEmailRequest(
            template_key=template_key,
            sender=EmailAddress(address=sender),
            recipients=[Recipient.of(address) for address in recipients],
            merge_info=merge_info,
            bounce_address=bounce_address,
        )
    )
    _run(ctx, "send_template_email", request)


@cli.command("upload")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--name", default=None, help="File name (default: the file's basename).")
@click.option("--content-type", default=None, help="MIME type (default: guessed from the name).")
@click.pass_context
def cli_upload(
    ctx: click.Context,
    path: Path,
    name: str | None,
    content_type: str | None,
) -> None:
    """Upload a file to the file cache and print its file_cache_key."""
    name = name or path.name
    if content_type is None:
        content_type = mimetypes.guess_type(name)[0] or "application/octet-stream"

    request = _build_request(
        lambda: FileUploadRequest(name=name, content_type=content_type, data=path.read_bytes())
    )
    _run(ctx, "upload_file_to_cache", request)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
