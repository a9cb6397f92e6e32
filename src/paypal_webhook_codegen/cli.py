"""Command line entry point for the webhook event code generator."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from paypal_webhook_codegen import __version__
from paypal_webhook_codegen.codegen import WebhookEnumBuilder
from paypal_webhook_codegen.config import DEFAULT_PACKAGE, CodegenOptions
from paypal_webhook_codegen.exceptions import CodegenError

app = typer.Typer(help="Generate Go PayPal webhook event constants from the PayPal documentation.")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"paypal-webhook-codegen {__version__}")
        raise typer.Exit()


@app.command()
def main(
    webhook_enum: Annotated[
        Optional[Path],
        typer.Option("--webhook-enum", "-o", envvar="PAYPAL_WEBHOOK_ENUM", help="Path of generated Go PayPal enum file"),
    ] = None,
    paypal_html: Annotated[
        Optional[Path],
        typer.Option(
            "--paypal-html",
            envvar="PAYPAL_HTML",
            help="The PayPal html file for code generation, use online html if empty",
        ),
    ] = None,
    go_pkg: Annotated[
        str,
        typer.Option("--go-pkg", envvar="PAYPAL_GO_PKG", help="Package name for generated Go files"),
    ] = DEFAULT_PACKAGE,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version and exit."),
    ] = False,
) -> None:
    """Generate the webhook event enum file."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    options = CodegenOptions(output=webhook_enum, html_path=paypal_html, package=go_pkg)
    try:
        WebhookEnumBuilder().run(options)
    except CodegenError as e:
        typer.echo(f"ERR: {e}", err=True)
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
