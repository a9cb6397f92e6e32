"""Pipeline that turns the event-names page into a generated Go file."""

import logging
from pathlib import Path

from paypal_webhook_codegen.config import CodegenOptions
from paypal_webhook_codegen.exceptions import CodegenError, NothingToDoError
from paypal_webhook_codegen.generator import Generator
from paypal_webhook_codegen.parser import EventNamesParser
from paypal_webhook_codegen.source import EventNamesSource

logger = logging.getLogger(__name__)


def render(data: bytes, package: str) -> str:
    """Parse a raw event-names page and render the Go source for it."""
    groups = EventNamesParser().parse(data)
    return Generator(package).build(groups)


class WebhookEnumBuilder:
    """Builds the webhook event enum file from the PayPal documentation."""

    def __init__(self, source: EventNamesSource | None = None) -> None:
        """Initialise builder.

        Args:
            source: Where the event-names page is read from.
        """
        self.source = source or EventNamesSource()

    def run(self, options: CodegenOptions) -> Path:
        """Generate the enum file described by ``options``.

        The output is rendered completely before the destination is opened,
        so a parse failure leaves any existing file untouched.

        Args:
            options: Run options.

        Returns:
            Path of the written file.

        Raises:
            NothingToDoError: If no output path is set.
            FetchError: If the page cannot be loaded.
            ParseError: If the page cannot be parsed.
        """
        if options.output is None:
            raise NothingToDoError

        data = self.source.fetch(options.html_path)
        content = render(data, options.package)
        try:
            options.output.write_text(content, encoding="utf-8")
        except OSError as e:
            msg = f"open file: {e}"
            raise CodegenError(msg) from e
        logger.info("Wrote %s", options.output)
        return options.output
