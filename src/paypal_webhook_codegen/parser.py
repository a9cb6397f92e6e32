"""Parser for the PayPal webhook event-names page."""

import logging
import re
from collections.abc import Callable
from typing import Any, TypeVar

from paypal_webhook_codegen.exceptions import CodegenError, NotFoundError, ParseError
from paypal_webhook_codegen.identifiers import derive_identifier
from paypal_webhook_codegen.models import Comment, Webhook, WebhookGroup
from paypal_webhook_codegen.normalizer import (
    normalize_description,
    normalize_related_method,
    normalize_trigger,
)
from paypal_webhook_codegen.scanner import find_region
from paypal_webhook_codegen.tracker import DuplicateTracker

logger = logging.getLogger(__name__)

T = TypeVar("T")

TITLE_PATTERN = re.compile(r"<h2[^>]*>.+</div>\s*(.+?)\s*</h2>", re.DOTALL)
DESCRIPTION_PATTERN = re.compile(r"<p>\s*(.+)\s*</p>", re.DOTALL)
VERSION_PATTERN = re.compile(r"<h3.+div>\s*(.+?)\s*</h3>", re.DOTALL)
ROW_BOUNDARY_PATTERN = re.compile(r"<tr>.+?</tr>", re.DOTALL)
ROW_PATTERN = re.compile(
    r"<tr>\s*<td[^>]*>\s*<code[^>]*>(.+?)</code\s*>\s*</td>"
    r"\s*<td[^>]*>\s*(.+?)\s*</td>"
    r"\s*<td[^>]*>\s*(.*?)\s*</td>",
    re.DOTALL,
)


def first_match(pattern: re.Pattern[str], text: str) -> str:
    """Return the first capture group of ``pattern`` in ``text``.

    Raises:
        NotFoundError: If the pattern does not match.
    """
    match = pattern.search(text)
    if match is None:
        raise NotFoundError
    return match.group(1)


def parse_title(text: str) -> str:
    """Extract a group title from an ``<h2>`` region."""
    return first_match(TITLE_PATTERN, text)


def parse_description(text: str) -> Comment:
    """Extract a group description from a ``<p>`` region."""
    return normalize_description(first_match(DESCRIPTION_PATTERN, text))


def parse_version(text: str) -> str:
    """Extract a version label from an ``<h3>`` region."""
    return first_match(VERSION_PATTERN, text)


def parse_webhook(text: str) -> Webhook:
    """Parse a single ``<tr>`` row.

    Raises:
        NotFoundError: If the row does not have the event, trigger and
            related method cells.
        InvalidEventNameError: If the event code is not a valid event name.
    """
    match = ROW_PATTERN.search(text)
    if match is None:
        raise NotFoundError("no match")
    event, trigger, related_method = match.groups()
    return Webhook(
        id=derive_identifier(event),
        event=event,
        trigger=normalize_trigger(trigger),
        related_method=normalize_related_method(related_method),
    )


def parse_webhooks(text: str, tracker: DuplicateTracker) -> tuple[list[Webhook], DuplicateTracker]:
    """Parse every row of a ``<tbody>`` region.

    Args:
        text: Table body region.
        tracker: Declarations seen so far in the document.

    Returns:
        Tuple of the parsed webhooks and the updated tracker.
    """
    webhooks = []
    for row in ROW_BOUNDARY_PATTERN.findall(text):
        webhook, tracker = tracker.observe(parse_webhook(row))
        webhooks.append(webhook)
    return webhooks, tracker


class EventNamesParser:
    """Parses the event-names page into webhook groups.

    The page is scanned left to right. Each group is an ``<h2>`` heading,
    an optional ``<p>`` description, then either ``<h3>`` version headings
    each followed by a ``<tbody>`` table, or a single unversioned table.
    """

    def parse(self, data: bytes) -> list[WebhookGroup]:
        """Parse a raw event-names document.

        Args:
            data: Raw page bytes.

        Returns:
            Webhook groups in document order.

        Raises:
            ParseError: If the page is not valid UTF-8 or any part of it is
                malformed.
        """
        try:
            document = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError("decode", e) from e
        groups: list[WebhookGroup] = []
        tracker = DuplicateTracker()
        cursor = 0

        while True:
            heading = find_region(document, "<h2 ", "</h2>", cursor)
            if heading is None:
                break
            cursor = heading.end
            group = WebhookGroup(title=self._stage("title", parse_title, heading.text))

            paragraph = find_region(document, "<p>", "</p>", cursor)
            if paragraph is not None:
                cursor = paragraph.end
                group.description = self._stage("description", parse_description, paragraph.text)

            cursor, tracker = self._parse_tables(document, cursor, group, tracker)
            logger.debug(
                "Parsed group %r with %d version(s)",
                group.title,
                len(group.webhooks),
            )
            groups.append(group)

        logger.info("Parsed %d webhook groups", len(groups))
        return groups

    def _parse_tables(
        self,
        document: str,
        cursor: int,
        group: WebhookGroup,
        tracker: DuplicateTracker,
    ) -> tuple[int, DuplicateTracker]:
        """Parse the versioned tables of a group, then its unversioned table.

        Returns:
            Tuple of the new cursor and the updated tracker.
        """
        while True:
            heading = find_region(document, "<h3 ", "</h3>", cursor)
            if heading is None:
                break
            cursor = heading.end
            version = self._stage("webhooks", parse_version, heading.text)

            table = find_region(document, "<tbody>", "</tbody>", cursor)
            if table is None:
                break
            cursor = table.end
            group.webhooks[version], tracker = self._stage("webhooks", parse_webhooks, table.text, tracker)

        table = find_region(document, "<tbody>", "</tbody>", cursor)
        if table is not None:
            cursor = table.end
            group.webhooks[""], tracker = self._stage("webhooks", parse_webhooks, table.text, tracker)
        return cursor, tracker

    @staticmethod
    def _stage(stage: str, func: Callable[..., T], *args: Any) -> T:
        """Call ``func`` and label any failure with the document stage."""
        try:
            return func(*args)
        except CodegenError as e:
            raise ParseError(stage, e) from e
