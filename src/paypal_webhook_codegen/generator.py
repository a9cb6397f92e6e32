"""Go source generator for webhook event constants."""

from paypal_webhook_codegen.config import (
    COMMENT_PREFIX_WIDTH,
    DEFAULT_PACKAGE,
    EVENT_NAMES_PAGE,
    EVENT_TYPE_NAME,
    GENERATOR_NAME,
    MAX_COLUMN,
    TAB_WIDTH,
)
from paypal_webhook_codegen.models import Comment, Webhook, WebhookGroup


def wrap(text: str, width: int) -> list[str]:
    """Greedily wrap ``text`` on spaces so lines fit in ``width`` bytes.

    Lengths are measured on the UTF-8 encoding. A word longer than ``width``
    is kept whole and broken at the next space after it.

    Args:
        text: Single-line text with single spaces between words.
        width: Maximum encoded line length.

    Returns:
        Wrapped lines, empty for empty text.
    """
    return [line.decode("utf-8") for line in _wrap_bytes(text.encode("utf-8"), width)]


def _wrap_bytes(data: bytes, width: int) -> list[bytes]:
    """Wrap encoded text; splitting on the space byte keeps characters whole.

    Args:
        data: UTF-8 encoded text.
        width: Maximum line length in bytes.

    Returns:
        Wrapped lines.
    """
    if not data:
        return []
    if len(data) <= width:
        return [data]

    cut = data.rfind(b" ", 0, width + 1)
    if cut <= 0:
        cut = data.find(b" ", width + 1)
        if cut == -1:
            return [data]
    return [data[:cut], *_wrap_bytes(data[cut + 1 :], width)]


class Generator:
    """Renders webhook groups as a Go file of ``EventType`` constants."""

    def __init__(self, package: str = DEFAULT_PACKAGE) -> None:
        """Initialise generator.

        Args:
            package: Go package name stamped into the header.
        """
        self.package = package
        self._lines: list[str] = []

    def build(self, groups: list[WebhookGroup]) -> str:
        """Render the complete file.

        Args:
            groups: Parsed groups in document order.

        Returns:
            Generated source text.
        """
        self._lines = []
        self._append_header()
        for group in groups:
            self._append_group(group)
        return "".join(self._lines)

    def _append_header(self) -> None:
        """Write the generated-file marker, package clause and type declaration."""
        self._writeln(f"// Code generated by {GENERATOR_NAME}. DO NOT EDIT.")
        self._writeln(f"package {self.package}")
        self._writeln()
        self._writeln(f"// {EVENT_TYPE_NAME} is the type of webhook.")
        self._writeln("//")
        self._writeln(f"// See {EVENT_NAMES_PAGE}")
        self._writeln(f"type {EVENT_TYPE_NAME} string")
        self._writeln()

    def _append_group(self, group: WebhookGroup) -> None:
        """Write a group title, its description and its version blocks.

        Args:
            group: Group to render.
        """
        self._writeln()
        self._writeln(f"// {group.title}")
        if group.description.content:
            self._writeln("//")
            self._append_comment(group.description, 0)
        self._writeln()
        for version in sorted(group.webhooks):
            self._append_version(version, group.webhooks[version])

    def _append_version(self, version: str, webhooks: list[Webhook]) -> None:
        """Write one constant block, preceded by its label when versioned.

        Args:
            version: Version label, empty for unversioned rows.
            webhooks: Rows in document order.
        """
        if version:
            self._writeln(f"// {version}")
            self._writeln()
        self._lines.append("const (")
        for webhook in webhooks:
            self._writeln()
            self._append_webhook(webhook)
        self._writeln(")")
        self._writeln()

    def _append_webhook(self, webhook: Webhook) -> None:
        """Write the comments and declaration of one webhook.

        Trigger links are listed after the related method text when there is
        one, otherwise under the trigger itself.

        Args:
            webhook: Webhook to render.
        """
        links = webhook.trigger.links + webhook.related_method.links
        if webhook.related_method.content:
            self._append_comment(Comment(webhook.trigger.content), 1)
            self._writeln("//", indent=1)
            related = f"Related method: {webhook.related_method.content}"
            self._append_comment(Comment(related, links), 1)
        else:
            self._append_comment(Comment(webhook.trigger.content, links), 1)

        declaration = f'{webhook.id} {EVENT_TYPE_NAME} = "{webhook.event}"'
        if webhook.repeated or webhook.is_ref:
            declaration = f"// (redeclared) {declaration}"
        self._writeln(declaration, indent=1)

    def _append_comment(self, comment: Comment, indent: int) -> None:
        """Write a wrapped comment followed by its link references.

        Args:
            comment: Comment to render.
            indent: Number of tab indents.
        """
        width = MAX_COLUMN - indent * TAB_WIDTH - COMMENT_PREFIX_WIDTH
        for line in wrap(comment.content, width):
            self._writeln(f"// {line}", indent=indent)
        if comment.links:
            self._writeln("//", indent=indent)
            for link in comment.links:
                self._writeln(f"// [{link.title}]: {link.url}", indent=indent)

    def _writeln(self, line: str = "", indent: int = 0) -> None:
        """Append one line.

        Args:
            line: Line text without the newline.
            indent: Number of tab indents.
        """
        self._lines.append("\t" * indent + line + "\n")
