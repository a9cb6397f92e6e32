"""Text normalization for trigger, related method and description cells."""

import re
from urllib.parse import urljoin

from paypal_webhook_codegen.config import DOC_BASE_URL
from paypal_webhook_codegen.identifiers import derive_identifier
from paypal_webhook_codegen.models import Comment, Link

DEPRECATION_NOTICE = "<strong>Deprecation notice</strong>"

ANCHOR_PATTERN = re.compile(r'<a\s[^>]*?href="([^"]*)"[^>]*>\s*(.*?)\s*</a\s*>', re.DOTALL)
CODE_PATTERN = re.compile(r"<code[^>]*>(.+?)</code\s*>", re.DOTALL)
ANCHOR_CODE_PATTERN = re.compile(r"<a\s[^>]*>\s*<code[^>]*>(\S+?)</code\s*>\s*</a\s*>", re.DOTALL)
WHITESPACE_PATTERN = re.compile(r"[ \t\n]+")


def replace_deprecation(text: str) -> str:
    """Replace the bold deprecation notice with a plain marker."""
    return text.replace(DEPRECATION_NOTICE, "Deprecated")


def replace_anchor_code(text: str) -> str:
    """Turn a single linked code span into an identifier reference.

    ``<a href="#x"><code>PAYMENT.SALE.COMPLETED</code></a>`` becomes
    ``[PaymentSaleCompleted]``. Text with more than one linked code span is
    returned unchanged.

    Raises:
        InvalidEventNameError: If the code span is not a valid event name.
    """
    matches = ANCHOR_CODE_PATTERN.findall(text)
    if len(matches) != 1:
        return text
    reference = f"[{derive_identifier(matches[0])}]"
    return ANCHOR_CODE_PATTERN.sub(lambda _: reference, text)


def replace_code(text: str) -> str:
    """Rewrite every inline code span as a backtick quoted span."""
    return CODE_PATTERN.sub(r"`\1`", text)


def remove_whitespaces(text: str) -> str:
    """Collapse whitespace runs to one space and trim both ends."""
    return WHITESPACE_PATTERN.sub(" ", text).strip(" ")


def to_comment(text: str) -> Comment:
    """Extract hyperlinks from ``text`` and build a comment.

    Each anchor is replaced in-line by its title in brackets and recorded as
    a link with an absolute URL.
    """
    links: list[Link] = []

    def _replace(match: re.Match[str]) -> str:
        href, title = match.groups()
        links.append(Link(title=title, url=urljoin(DOC_BASE_URL, href)))
        return f"[{title}]"

    content = ANCHOR_PATTERN.sub(_replace, text)
    return Comment(content=content, links=tuple(links))


def normalize_trigger(text: str) -> Comment:
    """Normalize the trigger cell of a webhook row."""
    text = replace_deprecation(text)
    text = replace_anchor_code(text)
    text = replace_code(text)
    return to_comment(remove_whitespaces(text))


def normalize_related_method(text: str) -> Comment:
    """Normalize the related method cell of a webhook row."""
    text = replace_deprecation(text)
    text = replace_code(text)
    return to_comment(remove_whitespaces(text))


def normalize_description(text: str) -> Comment:
    """Normalize a group description paragraph, dropping a trailing colon."""
    text = remove_whitespaces(replace_deprecation(text))
    if text.endswith(":"):
        text = text[:-1]
    return to_comment(text)
