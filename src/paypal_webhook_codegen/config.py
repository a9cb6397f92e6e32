"""Configuration for the webhook event code generator."""

from dataclasses import dataclass
from pathlib import Path

DOC_BASE_URL = "https://developer.paypal.com"
EVENT_NAMES_PAGE = f"{DOC_BASE_URL}/api/rest/webhooks/event-names/"
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/118.0.0.0 Safari/537.36 Edg/118.0.2088.69"
)
HTTP_TIMEOUT = 30.0

GENERATOR_NAME = "paypal-webhook-codegen"
EVENT_TYPE_NAME = "EventType"
DEFAULT_PACKAGE = "paypal"

MAX_COLUMN = 100
TAB_WIDTH = 4
COMMENT_PREFIX_WIDTH = len("// ")


@dataclass
class CodegenOptions:
    """Options for a single generator run."""

    output: Path | None = None
    html_path: Path | None = None
    package: str = DEFAULT_PACKAGE
