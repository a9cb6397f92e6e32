"""Data models for parsed webhook event groups."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Link:
    """A hyperlink found in a comment."""

    title: str
    url: str


@dataclass(frozen=True)
class Comment:
    """Normalized comment text with the links it references."""

    content: str = ""
    links: tuple[Link, ...] = ()


@dataclass(frozen=True)
class Webhook:
    """One row of a webhook table."""

    id: str
    event: str
    trigger: Comment
    related_method: Comment
    repeated: bool = False

    @property
    def is_ref(self) -> bool:
        """Whether the trigger only points at another event's description."""
        return self.trigger.content.startswith("See")


@dataclass
class WebhookGroup:
    """A top-level section of the event-names page.

    ``webhooks`` maps a version label to its rows; the empty label holds rows
    that are not versioned.
    """

    title: str
    description: Comment = field(default_factory=Comment)
    webhooks: dict[str, list[Webhook]] = field(default_factory=dict)
