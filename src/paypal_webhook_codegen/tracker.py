"""Document-wide tracking of repeated event names."""

from collections import Counter
from collections.abc import Mapping
from dataclasses import replace

from paypal_webhook_codegen.models import Webhook


class DuplicateTracker:
    """Counts how often each event has been declared so far.

    The tracker is immutable: ``observe`` returns the updated tracker next to
    the marked webhook, so each parse step takes a tracker and hands the new
    one to the next step.
    """

    def __init__(self, counts: Mapping[str, int] | None = None) -> None:
        self._counts: Counter[str] = Counter(counts or {})

    def count(self, event: str) -> int:
        """Return how many declarations of ``event`` have been seen."""
        return self._counts[event]

    def observe(self, webhook: Webhook) -> tuple[Webhook, "DuplicateTracker"]:
        """Mark a webhook as repeated if its event was declared before.

        Reference webhooks are marked like any other but are not counted.

        Args:
            webhook: Freshly parsed webhook.

        Returns:
            Tuple of the webhook with ``repeated`` set and the updated tracker.
        """
        seen = self._counts[webhook.event]
        marked = replace(webhook, repeated=seen != 0)
        if webhook.is_ref:
            return marked, self

        counts = Counter(self._counts)
        counts[webhook.event] += 1
        return marked, DuplicateTracker(counts)
