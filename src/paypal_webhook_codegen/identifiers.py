"""Identifier derivation from dotted event names."""

from paypal_webhook_codegen.exceptions import InvalidEventNameError


def derive_identifier(event: str) -> str:
    """Convert an event name into an identifier.

    ``PAYMENT.AUTHORIZATION.VOIDED`` becomes ``PaymentAuthorizationVoided`` and
    ``CHECKOUT.PAYMENT-APPROVAL.REVERSED`` becomes
    ``CheckoutPaymentApprovalReversed``.

    Args:
        event: Event name made of ``.`` and ``-`` separated segments.

    Returns:
        Segments with their first letter upper-cased and the rest lower-cased,
        joined without separators.

    Raises:
        InvalidEventNameError: If the name is empty or has an empty segment.
    """
    parts = []
    for segment in event.split("."):
        for part in segment.split("-"):
            if not part:
                raise InvalidEventNameError(event)
            parts.append(part[0].upper() + part[1:].lower())
    return "".join(parts)
