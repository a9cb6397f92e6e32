"""Generate typed PayPal webhook event constants from the PayPal event-names page."""

__version__ = "0.1.0"
