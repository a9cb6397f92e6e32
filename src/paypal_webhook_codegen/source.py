"""Reader for the PayPal webhook event-names page."""

import logging
from pathlib import Path

import httpx

from paypal_webhook_codegen.config import EVENT_NAMES_PAGE, HTTP_TIMEOUT, USER_AGENT
from paypal_webhook_codegen.exceptions import FetchError

logger = logging.getLogger(__name__)


class EventNamesSource:
    """Loads the event-names page from paypal.com or from a saved copy."""

    def __init__(self, client: httpx.Client | None = None, url: str = EVENT_NAMES_PAGE) -> None:
        """Initialise source.

        Args:
            client: HTTP client to use; a new one is created per fetch if omitted.
            url: Page to download.
        """
        self.client = client
        self.url = url

    def fetch(self, html_path: Path | None = None) -> bytes:
        """Return the raw page.

        Args:
            html_path: Local copy of the page; downloaded when None.

        Returns:
            Raw page bytes.

        Raises:
            FetchError: If the file cannot be read or the download fails.
        """
        if html_path is not None:
            return self._read_file(html_path)
        return self._download()

    def _read_file(self, html_path: Path) -> bytes:
        """Read a saved copy of the page.

        Args:
            html_path: Path to the saved page.

        Returns:
            Raw page bytes.

        Raises:
            FetchError: If the file cannot be read.
        """
        logger.info("Reading event names from %s", html_path)
        try:
            return html_path.read_bytes()
        except OSError as e:
            msg = f"read: {e}"
            raise FetchError(msg) from e

    def _download(self) -> bytes:
        """Download the page with a browser User-Agent.

        Returns:
            Raw page bytes.

        Raises:
            FetchError: On transport errors or an error status.
        """
        logger.info("Downloading event names from %s", self.url)
        headers = {"User-Agent": USER_AGENT}
        try:
            if self.client is not None:
                response = self.client.get(self.url, headers=headers, follow_redirects=True)
            else:
                with httpx.Client(timeout=HTTP_TIMEOUT) as client:
                    response = client.get(self.url, headers=headers, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError as e:
            msg = f"get: {e}"
            raise FetchError(msg) from e

        logger.debug("Downloaded %d bytes", len(response.content))
        return response.content
