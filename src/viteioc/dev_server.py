"""Liveness probing of the Vite dev server."""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

# 404 still means something is listening on the dev server port
LIVE_STATUS_CODES = frozenset({200, 404})


class DevServerProbe:
    """
    Checks once whether the dev server answers at ``url``.

    The first call to :meth:`is_running` sends a single ``HEAD`` request; the
    result is kept for the lifetime of the probe. Create one probe per request
    scope so a server that is started or stopped later is noticed.
    """

    def __init__(
            self,
            url: str,
            timeout: float = 1.0,
            client: Optional[httpx.Client] = None
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._client = client
        self._running: Optional[bool] = None

    @property
    def checked(self) -> bool:
        return self._running is not None

    def is_running(self) -> bool:
        if self._running is not None:
            return self._running

        logger.debug("Pinging Vite dev server at %s", self.url)
        self._running = False

        try:
            if self._client is not None:
                response = self._client.head(self.url, timeout=self.timeout)
            else:
                response = httpx.head(self.url, timeout=self.timeout)
        except httpx.TransportError as e:
            logger.debug("Vite dev server not found: %s", e)
            return self._running

        if response.status_code in LIVE_STATUS_CODES:
            logger.debug("Vite dev server is running")
            self._running = True
        else:
            logger.debug("Vite dev server answered with status %d", response.status_code)

        return self._running
