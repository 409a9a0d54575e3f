"""HTTP exchange with the server's series endpoint."""
from typing import Optional
import logging
import time

import requests

from influxlite.errors import WriteError
from influxlite.metrics import ClientMetrics
from influxlite.session import Session

logger = logging.getLogger(__name__)


class Transport:
    """Sends encoded writes and raw queries over HTTP."""

    def __init__(self, http=None, metrics: Optional[ClientMetrics] = None):
        """
        Initialize transport.

        Args:
            http: Object with the requests call surface (post/get);
                defaults to the requests module itself
            metrics: Optional self-metrics to record into
        """
        self.http = http if http is not None else requests
        self.metrics = metrics

    def send_write(self, session: Session, body: bytes) -> None:
        """POST a serialized write. Any response body means the write failed."""
        logger.debug(f"POST {session.series_url} ({len(body)} bytes)")
        start = time.time()
        outcome = "error"
        try:
            with self.http.post(
                session.series_url,
                params=session.credentials(),
                data=body,
                headers={"Content-Type": "application/json"},
                timeout=session.timeout_s,
            ) as response:
                read = response.content

            if read:
                outcome = "rejected"
                message = read.decode("utf-8", errors="replace")
                logger.debug(f"Write rejected by server: {message}")
                raise WriteError(message)

            outcome = "ok"
        finally:
            self._record("write", outcome, time.time() - start)

    def send_query(self, session: Session, query: str) -> bytes:
        """GET a query and return the raw response body."""
        params = session.credentials()
        params["q"] = query
        params["time_precision"] = "ms"

        logger.debug(f"GET {session.series_url} q={query!r}")
        start = time.time()
        outcome = "error"
        try:
            with self.http.get(
                session.series_url,
                params=params,
                timeout=session.timeout_s,
            ) as response:
                read = response.content
            outcome = "ok"
        finally:
            self._record("query", outcome, time.time() - start)

        return read

    def _record(self, operation: str, outcome: str, duration: float):
        if self.metrics:
            self.metrics.record_request(operation, outcome, duration)
