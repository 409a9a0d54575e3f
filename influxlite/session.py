"""Connection parameters for a remote InfluxDB server."""
from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from influxlite.series import QueryResult, Series

PORT = 8086


class Session(BaseModel):
    """
    Immutable bundle of host, database, credentials and timeout.

    The timeout is fixed when the session is built. A session created
    from a deadline keeps the remaining time measured at that moment,
    even if it is reused much later.
    """
    model_config = ConfigDict(frozen=True)

    host: str
    database: str
    username: str = ""
    password: str = Field(default="", repr=False)
    timeout_s: Optional[float] = Field(default=None, gt=0)  # None waits forever

    @classmethod
    def from_deadline(
        cls,
        host: str,
        database: str,
        username: str = "",
        password: str = "",
        deadline: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> "Session":
        """Build a session whose timeout is the time left until *deadline*."""
        timeout_s = None
        if deadline is not None:
            if now is None:
                now = datetime.now(deadline.tzinfo)
            remaining = (deadline - now).total_seconds()
            # An expired deadline leaves the session without any timeout.
            if remaining > 0:
                timeout_s = remaining

        return cls(
            host=host,
            database=database,
            username=username,
            password=password,
            timeout_s=timeout_s,
        )

    @property
    def series_url(self) -> str:
        return f"http://{self.host}:{PORT}/db/{self.database}/series"

    def credentials(self) -> Dict[str, str]:
        return {"u": self.username, "p": self.password}

    # Convenience wrappers around influxlite.client.

    def write(self, series_list: List[Union[Series, dict]], transport=None) -> None:
        _client().write(self, series_list, transport=transport)

    def write_one(self, series: Union[Series, dict], transport=None) -> None:
        _client().write_one(self, series, transport=transport)

    def query(self, query_text: str, transport=None) -> QueryResult:
        return _client().query(self, query_text, transport=transport)


def _client():
    # client imports this module, so it is resolved at call time.
    from influxlite import client
    return client
