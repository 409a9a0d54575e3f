"""Write and query operations against an explicit session."""
from typing import Iterable, Mapping, Optional, Union
import logging

from influxlite import codec
from influxlite.series import QueryResult, Series
from influxlite.session import Session
from influxlite.transport import Transport

logger = logging.getLogger(__name__)

SeriesLike = Union[Series, Mapping]


def _as_series(series: SeriesLike) -> Series:
    if isinstance(series, Series):
        return series
    return Series.model_validate(series)


def write(session: Session, series_list: Iterable[SeriesLike], transport: Optional[Transport] = None) -> None:
    """
    Send points of several series to the server.

    Raises:
        SerializationError: payload has no JSON representation
        WriteError: server answered with a non-empty body
        requests.RequestException: network or timeout failure
    """
    transport = transport or Transport()
    series_list = [_as_series(s) for s in series_list]

    wire = codec.encode(series_list)
    body = codec.serialize(wire)
    transport.send_write(session, body)

    if transport.metrics:
        for series in series_list:
            transport.metrics.record_points(series.name, len(series.points))

    logger.debug(
        f"Wrote {sum(len(s.points) for s in series_list)} points "
        f"in {len(series_list)} series to {session.database}"
    )


def write_one(session: Session, series: SeriesLike, transport: Optional[Transport] = None) -> None:
    """Send points of a single series to the server."""
    write(session, [series], transport=transport)


def query(session: Session, query_text: str, transport: Optional[Transport] = None) -> QueryResult:
    """Run a query and return the points of the first series in the answer."""
    transport = transport or Transport()

    body = transport.send_query(session, query_text)
    wire = codec.parse_response(query_text, body)
    result = codec.decode(wire, query=query_text, body=body)

    logger.debug(f"Query {query_text!r} returned {len(result.points)} points")
    return result
