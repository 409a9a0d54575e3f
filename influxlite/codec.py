"""Columnar encoding of sparse series points and decoding of query results."""
from typing import Dict, Iterable, List, Mapping, Union
import json
import logging

from pydantic import TypeAdapter, ValidationError

from influxlite.errors import DecodeError, SerializationError
from influxlite.series import Point, QueryResult, Series, WireSeries

logger = logging.getLogger(__name__)

_wire_list = TypeAdapter(List[WireSeries])


def column_set(points: Iterable[Mapping[str, object]]) -> List[str]:
    """Collect attribute names across points, unique and in first-seen order."""
    seen: Dict[str, None] = {}
    for point in points:
        for key in point:
            seen.setdefault(key, None)
    return list(seen)


def encode_series(series: Series) -> WireSeries:
    """
    Turn a series of sparse points into dense rows.

    Every row has one slot per column; keys a point lacks stay None.
    """
    columns = column_set(series.points)
    index = {name: i for i, name in enumerate(columns)}

    rows = []
    for point in series.points:
        row = [None] * len(columns)
        for key, value in point.items():
            row[index[key]] = value
        rows.append(row)

    return WireSeries(name=series.name, columns=columns, points=rows)


def encode(series_list: Iterable[Series]) -> List[WireSeries]:
    """Encode each series independently, keeping input order."""
    return [encode_series(series) for series in series_list]


def serialize(wire: List[WireSeries]) -> bytes:
    """Serialize wire series to the JSON request body."""
    payload = [w.model_dump() for w in wire]
    try:
        return json.dumps(payload, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Cannot serialize write payload: {e}") from e


def parse_response(query: str, body: Union[bytes, str]) -> List[WireSeries]:
    """Parse a raw query response body into wire series."""
    try:
        raw = json.loads(body)
    except ValueError as e:
        raise DecodeError(query, body, str(e)) from e

    # The server may answer an empty result with a bare null.
    if raw is None:
        return []

    try:
        return _wire_list.validate_python(raw)
    except ValidationError as e:
        raise DecodeError(query, body, f"{e.error_count()} validation error(s)") from e


def decode(wire: List[WireSeries], query: str = "", body: Union[bytes, str] = b"") -> QueryResult:
    """
    Rebuild sparse points from the first series of a query response.

    Args:
        wire: Parsed response entries
        query: Query text, kept for error reporting
        body: Raw response body, kept for error reporting

    Returns:
        QueryResult; empty when the response holds no series
    """
    if not wire:
        return QueryResult()

    if len(wire) > 1:
        logger.debug(f"Query returned {len(wire)} series, using only '{wire[0].name}'")

    first = wire[0]
    points: List[Point] = []
    for i, row in enumerate(first.points):
        if len(row) != len(first.columns):
            raise DecodeError(
                query, body,
                f"row {i} has {len(row)} values for {len(first.columns)} columns"
            )
        points.append(dict(zip(first.columns, row)))

    return QueryResult(name=first.name, points=points)
