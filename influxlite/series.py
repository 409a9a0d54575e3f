"""Data structures for series points, both sparse and columnar."""
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

# Order matters: bool is tried before int so True never becomes 1.
PointValue = Optional[Union[StrictBool, StrictInt, StrictFloat, StrictStr]]

Point = Dict[str, PointValue]


class Series(BaseModel):
    """A named list of sparse points to write together."""
    model_config = ConfigDict(frozen=True)

    name: str
    points: List[Point] = Field(default_factory=list)


class WireSeries(BaseModel):
    """Columnar form of a series, as exchanged with the server."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    columns: List[str] = Field(default_factory=list)
    points: List[List[PointValue]] = Field(default_factory=list)


class QueryResult(BaseModel):
    """Points returned by a query, one dict per row."""
    model_config = ConfigDict(frozen=True)

    name: str = ""
    points: List[Point] = Field(default_factory=list)
