"""Typed results decoded from Wavefront API responses"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, model_validator

Number = StrictInt | StrictFloat

# Single (timestamp, value) sample of a time series
DataPoint = tuple[Number, Number]


class WavefrontModel(BaseModel):
    """Base of decoded responses, unknown fields are ignored and nulls take the field default"""

    model_config = ConfigDict(extra="ignore", strict=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data):
        """JSON null is treated as a missing field"""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class TimeSeries(WavefrontModel):
    """One named series of a query result"""

    label: StrictStr = ""
    host: StrictStr = ""
    tags: dict[StrictStr, StrictStr] = Field(default_factory=dict)
    data: list[DataPoint] = Field(default_factory=list)


class QueryResult(WavefrontModel):
    """Decoded response of the chart API"""

    name: StrictStr = ""
    query: StrictStr = ""
    warnings: StrictStr = ""
    granularity: StrictInt = 0
    timeseries: list[TimeSeries] = Field(default_factory=list)
    stats: dict[str, Any] = Field(default_factory=dict)


class ListResult(WavefrontModel):
    """Decoded response of the metrics listing API"""

    metrics: list[StrictStr] = Field(default_factory=list)
