from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer, model_serializer
from pydantic.alias_generators import to_camel

from outage_feed.services.feed_dates import format_instant

# Instants go out the way the upstream's own clients render them:
# UTC, millisecond precision, trailing "Z".
IsoInstant = Annotated[datetime, PlainSerializer(format_instant, return_type=str)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NormalizedOutage(_CamelModel):
    model_config = ConfigDict(frozen=True)

    id: Any = None
    display_type: str = "P"
    location: str | None = None
    customers_affected: int | None = None
    status: str = "Planned"
    start_time: IsoInstant | None = None
    end_time: IsoInstant | None = None
    coordinates: list[Any] | None = None

    @model_serializer(mode="wrap")
    def _omit_missing_coordinates(self, handler):
        data = handler(self)
        if self.coordinates is None:
            data.pop("coordinates", None)
        return data


class PlannedOutagesResponse(_CamelModel):
    source: str = "ausgrid"
    fetched_at: IsoInstant
    window_days: int
    window_start: IsoInstant
    window_end: IsoInstant
    count: int
    outages: list[NormalizedOutage] = []


class OutagePreview(_CamelModel):
    id: Any = None
    location: Any = None
    customers_affected: Any = None
    status: Any = None
    display_type: Any = None


class OutagePreviewResponse(_CamelModel):
    source: str = "ausgrid"
    fetched_at: IsoInstant
    count: int
    outages: list[OutagePreview] = []


class ServerStatus(BaseModel):
    status: str = "Server running"
