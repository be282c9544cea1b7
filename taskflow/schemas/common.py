"""Types partagés par les schémas (dates, ids)"""

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import AfterValidator, BeforeValidator, PlainSerializer

from taskflow.core.ids import is_valid_id


def _to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    # la base stocke des dates naïves en UTC
    if value is not None and value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _iso_utc(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _check_document_id(value):
    if value is not None and not is_valid_id(value):
        raise ValueError(f'Cast to ObjectId failed for value "{value}"')
    return value.lower() if value is not None else None


# date reçue du client
InputDatetime = Annotated[datetime, AfterValidator(_to_naive_utc)]

# date renvoyée au client: ISO 8601 en UTC ("...Z")
UtcDatetime = Annotated[datetime, PlainSerializer(_iso_utc, return_type=str)]

# référence vers un autre document (ex: Note.taskId)
DocumentRef = Annotated[Optional[str], BeforeValidator(_check_document_id)]
