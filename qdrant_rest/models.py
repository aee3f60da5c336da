"""
Request bodies for the Qdrant REST endpoints.

Each model mirrors the JSON body of one endpoint. Models are built with
model_construct, so arguments reach the wire exactly as the caller passed them;
the field types document the usual shapes and are not enforced. Optional keys
are dropped from the body when they are None, so the server sees the key missing
rather than a null value. Fields with a default (limit, with_payload,
with_vector) are always sent.
"""

from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, Field

PointId = Union[int, str]
Filter = Dict[str, Any]


class RequestBody(BaseModel):
    def to_body(self) -> Dict[str, Any]:
        body = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, RequestBody):
                value = value.to_body()
            body[name] = value
        return body


class VectorParams(RequestBody):
    size: int
    # Cosine, Dot, Euclid or Manhattan; forwarded as given
    distance: str = "Cosine"


class CreateCollectionRequest(RequestBody):
    vectors: VectorParams
    hnsw_config: Optional[Dict[str, Any]] = None
    quantization_config: Optional[Dict[str, Any]] = None


class UpsertPointsRequest(RequestBody):
    points: List[Dict[str, Any]]


class GetPointsRequest(RequestBody):
    ids: List[PointId]
    with_payload: bool = True
    with_vector: bool = False


class DeletePointsRequest(RequestBody):
    points: List[PointId]


class SetPayloadRequest(RequestBody):
    payload: Dict[str, Any]
    points: List[PointId]


class DeletePayloadRequest(RequestBody):
    keys: List[str]
    points: List[PointId]


class ScrollRequest(RequestBody):
    limit: int = 100
    filter: Optional[Filter] = None
    offset: Optional[PointId] = None
    with_payload: bool = True
    with_vector: bool = False


class CountRequest(RequestBody):
    filter: Filter


class SearchRequest(RequestBody):
    vector: List[float]
    limit: int = 10
    filter: Optional[Filter] = None
    with_payload: bool = True
    with_vector: bool = False
    score_threshold: Optional[float] = None


class RecommendRequest(RequestBody):
    positive: List[PointId]
    negative: List[PointId] = Field(default_factory=list)
    limit: int = 10
    filter: Optional[Filter] = None
    with_payload: bool = True
    with_vector: bool = False


class SearchBatchRequest(RequestBody):
    searches: List[Dict[str, Any]]
