from typing import Any, Dict, List, Optional

from .core.config import ConnectionConfig
from .models import (
    CountRequest,
    CreateCollectionRequest,
    DeletePayloadRequest,
    DeletePointsRequest,
    GetPointsRequest,
    PointId,
    RecommendRequest,
    ScrollRequest,
    SearchBatchRequest,
    SearchRequest,
    SetPayloadRequest,
    UpsertPointsRequest,
    VectorParams,
)
from .transport import HttpClient, get_http_client


class QdrantClient:
    """
    Thin wrapper over the Qdrant REST API.

    Every method builds the request body for one endpoint, hands it to the
    HttpClient and returns the decoded response (``{"status", "result", "time"}``)
    unchanged. TransportError subclasses raised by the HttpClient propagate as is.
    """

    def __init__(self, http_client: HttpClient):
        self.http_client = http_client

    @classmethod
    def from_config(cls, config: Optional[ConnectionConfig] = None) -> "QdrantClient":
        """Build a client from a ConnectionConfig, or from the environment when none is given."""
        return cls(get_http_client(config))

    def _request(self, method: str, path: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        return self.http_client.request(method, path, data)

    # Collections

    def create_collection(
        self,
        name: str,
        vector_size: int,
        distance: str = "Cosine",
        hnsw_config: Optional[Dict[str, Any]] = None,
        quantization_config: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Create a collection for vectors of the given size and distance metric

        Args:
            name: Collection name
            vector_size: Dimension of vectors (e.g. 128, 384, 768)
            distance: Distance metric: Cosine, Dot, Euclid or Manhattan
            hnsw_config: Optional HNSW index configuration
            quantization_config: Optional quantization settings

        Returns:
            Response from Qdrant with the operation status
        """
        body = CreateCollectionRequest.model_construct(
            vectors=VectorParams(size=vector_size, distance=distance),
            hnsw_config=hnsw_config,
            quantization_config=quantization_config
        )
        return self._request("PUT", f"/collections/{name}", body.to_body())

    def get_collection(self, name: str) -> Dict[str, Any]:
        """Get collection configuration, point counts and indexing status."""
        return self._request("GET", f"/collections/{name}")

    def delete_collection(self, name: str) -> Dict[str, Any]:
        """Permanently remove a collection and all its points."""
        return self._request("DELETE", f"/collections/{name}")

    def list_collections(self) -> Dict[str, Any]:
        return self._request("GET", "/collections")

    # Points

    def upsert_points(self, collection: str, points: List[Dict[str, Any]]) -> Dict[str, Any]:
        """
        Insert new points or update existing ones

        Args:
            collection: Collection name
            points: Points with id, vector and optional payload, e.g.
                [{"id": 1, "vector": [0.1, 0.2, 0.3], "payload": {"city": "Berlin"}}]

        Returns:
            Response from Qdrant with the operation status
        """
        body = UpsertPointsRequest.model_construct(points=points)
        return self._request("PUT", f"/collections/{collection}/points", body.to_body())

    def get_point(self, collection: str, id: PointId) -> Dict[str, Any]:
        return self._request("GET", f"/collections/{collection}/points/{id}")

    def get_points(
        self,
        collection: str,
        ids: List[PointId],
        with_payload: bool = True,
        with_vector: bool = False
    ) -> Dict[str, Any]:
        """
        Retrieve several points by id in one request

        Args:
            collection: Collection name
            ids: Point ids (integers or UUID strings)
            with_payload: Include payload in the response
            with_vector: Include vectors in the response

        Returns:
            Points data from Qdrant
        """
        body = GetPointsRequest.model_construct(ids=ids, with_payload=with_payload, with_vector=with_vector)
        return self._request("POST", f"/collections/{collection}/points", body.to_body())

    def delete_points(self, collection: str, ids: List[PointId]) -> Dict[str, Any]:
        body = DeletePointsRequest.model_construct(points=ids)
        return self._request("POST", f"/collections/{collection}/points/delete", body.to_body())

    def set_payload(self, collection: str, payload: Dict[str, Any], points: List[PointId]) -> Dict[str, Any]:
        """Merge payload keys into the given points."""
        body = SetPayloadRequest.model_construct(payload=payload, points=points)
        return self._request("POST", f"/collections/{collection}/points/payload", body.to_body())

    def delete_payload(self, collection: str, keys: List[str], points: List[PointId]) -> Dict[str, Any]:
        """Remove the given payload keys from the points; other payload data is kept."""
        body = DeletePayloadRequest.model_construct(keys=keys, points=points)
        return self._request("POST", f"/collections/{collection}/points/payload/delete", body.to_body())

    def scroll(
        self,
        collection: str,
        limit: int = 100,
        filter: Optional[Dict[str, Any]] = None,
        offset: Optional[PointId] = None,
        with_payload: bool = True,
        with_vector: bool = False
    ) -> Dict[str, Any]:
        """
        Fetch one page of points

        Args:
            collection: Collection name
            limit: Page size
            filter: Optional Qdrant filter (must/should/must_not clauses)
            offset: Point id to start from, usually the previous page's next_page_offset
            with_payload: Include payload in the response
            with_vector: Include vectors in the response

        Returns:
            Response whose result holds "points" and "next_page_offset"
        """
        body = ScrollRequest.model_construct(
            limit=limit,
            filter=filter,
            offset=offset,
            with_payload=with_payload,
            with_vector=with_vector
        )
        return self._request("POST", f"/collections/{collection}/points/scroll", body.to_body())

    def count_points(self, collection: str, filter: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Count points, optionally restricted by a filter. Without a filter no body is passed."""
        data = CountRequest.model_construct(filter=filter).to_body() if filter is not None else None
        return self._request("POST", f"/collections/{collection}/points/count", data)

    # Search

    def search(
        self,
        collection: str,
        vector: List[float],
        limit: int = 10,
        filter: Optional[Dict[str, Any]] = None,
        with_payload: bool = True,
        with_vector: bool = False,
        score_threshold: Optional[float] = None
    ) -> Dict[str, Any]:
        """
        Find the points closest to a query vector

        Args:
            collection: Collection name
            vector: Query vector
            limit: Maximum number of hits
            filter: Optional Qdrant filter
            with_payload: Include payload in hits
            with_vector: Include vectors in hits
            score_threshold: Drop hits scoring below this value

        Returns:
            Response whose result is the list of scored points
        """
        body = SearchRequest.model_construct(
            vector=vector,
            limit=limit,
            filter=filter,
            with_payload=with_payload,
            with_vector=with_vector,
            score_threshold=score_threshold
        )
        return self._request("POST", f"/collections/{collection}/points/search", body.to_body())

    def recommend(
        self,
        collection: str,
        positive: List[PointId],
        negative: Optional[List[PointId]] = None,
        limit: int = 10,
        filter: Optional[Dict[str, Any]] = None,
        with_payload: bool = True,
        with_vector: bool = False
    ) -> Dict[str, Any]:
        """
        Recommend points similar to the positive examples and unlike the negative ones

        Args:
            collection: Collection name
            positive: Ids of points to move towards
            negative: Ids of points to move away from (sent as an empty list when omitted)
            limit: Maximum number of hits
            filter: Optional Qdrant filter
            with_payload: Include payload in hits
            with_vector: Include vectors in hits

        Returns:
            Response whose result is the list of scored points
        """
        body = RecommendRequest.model_construct(
            positive=positive,
            negative=negative or [],
            limit=limit,
            filter=filter,
            with_payload=with_payload,
            with_vector=with_vector
        )
        return self._request("POST", f"/collections/{collection}/points/recommend", body.to_body())

    def search_batch(self, collection: str, searches: List[Dict[str, Any]]) -> Dict[str, Any]:
        # Each entry is a full search body: {"vector": [...], "limit": 3, ...}
        body = SearchBatchRequest.model_construct(searches=searches)
        return self._request("POST", f"/collections/{collection}/points/search/batch", body.to_body())
