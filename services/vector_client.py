import httpx
import logging
import os
from typing import Any, Dict, List, Optional

from models import MatchResult
from services.azure_keyvault import azure_kv_service

logger = logging.getLogger(__name__)

DEFAULT_LOOKUP_TIMEOUT = 10.0


class SimilarityLookupError(Exception):
    """Raised when the vector index cannot answer a query"""


class VectorIndexClient:
    """Thin async client for the hosted vector index REST API (query-data / upsert-data)"""

    def __init__(self, url: Optional[str] = None, token: Optional[str] = None,
                 timeout: float = DEFAULT_LOOKUP_TIMEOUT, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = url.rstrip("/") if url else None
        self.token = token
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_env(cls) -> "VectorIndexClient":
        """Build a client from VECTOR_DB_* variables, falling back to Azure Key Vault"""
        url = os.getenv("VECTOR_DB_URL")
        token = os.getenv("VECTOR_DB_TOKEN")

        if (not url or not token) and azure_kv_service.is_configured:
            logger.info("Vector index credentials not in environment, reading from Key Vault")
            kv_config = azure_kv_service.get_vector_db_config()
            url = url or kv_config["url"]
            token = token or kv_config["token"]

        if not url or not token:
            logger.warning("Vector index URL or token not configured")

        timeout = float(os.getenv("VECTOR_DB_TIMEOUT", DEFAULT_LOOKUP_TIMEOUT))
        return cls(url=url, token=token, timeout=timeout)

    @property
    def is_configured(self) -> bool:
        return bool(self.base_url and self.token)

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Content-Type": "application/json"
                },
                timeout=self.timeout,
                transport=self._transport
            )
        return self._client

    async def aclose(self):
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _post(self, path: str, payload: Any) -> Any:
        if not self.is_configured:
            raise SimilarityLookupError("Vector index URL or token not configured")

        try:
            response = await self._get_client().post(f"{self.base_url}/{path}", json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from vector index: {e.response.status_code} - {e.response.text}")
            raise SimilarityLookupError(f"Vector index returned error: {e.response.status_code}") from e
        except httpx.TimeoutException as e:
            logger.error(f"Vector index request to {path} timed out")
            raise SimilarityLookupError(f"Vector index request timed out: {path}") from e
        except httpx.HTTPError as e:
            logger.error(f"Vector index transport error: {e}")
            raise SimilarityLookupError(f"Failed to reach vector index: {e}") from e
        except ValueError as e:
            raise SimilarityLookupError("Vector index returned a non-JSON response") from e

    async def query(self, data: str, top_k: int = 1, include_metadata: bool = True) -> List[MatchResult]:
        """
        Query the index with raw text and return the nearest neighbours

        Args:
            data: Text to embed and search with
            top_k: Number of neighbours to return
            include_metadata: Ask the index to attach stored metadata

        Returns:
            List of MatchResult ordered by descending score
        """
        payload = {
            "data": data,
            "topK": top_k,
            "includeMetadata": include_metadata
        }
        body = await self._post("query-data", payload)
        return [self._parse_match(hit) for hit in self._result(body)]

    async def upsert(self, entries: List[Dict[str, Any]]) -> None:
        """Upsert raw-text entries of the form {"id", "data", "metadata"}"""
        body = await self._post("upsert-data", entries)
        if isinstance(body, dict) and body.get("error"):
            raise SimilarityLookupError(f"Vector index rejected upsert: {body['error']}")

    @staticmethod
    def _result(body: Any) -> List[Dict[str, Any]]:
        if not isinstance(body, dict) or not isinstance(body.get("result"), list):
            raise SimilarityLookupError("Malformed vector index response: missing result list")
        return body["result"]

    @staticmethod
    def _parse_match(hit: Any) -> MatchResult:
        try:
            metadata = hit.get("metadata") or {}
            return MatchResult(
                id=str(hit["id"]) if hit.get("id") is not None else None,
                score=float(hit["score"]),
                text=str(metadata.get("text", ""))
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise SimilarityLookupError(f"Malformed vector index match: {hit!r}") from e
