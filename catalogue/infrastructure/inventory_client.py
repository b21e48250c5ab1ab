"""HTTP client for the external inventory provider.

``fetch`` is total: every failure mode of the remote call (connection error,
timeout, non-success status, malformed body, anything unexpected) is logged and reported
as ``None``, so callers only ever deal with "snapshot" or "no snapshot".
"""

from typing import Optional
import httpx
from pydantic import ValidationError

from shared.core import CORRELATION_ID_HEADER, get_logger
from catalogue.application.schemas import InventorySnapshot

logger = get_logger(__name__)

INVENTORY_TIMEOUT_SECONDS = 30.0

class InventoryClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = INVENTORY_TIMEOUT_SECONDS,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = http_client or httpx.AsyncClient(base_url=self.base_url, timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch(self, product_id: int, correlation_id: str) -> Optional[InventorySnapshot]:
        """Fetch live price and stock for one product, ``None`` when unavailable"""
        log_fields = {'product_id': product_id}
        logger.info(
            f"Fetching inventory data for product {product_id}",
            extra={'correlation_id': correlation_id, 'extra_fields': log_fields}
        )

        try:
            response = await self._client.get(
                f"/api/inventory/{product_id}",
                headers={CORRELATION_ID_HEADER: correlation_id},
                timeout=self.timeout,
            )
        except httpx.TimeoutException:
            logger.error(
                f"Timed out fetching inventory data for product {product_id}",
                exc_info=True,
                extra={'correlation_id': correlation_id, 'extra_fields': log_fields}
            )
            return None
        except httpx.HTTPError:
            logger.error(
                f"HTTP error fetching inventory data for product {product_id}",
                exc_info=True,
                extra={'correlation_id': correlation_id, 'extra_fields': log_fields}
            )
            return None
        except Exception:
            logger.error(
                f"Unexpected error fetching inventory data for product {product_id}",
                exc_info=True,
                extra={'correlation_id': correlation_id, 'extra_fields': log_fields}
            )
            return None

        if not response.is_success:
            logger.warning(
                f"Failed to fetch inventory data for product {product_id}. Status: {response.status_code}",
                extra={'correlation_id': correlation_id, 'extra_fields': {**log_fields, 'status_code': response.status_code}}
            )
            return None

        try:
            snapshot = InventorySnapshot.model_validate(response.json())
        except (ValueError, ValidationError):
            logger.warning(
                f"Malformed inventory data for product {product_id}",
                exc_info=True,
                extra={'correlation_id': correlation_id, 'extra_fields': log_fields}
            )
            return None
        except Exception:
            logger.error(
                f"Unexpected error reading inventory data for product {product_id}",
                exc_info=True,
                extra={'correlation_id': correlation_id, 'extra_fields': log_fields}
            )
            return None

        logger.info(
            f"Successfully retrieved inventory data for product {product_id}",
            extra={'correlation_id': correlation_id, 'extra_fields': log_fields}
        )
        return snapshot
