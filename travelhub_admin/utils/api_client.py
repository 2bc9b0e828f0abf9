import requests
import logging
from typing import Dict, Any, List, Optional
from travelhub_admin.config import API_BASE_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class APIClient:
    """Client for the TravelHub REST API. Failures are returned, never retried."""

    def __init__(self, base_url: str = API_BASE_URL, timeout: float = REQUEST_TIMEOUT, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

        # Set default headers
        self.session.headers.update({
            "Content-Type": "application/json"
        })

    def _request(self, method: str, path: str, **kwargs) -> Dict[str, Any]:
        try:
            response = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning(f"{method} {path} failed: {e}")
            return {"success": False, "error": f"Could not reach the API: {e}", "network_error": True}
        return self._handle_response(response)

    def _handle_response(self, response: requests.Response) -> Dict[str, Any]:
        """Normalize every outcome into the API envelope"""
        try:
            data = response.json()
        except ValueError:
            data = {"message": "Invalid JSON response"}

        if response.status_code >= 400:
            error_msg = data.get("message") or data.get("error") or f"HTTP {response.status_code}"
            return {"success": False, "error": error_msg, "status_code": response.status_code}

        if isinstance(data, dict) and "success" in data:
            return data
        return {"success": True, "data": data}

    # ===== DESTINATIONS =====
    def get_destinations(self) -> Dict[str, Any]:
        return self._request("GET", "/destinations")

    def get_destination(self, destination_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/destinations/{destination_id}")

    def create_destination(self, destination_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/destinations", json=destination_data)

    def update_destination(self, destination_id: str, destination_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/destinations/{destination_id}", json=destination_data)

    def delete_destination(self, destination_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/destinations/{destination_id}")

    def get_destination_hotels(self, destination_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/destinations/{destination_id}/hotels")

    # ===== HOTELS =====
    def get_hotels(self) -> Dict[str, Any]:
        return self._request("GET", "/hotels")

    def get_hotels_by_destination(self, destination_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/hotels/destination/{destination_id}")

    def get_hotel(self, hotel_id: str) -> Dict[str, Any]:
        return self._request("GET", f"/hotels/{hotel_id}")

    def create_hotel(self, hotel_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/hotels", json=hotel_data)

    def update_hotel(self, hotel_id: str, hotel_data: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("PUT", f"/hotels/{hotel_id}", json=hotel_data)

    def delete_hotel(self, hotel_id: str) -> Dict[str, Any]:
        return self._request("DELETE", f"/hotels/{hotel_id}")

    def filter_hotels(
        self,
        destination_id: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        min_rating: Optional[float] = None,
        max_rating: Optional[float] = None,
        amenities: Optional[List[str]] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None
    ) -> Dict[str, Any]:
        params = {
            "destinationId": destination_id,
            "minPrice": min_price,
            "maxPrice": max_price,
            "minRating": min_rating,
            "maxRating": max_rating,
            "amenities": amenities or None,
            "sortBy": sort_by,
            "sortOrder": sort_order,
        }
        params = {key: value for key, value in params.items() if value is not None}
        return self._request("GET", "/hotels/search/filter", params=params)

    def get_health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")


# Global API client instance
api_client = APIClient()
