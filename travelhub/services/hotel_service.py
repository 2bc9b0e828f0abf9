from fastapi import Depends, HTTPException
from typing import Any, Dict, List, Optional
from travelhub.database.connection import FirestoreStore, get_store
from travelhub.models.destination import DestinationSummary
from travelhub.models.hotel import HotelCreate, HotelUpdate, HotelFilter
from travelhub.utils.crud_utils import CrudUtils
from travelhub.utils.localization import apply_language_defaults
from travelhub.utils.query_utils import Predicate, build_hotel_predicate, run_query
from travelhub.utils.validators import HOTEL_REQUIRED, check_required, check_hotel_bounds
import logging

logger = logging.getLogger(__name__)

NOT_FOUND = "Hotel not found"
DESTINATION_NOT_FOUND = "Destination not found"
LOCALIZED_TRIGGERS = ("name", "description", "language")

class HotelService:
    """
    CRUD over the hotels collection plus the hotel -> destination relation.
    Reads attach a reduced destination view only when asked to.
    """

    def __init__(self, store: FirestoreStore):
        self.store = store

    @property
    def collection(self):
        return self.store.hotels

    # ===== RELATION HELPERS =====
    def verify_destination_exists(self, destination_id: str):
        """Unknown destination is a validation failure (400), not a missing resource"""
        if not CrudUtils.exists(self.store.destinations, destination_id):
            logger.warning(f"Rejected hotel write, unknown destinationId: {destination_id}")
            raise HTTPException(status_code=400, detail=DESTINATION_NOT_FOUND)

    def destination_view(self, destination_id: str) -> Optional[Dict[str, Any]]:
        if not destination_id:
            return None

        doc = self.store.destinations.document(destination_id).get()
        if not doc.exists:
            # orphaned reference after a destination delete
            return None

        data = doc.to_dict()
        summary = DestinationSummary(
            id=doc.id,
            name=data.get("name", ""),
            country=data.get("country", ""),
            description=data.get("description", ""),
            imageUrl=data.get("imageUrl"),
            language=data.get("language")
        )
        return summary.model_dump(exclude_none=True)

    def _attach_destinations(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        views = {}
        for record in records:
            destination_id = record.get("destinationId")
            if destination_id not in views:
                views[destination_id] = self.destination_view(destination_id)
            record["destination"] = views[destination_id]
        return records

    # ===== READS =====
    def list_all(
        self,
        predicate: Optional[Predicate] = None,
        sort_by: str = "createdAt",
        sort_order: str = "desc",
        include_destination: bool = True
    ) -> List[Dict[str, Any]]:
        records = run_query(CrudUtils.get_all(self.collection), predicate, sort_by, sort_order)
        if include_destination:
            records = self._attach_destinations(records)
        return records

    def list_by_destination(self, destination_id: str, include_destination: bool = True) -> List[Dict[str, Any]]:
        records = run_query(CrudUtils.get_where(self.collection, "destinationId", destination_id))
        if include_destination:
            records = self._attach_destinations(records)
        return records

    def filter(self, filters: HotelFilter, include_destination: bool = True) -> List[Dict[str, Any]]:
        if filters.destinationId:
            candidates = CrudUtils.get_where(self.collection, "destinationId", filters.destinationId)
        else:
            candidates = CrudUtils.get_all(self.collection)

        predicate = build_hotel_predicate(filters, include_destination_id=False)
        records = run_query(candidates, predicate, filters.sortBy, filters.sortOrder)

        if include_destination:
            records = self._attach_destinations(records)
        return records

    def get(self, hotel_id: str, include_destination: bool = True) -> Dict[str, Any]:
        _, data = CrudUtils.get_document(self.collection, hotel_id, NOT_FOUND)
        record = CrudUtils.to_view(hotel_id, data)
        if include_destination:
            record["destination"] = self.destination_view(record.get("destinationId"))
        return record

    # ===== WRITES =====
    def create(self, payload: HotelCreate) -> Dict[str, Any]:
        core = payload.core()
        check_required(core, HOTEL_REQUIRED)
        check_hotel_bounds(core)
        self.verify_destination_exists(core["destinationId"])

        document = apply_language_defaults(CrudUtils.to_document(core, payload.extras()))
        record = CrudUtils.insert(self.collection, document)

        logger.info(f"Created hotel {record['id']} ({record['name']}) in destination {record['destinationId']}")
        return record

    def update(self, hotel_id: str, payload: HotelUpdate) -> Dict[str, Any]:
        doc_ref, current = CrudUtils.get_document(self.collection, hotel_id, NOT_FOUND)

        changes = CrudUtils.strip_undefined(payload.core(exclude_unset=True))
        check_hotel_bounds(changes)

        new_destination = changes.get("destinationId")
        if new_destination and new_destination != current.get("destinationId"):
            self.verify_destination_exists(new_destination)

        merged = CrudUtils.merge_update(current, changes, payload.extras(exclude_none=True))
        if any(field in changes for field in LOCALIZED_TRIGGERS):
            apply_language_defaults(merged)

        doc_ref.set(merged)
        logger.info(f"Updated hotel {hotel_id}: {sorted(changes)}")
        return CrudUtils.to_view(hotel_id, merged)

    def delete(self, hotel_id: str) -> Dict[str, Any]:
        record = CrudUtils.delete_by_id(self.collection, hotel_id, NOT_FOUND)
        logger.info(f"Deleted hotel {hotel_id}")
        return record


def get_hotel_service(store: FirestoreStore = Depends(get_store)) -> HotelService:
    return HotelService(store)
