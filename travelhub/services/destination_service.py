from fastapi import Depends
from typing import Any, Dict, List, Optional
from travelhub.database.connection import FirestoreStore, get_store
from travelhub.models.destination import DestinationCreate, DestinationUpdate
from travelhub.utils.crud_utils import CrudUtils
from travelhub.utils.localization import apply_language_defaults
from travelhub.utils.query_utils import Predicate, run_query
from travelhub.utils.validators import DESTINATION_REQUIRED, check_required
import logging

logger = logging.getLogger(__name__)

NOT_FOUND = "Destination not found"
LOCALIZED_TRIGGERS = ("name", "description", "language")

class DestinationService:
    """CRUD over the destinations collection"""

    def __init__(self, store: FirestoreStore):
        self.store = store

    @property
    def collection(self):
        return self.store.destinations

    def exists(self, destination_id: str) -> bool:
        return CrudUtils.exists(self.collection, destination_id)

    def count_hotels(self, destination_id: str) -> int:
        """Read-time aggregation behind `hotelsCount`"""
        docs = self.store.hotels.where("destinationId", "==", destination_id).stream()
        return len(list(docs))

    def _with_hotels_count(self, record: Dict[str, Any]) -> Dict[str, Any]:
        record["hotelsCount"] = self.count_hotels(record["id"])
        return record

    def list_all(
        self,
        predicate: Optional[Predicate] = None,
        sort_by: str = "createdAt",
        sort_order: str = "desc",
        include_hotels_count: bool = True
    ) -> List[Dict[str, Any]]:
        records = run_query(CrudUtils.get_all(self.collection), predicate, sort_by, sort_order)
        if include_hotels_count:
            records = [self._with_hotels_count(record) for record in records]
        return records

    def get(self, destination_id: str, include_hotels_count: bool = True) -> Dict[str, Any]:
        _, data = CrudUtils.get_document(self.collection, destination_id, NOT_FOUND)
        record = CrudUtils.to_view(destination_id, data)
        if include_hotels_count:
            record = self._with_hotels_count(record)
        return record

    def create(self, payload: DestinationCreate) -> Dict[str, Any]:
        core = payload.core()
        check_required(core, DESTINATION_REQUIRED)

        document = apply_language_defaults(CrudUtils.to_document(core, payload.extras()))
        record = CrudUtils.insert(self.collection, document)

        logger.info(f"Created destination {record['id']} ({record['name']})")
        return record

    def update(self, destination_id: str, payload: DestinationUpdate) -> Dict[str, Any]:
        doc_ref, current = CrudUtils.get_document(self.collection, destination_id, NOT_FOUND)

        changes = payload.core(exclude_unset=True)
        merged = CrudUtils.merge_update(current, changes, payload.extras(exclude_none=True))

        if any(field in changes for field in LOCALIZED_TRIGGERS):
            apply_language_defaults(merged)

        doc_ref.set(merged)
        logger.info(f"Updated destination {destination_id}: {sorted(changes)}")
        return CrudUtils.to_view(destination_id, merged)

    def delete(self, destination_id: str) -> Dict[str, Any]:
        # hotels referencing this destination are left in place
        record = CrudUtils.delete_by_id(self.collection, destination_id, NOT_FOUND)
        logger.info(f"Deleted destination {destination_id}")
        return record


def get_destination_service(store: FirestoreStore = Depends(get_store)) -> DestinationService:
    return DestinationService(store)
