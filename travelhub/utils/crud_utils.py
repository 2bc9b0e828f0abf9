from fastapi import HTTPException
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from travelhub.models.common import ApiResponse, RESERVED_FIELDS
import logging

logger = logging.getLogger(__name__)

class CrudUtils:

    # ****************************************************
    #  Record Utils
    # ****************************************************

    @staticmethod
    def now() -> str:
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def strip_undefined(data: Dict[str, Any]) -> Dict[str, Any]:
        """Drops keys without a value so an update never nulls out stored data"""
        return {key: value for key, value in data.items() if value is not None}

    @staticmethod
    def to_document(core: Dict[str, Any], extras: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Typed core plus the `extras` sidecar, as stored in Firestore"""
        document = CrudUtils.strip_undefined(core)
        document["extras"] = dict(extras or {})
        return document

    @staticmethod
    def to_view(doc_id: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Flattens a stored document for clients: extension fields go back to the
        top level, typed core fields win on a name clash.
        """
        document = dict(document or {})
        extras = document.pop("extras", None) or {}

        view = {key: value for key, value in extras.items() if key not in RESERVED_FIELDS}
        view.update(document)
        view["id"] = doc_id
        return view

    @staticmethod
    def merge_update(current: Dict[str, Any], core: Dict[str, Any], extras: Dict[str, Any]) -> Dict[str, Any]:
        merged = dict(current)
        merged.update(CrudUtils.strip_undefined(core))

        merged_extras = dict(current.get("extras") or {})
        merged_extras.update(CrudUtils.strip_undefined(extras))
        merged["extras"] = merged_extras
        merged["updatedAt"] = CrudUtils.now()
        return merged

    # ****************************************************
    #  CRUD Utils
    # ****************************************************

    @staticmethod
    def get_document(collection, doc_id: str, not_found: str = "Document not found"):
        doc_ref = collection.document(doc_id)
        doc = doc_ref.get()
        if not doc.exists:
            raise HTTPException(status_code=404, detail=not_found)
        return doc_ref, doc.to_dict()

    @staticmethod
    def exists(collection, doc_id: str) -> bool:
        if not doc_id:
            return False
        return collection.document(doc_id).get().exists

    @staticmethod
    def get_all(collection) -> List[Dict[str, Any]]:
        return [CrudUtils.to_view(doc.id, doc.to_dict()) for doc in collection.stream()]

    @staticmethod
    def get_where(collection, field: str, value) -> List[Dict[str, Any]]:
        docs = collection.where(field, "==", value).stream()
        return [CrudUtils.to_view(doc.id, doc.to_dict()) for doc in docs]

    @staticmethod
    def insert(collection, document: Dict[str, Any]) -> Dict[str, Any]:
        timestamp = CrudUtils.now()
        document["createdAt"] = timestamp
        document["updatedAt"] = timestamp

        doc_ref = collection.document()
        doc_ref.set(document)
        return CrudUtils.to_view(doc_ref.id, document)

    @staticmethod
    def delete_by_id(collection, doc_id: str, not_found: str = "Document not found") -> Dict[str, Any]:
        doc_ref, data = CrudUtils.get_document(collection, doc_id, not_found)
        doc_ref.delete()
        logger.info(f"Deleted document ID: {doc_id} from collection.")
        return CrudUtils.to_view(doc_id, data)


def api_response(data=None, message: Optional[str] = None, count: Optional[int] = None, **extra) -> Dict[str, Any]:
    """Success envelope shared by every endpoint"""
    response = ApiResponse(success=True, data=data, message=message, count=count, **extra)
    return response.model_dump(exclude_none=True)


def list_response(records: List[Dict[str, Any]], **extra) -> Dict[str, Any]:
    return api_response(data=records, count=len(records), **extra)
