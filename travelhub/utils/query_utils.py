from typing import Any, Callable, Dict, Iterable, List, Optional
from travelhub.models.hotel import HotelFilter

Record = Dict[str, Any]
Predicate = Callable[[Record], bool]


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def in_range(field: str, low: Optional[float] = None, high: Optional[float] = None) -> Predicate:
    """Inclusive range on a numeric field; records without the field never match"""
    def predicate(record: Record) -> bool:
        value = record.get(field)
        if not _is_number(value):
            return False
        if low is not None and value < low:
            return False
        if high is not None and value > high:
            return False
        return True
    return predicate


def equals(field: str, expected) -> Predicate:
    return lambda record: record.get(field) == expected


def intersects(field: str, wanted: Iterable[str]) -> Predicate:
    wanted = set(wanted)
    def predicate(record: Record) -> bool:
        values = record.get(field) or []
        if isinstance(values, str):
            values = [values]
        return bool(wanted.intersection(values))
    return predicate


def all_of(predicates: List[Predicate]) -> Optional[Predicate]:
    if not predicates:
        return None
    return lambda record: all(predicate(record) for predicate in predicates)


def build_hotel_predicate(filters: HotelFilter, include_destination_id: bool = True) -> Optional[Predicate]:
    """
    Combines the hotel search filters into one predicate.
    The destinationId equality can be left out when the store already applied it.
    """
    predicates = []

    if filters.destinationId and include_destination_id:
        predicates.append(equals("destinationId", filters.destinationId))

    if filters.minPrice is not None or filters.maxPrice is not None:
        predicates.append(in_range("pricePerNight", filters.minPrice, filters.maxPrice))

    if filters.minRating is not None or filters.maxRating is not None:
        predicates.append(in_range("rating", filters.minRating, filters.maxRating))

    if filters.amenities:
        predicates.append(intersects("amenities", filters.amenities))

    return all_of(predicates)


def _sort_value(value):
    # numbers before strings before anything else, so mixed stored types still compare
    if _is_number(value):
        return (0, value)
    if isinstance(value, str):
        return (1, value)
    return (2, str(value))


def sort_records(records: List[Record], sort_by: str = "createdAt", sort_order: str = "desc") -> List[Record]:
    """
    Stable sort on `sort_by` on top of creation order, so ties keep insertion order.
    Records missing the sort field go last in either direction.
    """
    # Firestore auto-ids are random, so equal timestamps fall back to id for a repeatable order
    ordered = sorted(records, key=lambda record: (record.get("createdAt") or "", str(record.get("id") or "")))

    present = [record for record in ordered if record.get(sort_by) is not None]
    missing = [record for record in ordered if record.get(sort_by) is None]

    present = sorted(present, key=lambda record: _sort_value(record[sort_by]), reverse=(sort_order == "desc"))
    return present + missing


def run_query(records: Iterable[Record], predicate: Optional[Predicate] = None, sort_by: str = "createdAt", sort_order: str = "desc") -> List[Record]:
    matched = [record for record in records if predicate is None or predicate(record)]
    return sort_records(matched, sort_by, sort_order)
