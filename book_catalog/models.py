"""
Book entity and its two representations.

On the wire (JSON) a book uses ``title``, ``author``, ``edition``, ``pages``
and ``year``; in the collection the same attributes are stored as
``bookname``, ``bookauthor``, ``bookedition``, ``bookpages`` and ``bookyear``.
``id`` is the caller-supplied identifier in both; the store's own ``_id`` is
exposed on the wire as ``mongo_id``.
"""
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from .errors import BookValidationError

# wire name -> stored name
FIELD_MAP = {
    "title": "bookname",
    "author": "bookauthor",
    "edition": "bookedition",
    "pages": "bookpages",
    "year": "bookyear",
}

STORE_ID_KEY = "mongo_id"


def _require_object(payload) -> Dict[str, Any]:
    if not isinstance(payload, dict):
        raise BookValidationError("Invalid request payload")
    return payload


@dataclass
class Book:
    id: str
    title: str = ""
    author: str = ""
    edition: str = ""
    pages: str = ""
    year: str = ""
    store_id: Optional[str] = None

    @classmethod
    def from_payload(cls, payload) -> "Book":
        """Build a book from a POST body.

        Known fields must be strings when present; anything else in the body
        is ignored, including a client-supplied ``mongo_id``.
        """
        data = _require_object(payload)
        values = {}
        for name in ("id",) + tuple(FIELD_MAP):
            value = data.get(name, "")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise BookValidationError("Invalid request payload")
            values[name] = value
        return cls(**values)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Book":
        store_id = doc.get("_id")
        return cls(
            id=doc.get("id", ""),
            store_id=str(store_id) if store_id is not None else None,
            **{wire: doc.get(stored, "") for wire, stored in FIELD_MAP.items()}
        )

    def to_document(self) -> Dict[str, Any]:
        doc = {"id": self.id}
        for wire, stored in FIELD_MAP.items():
            doc[stored] = getattr(self, wire)
        return doc

    def to_wire(self, include_store_id=False) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "pages": self.pages,
            "edition": self.edition,
            "year": self.year,
        }
        if include_store_id and self.store_id:
            data[STORE_ID_KEY] = self.store_id
        return data


@dataclass
class BookPatch:
    """Partial update for a book; ``None`` means "leave unchanged"."""

    title: Optional[str] = None
    author: Optional[str] = None
    edition: Optional[str] = None
    pages: Optional[str] = None
    year: Optional[str] = None

    @classmethod
    def from_payload(cls, payload) -> "BookPatch":
        # unrecognised keys and non-string values are dropped
        data = _require_object(payload)
        return cls(**{
            name: value for name, value in data.items()
            if name in FIELD_MAP and isinstance(value, str)
        })

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_update(self) -> Dict[str, str]:
        return {
            FIELD_MAP[f.name]: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
