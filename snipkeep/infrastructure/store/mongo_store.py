from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from snipkeep.domain.entities.snippet import Snippet
from snipkeep.domain.interfaces.snippet_store_interface import ISnippetStore
from snipkeep.errors import LanguageNotFound, OutOfCheeseError, SnippetNotFound, TagNotFound
from snipkeep.observability import emit_event

COUNTER_ID = "snippet_index"


class MongoSnippetStore(ISnippetStore):
    """MongoDB-backed store implementing the domain interface.

    One document per snippet keyed by ``index``; indices are allocated from a
    counters document so they stay unique and never get reused.
    """

    def __init__(self, snippets: Collection, counters: Collection) -> None:
        self._snippets = snippets
        self._counters = counters

    @classmethod
    def from_database(cls, database: Any) -> "MongoSnippetStore":
        store = cls(database["snippets"], database["counters"])
        store.ensure_indexes()
        return store

    def ensure_indexes(self) -> None:
        try:
            self._snippets.create_index([("index", ASCENDING)], unique=True)
            self._snippets.create_index([("language", ASCENDING)])
            self._snippets.create_index([("tags", ASCENDING)])
        except PyMongoError as e:
            emit_event("mongo_index_create_failed", severity="warning", error=str(e))

    # ---------- Mutations ----------
    def add(self, snippet: Snippet) -> Snippet:
        record = snippet.copy()
        record.index = self._allocate_index()
        self._snippets.insert_one(self._to_doc(record))
        return record

    def update(
        self,
        index: int,
        *,
        description: Optional[str] = None,
        language: Optional[str] = None,
        tags: Optional[List[str]] = None,
        code: Optional[str] = None,
    ) -> Snippet:
        current = self.get(index)
        updated = Snippet(
            index=current.index,
            description=current.description if description is None else description,
            language=current.language if language is None else language,
            tags=list(current.tags) if tags is None else list(tags),
            code=current.code if code is None else code,
            date=current.date,
            updated=datetime.now(timezone.utc),
        )
        doc = self._to_doc(updated)
        doc.pop("index")
        doc.pop("date")
        self._snippets.update_one({"index": index}, {"$set": doc})
        return updated

    def delete(self, index: int) -> Snippet:
        current = self.get(index)
        self._snippets.delete_one({"index": index})
        return current

    # ---------- Queries ----------
    def get(self, index: int) -> Snippet:
        doc = self._snippets.find_one({"index": index})
        if not isinstance(doc, dict):
            raise SnippetNotFound(index)
        return self._from_doc(doc)

    def list_all(self) -> List[Snippet]:
        return self._find({})

    def list_by_language(self, language: str) -> List[Snippet]:
        results = self._find({"language": (language or "").strip().lower()})
        if not results:
            raise LanguageNotFound(language)
        return results

    def list_by_tag(self, tag: str) -> List[Snippet]:
        results = self._find({"tags": tag})
        if not results:
            raise TagNotFound(tag)
        return results

    def languages(self) -> List[str]:
        return sorted(str(v) for v in self._snippets.distinct("language") if v)

    def tags(self) -> List[str]:
        return sorted(str(v) for v in self._snippets.distinct("tags") if v)

    # ---------- Mapping helpers ----------
    def _find(self, query: Dict[str, Any]) -> List[Snippet]:
        docs = self._snippets.find(query).sort("index", ASCENDING)
        return [self._from_doc(d) for d in docs if isinstance(d, dict)]

    def _allocate_index(self) -> int:
        doc = self._counters.find_one_and_update(
            {"_id": COUNTER_ID},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        if not isinstance(doc, dict) or "seq" not in doc:
            raise OutOfCheeseError("snippet index counter is missing")
        return int(doc["seq"])

    @staticmethod
    def _to_doc(s: Snippet) -> Dict[str, Any]:
        return {
            "index": s.index,
            "description": s.description,
            "language": s.language,
            "tags": list(s.tags),
            "code": s.code,
            "date": s.date,
            "updated": s.updated,
        }

    @staticmethod
    def _from_doc(d: Dict[str, Any]) -> Snippet:
        now = datetime.now(timezone.utc)
        return Snippet(
            index=int(d.get("index", 0) or 0),
            description=str(d.get("description", "") or ""),
            language=str(d.get("language", "") or ""),
            tags=list(d.get("tags", []) or []),
            code=str(d.get("code", "") or ""),
            date=d.get("date") or now,
            updated=d.get("updated") or now,
        )
