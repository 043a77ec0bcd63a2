"""
filter_store.py - Saved filter store
Single responsibility: own the saved filter collection and the active filter
pointer, with write-through persistence to the key/value table.
"""
import copy
import json
import logging
import sqlite3

from filterdesk import config
from filterdesk.database.repositories import kv as kv_repo
from filterdesk.database.schema import initialize_schema
from filterdesk.domain.filters import Filter

logger = logging.getLogger(__name__)


class FilterStore:
    """
    In-memory collection of saved filters backed by durable storage.

    Nothing is read at construction time; call ``load()`` (or use
    ``FilterStore.open``) to restore the persisted state. Every mutation
    (``save``, ``delete``, ``set_active``) rewrites the whole collection and
    the active pointer synchronously.
    """

    def __init__(self, db_path: str | None = None):
        self.db_path = db_path or config.DB_PATH
        self._filters: list[Filter] = []
        self._active: Filter | None = None

    @classmethod
    def open(cls, db_path: str | None = None) -> "FilterStore":
        store = cls(db_path)
        initialize_schema(store.db_path)
        store.load()
        return store

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Restore filters and the active pointer; bad data is logged and dropped."""
        self._filters = []
        self._active = None
        try:
            raw_filters = kv_repo.get_value(config.SAVED_FILTERS_KEY, self.db_path)
            raw_active = kv_repo.get_value(config.ACTIVE_FILTER_KEY, self.db_path)
        except sqlite3.Error:
            logger.exception("Failed to read saved filters from %s", self.db_path)
            return

        self._filters = self._decode_filters(raw_filters)
        active_id = self._decode_active_id(raw_active)
        if active_id is not None:
            self._active = self.get(active_id)
            if self._active is None:
                logger.info("Active filter %s no longer exists; cleared", active_id)
        logger.debug("Loaded %d saved filters (active=%s)", len(self._filters), active_id)

    def _decode_filters(self, raw: str | None) -> list[Filter]:
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding unparsable saved filters: %r", raw[:200])
            return []
        if not isinstance(data, list):
            logger.warning("Discarding saved filters: expected a list, got %s", type(data).__name__)
            return []

        filters: list[Filter] = []
        for entry in data:
            try:
                filters.append(Filter.from_dict(entry))
            except ValueError as e:
                logger.warning("Discarding malformed saved filter: %s", e)
        return filters

    def _decode_active_id(self, raw: str | None) -> str | None:
        if raw is None:
            return None
        try:
            active_id = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding unparsable active filter id: %r", raw[:200])
            return None
        if not isinstance(active_id, str):
            logger.warning("Discarding active filter id of type %s", type(active_id).__name__)
            return None
        return active_id

    def _persist(self, filters: list[Filter], active: Filter | None) -> None:
        payload = json.dumps([f.to_dict() for f in filters], ensure_ascii=False)
        active_id = json.dumps(active.id) if active else None
        kv_repo.write_values(
            {config.SAVED_FILTERS_KEY: payload, config.ACTIVE_FILTER_KEY: active_id},
            self.db_path,
        )

    def _commit(self, filters: list[Filter], active: Filter | None) -> None:
        # Memory only changes once the write has gone through
        self._persist(filters, active)
        self._filters = filters
        self._active = active

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def get_saved(self) -> list[Filter]:
        return list(self._filters)

    def get(self, filter_id: str) -> Filter | None:
        for f in self._filters:
            if f.id == filter_id:
                return f
        return None

    def save(self, filter: Filter) -> None:
        """Insert or replace by id, then persist."""
        stored = copy.deepcopy(filter)
        filters = list(self._filters)
        for i, existing in enumerate(filters):
            if existing.id == stored.id:
                filters[i] = stored
                break
        else:
            filters.append(stored)

        active = self._active
        if active is not None and active.id == stored.id:
            active = stored
        self._commit(filters, active)
        logger.info("Saved filter %s (%s)", stored.id, stored.name)

    def delete(self, filter_id: str) -> None:
        filters = [f for f in self._filters if f.id != filter_id]
        active = self._active
        if active is not None and active.id == filter_id:
            active = None
        self._commit(filters, active)
        logger.info("Deleted filter %s", filter_id)

    # ------------------------------------------------------------------
    # Active filter
    # ------------------------------------------------------------------

    def get_active(self) -> Filter | None:
        return self._active

    def set_active(self, filter: Filter | None) -> None:
        """Point at the stored entry with the same id; unsaved filters are copied."""
        active = None
        if filter is not None:
            active = self.get(filter.id) or copy.deepcopy(filter)
        self._commit(list(self._filters), active)
        logger.info("Active filter set to %s", active.id if active else None)
