"""
Data Management Module - File-backed store for all portfolio content

Every collection is an in-memory map mirrored to one JSON file in the data
directory. Any mutation re-writes all the files (a full flush); there is no
partial write, journal or atomic rename, so a crash mid-write can leave a
truncated file behind. Loading degrades to empty collections (or the default
site content) instead of failing.
"""

import json
import logging
import os
import threading
from datetime import datetime, timezone

from flask import current_app
from pydantic import ValidationError

from models import ENTITY_MODELS


logger = logging.getLogger(__name__)

STORE_EXTENSION_KEY = 'portfolio_store'

DEFAULT_SITE_CONTENT = {
    'home.title': 'Hi, I build things for the web',
    'home.subtitle': 'Full-stack developer crafting fast, accessible products.',
    'about.title': 'About Me',
    'about.subtitle': 'Developer, designer and lifelong learner',
    'about.description': (
        'I am a software developer focused on building clean, maintainable '
        'web applications, from the database up to the last pixel.'
    ),
    'projects.title': 'Projects',
    'projects.subtitle': 'A selection of things I have built',
    'blog.title': 'Blog',
    'blog.subtitle': 'Notes on code, design and everything in between',
    'contact.title': 'Get in Touch',
    'contact.subtitle': 'Have a project in mind? Send me a message.',
}


class NotFoundError(LookupError):
    """Raised when an update or delete targets a record that does not exist"""

    def __init__(self, collection, identifier):
        super().__init__(f"{collection}: no record {identifier!r}")
        self.collection = collection
        self.identifier = identifier


class PersistenceError(OSError):
    """Raised by the file helpers when a data file cannot be read or written"""


def utcnow():
    return datetime.now(timezone.utc)


class EntityCollection:
    """
    One entity type held as ``{id: record}`` and persisted as ``<name>.json``

    Ids come from a counter seeded to ``max(existing ids) + 1`` on load, so
    they are never reused even after deletes. ``all()`` returns the newest
    records first unless a ``sort_key`` is given.
    """

    def __init__(self, store, name, timestamp_field='created_at', sort_key=None):
        self._store = store
        self.name = name
        self.filename = f'{name}.json'
        self.insert_model, self.record_model = ENTITY_MODELS[name]
        self.timestamp_field = timestamp_field
        self._sort_key = sort_key
        self._records = {}
        self._next_id = 1

    def replace_all(self, records):
        """Swap in records read from disk and re-seed the id counter"""
        self._records = {record.id: record for record in records}
        self._next_id = max(self._records, default=0) + 1

    def all(self):
        records = list(self._records.values())
        if self._sort_key is not None:
            return sorted(records, key=self._sort_key)
        return sorted(
            records,
            key=lambda record: (getattr(record, self.timestamp_field), record.id),
            reverse=True)

    def get(self, record_id):
        return self._records.get(record_id)

    def create(self, data):
        """
        Store a new record built from validated insert data

        Args:
            data: instance of this collection's insert model

        Returns:
            The stored record, with its assigned id and timestamp
        """
        with self._store.lock:
            fields = data.model_dump()
            fields['id'] = self._next_id
            fields[self.timestamp_field] = utcnow()
            record = self.record_model.model_validate(fields)
            self._records[record.id] = record
            self._next_id += 1
            self._store.flush()
        return record

    def update(self, record_id, data):
        """Replace every field except id and the creation timestamp"""
        with self._store.lock:
            existing = self._records.get(record_id)
            if existing is None:
                raise NotFoundError(self.name, record_id)
            fields = data.model_dump()
            fields['id'] = existing.id
            fields[self.timestamp_field] = getattr(existing, self.timestamp_field)
            record = self.record_model.model_validate(fields)
            self._records[record_id] = record
            self._store.flush()
        return record

    def delete(self, record_id):
        with self._store.lock:
            if record_id not in self._records:
                raise NotFoundError(self.name, record_id)
            del self._records[record_id]
            self._store.flush()

    def serialize(self):
        return [record.to_json() for record in self._records.values()]


class PortfolioStore:
    """
    Owner of every entity collection and of the data directory

    Lifecycle: construct, ``load()`` once, serve requests, ``close()`` on
    shutdown for a final flush. A re-entrant lock serializes each
    mutate-then-flush cycle so concurrent requests cannot interleave a
    mutation with another request's flush.
    """

    SITE_CONTENT_FILE = 'site_content.json'

    def __init__(self, data_dir, default_site_content=None):
        self.data_dir = data_dir
        self.lock = threading.RLock()
        if default_site_content is None:
            default_site_content = DEFAULT_SITE_CONTENT
        self.default_site_content = dict(default_site_content)

        self.contacts = EntityCollection(self, 'contacts')
        self.visits = EntityCollection(self, 'visits', timestamp_field='timestamp')
        self.projects = EntityCollection(self, 'projects')
        self.technologies = EntityCollection(self, 'technologies')
        self.blogs = EntityCollection(self, 'blogs')
        self.timeline = EntityCollection(
            self, 'timeline', sort_key=lambda item: (item.sort_order, item.id))

        self.site_content_insert_model, self.site_content_model = ENTITY_MODELS['site_content']
        self._site_content = {}
        self._site_content_next_id = 1

    @property
    def collections(self):
        return (self.contacts, self.visits, self.projects,
                self.technologies, self.blogs, self.timeline)

    def _path(self, filename):
        return os.path.join(self.data_dir, filename)

    # File helpers

    def _read_json(self, filename):
        """Return parsed file content, or None when the file does not exist"""
        path = self._path(filename)
        if not os.path.exists(path):
            return None
        try:
            with open(path, 'r', encoding='utf-8') as file:
                return json.load(file)
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Could not read {path}: {e}") from e

    def _write_json(self, filename, payload):
        path = self._path(filename)
        try:
            os.makedirs(self.data_dir, exist_ok=True)
            with open(path, 'w', encoding='utf-8') as file:
                json.dump(payload, file, ensure_ascii=False, indent=2)
        except (OSError, TypeError, ValueError) as e:
            raise PersistenceError(f"Could not write {path}: {e}") from e

    def _parse_records(self, model, payload):
        if not isinstance(payload, list):
            raise PersistenceError(f"Expected a JSON array, got {type(payload).__name__}")
        try:
            return [model.model_validate(item) for item in payload]
        except ValidationError as e:
            raise PersistenceError(f"Malformed record: {e.error_count()} validation error(s)") from e

    # Lifecycle

    def load(self):
        """Read every collection from disk; missing or broken files degrade"""
        with self.lock:
            for collection in self.collections:
                try:
                    payload = self._read_json(collection.filename)
                    records = [] if payload is None else self._parse_records(collection.record_model, payload)
                except PersistenceError as e:
                    logger.error(f"Error loading {collection.name}, starting empty: {e}")
                    records = []
                collection.replace_all(records)
                logger.info(f"Loaded {len(records)} {collection.name} record(s)")

            seeded = False
            try:
                payload = self._read_json(self.SITE_CONTENT_FILE)
                if payload is None:
                    seeded = True
                else:
                    self._replace_site_content(self._parse_records(self.site_content_model, payload))
            except PersistenceError as e:
                logger.error(f"Error loading site content, seeding defaults: {e}")
                seeded = True

            if seeded:
                self._replace_site_content([])
                self._backfill_site_content()
                logger.info(f"Seeded {len(self._site_content)} default site content entries")
                self.flush()
        return self

    def flush(self):
        """Re-write every collection to its file; failures are logged, not raised"""
        with self.lock:
            files = [(collection.filename, collection.serialize()) for collection in self.collections]
            files.append((self.SITE_CONTENT_FILE,
                          [entry.to_json() for entry in self._site_content.values()]))
            for filename, payload in files:
                try:
                    self._write_json(filename, payload)
                except PersistenceError as e:
                    logger.error(f"Error saving data: {e}")

    def close(self):
        self.flush()
        logger.info("Store flushed on shutdown")

    # Contacts and visits

    def create_contact(self, data):
        return self.contacts.create(data)

    def get_contacts(self):
        return self.contacts.all()

    def track_visit(self, page):
        return self.visits.create(self.visits.insert_model(page=page))

    def get_visits(self):
        return self.visits.all()

    # Site content

    def _replace_site_content(self, entries):
        self._site_content = {entry.key: entry for entry in entries}
        ids = [entry.id for entry in entries]
        self._site_content_next_id = max(ids, default=0) + 1

    def _insert_site_content(self, key, value):
        entry = self.site_content_model(
            id=self._site_content_next_id, key=key, value=value, created_at=utcnow())
        self._site_content[key] = entry
        self._site_content_next_id += 1
        return entry

    def _backfill_site_content(self):
        """Add any default key missing from the live map; True if one was added"""
        missing = [key for key in self.default_site_content if key not in self._site_content]
        for key in missing:
            self._insert_site_content(key, self.default_site_content[key])
        if missing:
            logger.info(f"Backfilled default site content: {', '.join(missing)}")
        return bool(missing)

    def get_all_site_content(self):
        with self.lock:
            if self._backfill_site_content():
                self.flush()
            return list(self._site_content.values())

    def get_site_content(self, key):
        """Return the entry for ``key`` (backfilling a default), or None"""
        with self.lock:
            if key not in self._site_content and key in self.default_site_content:
                self._insert_site_content(key, self.default_site_content[key])
                self.flush()
            return self._site_content.get(key)

    def update_site_content(self, key, value):
        """Upsert: create the entry if absent, otherwise replace its value only"""
        with self.lock:
            existing = self._site_content.get(key)
            if existing is None:
                entry = self._insert_site_content(key, value)
            else:
                entry = existing.model_copy(update={'value': value})
                self._site_content[key] = entry
            self.flush()
        return entry

    def delete_site_content(self, key):
        with self.lock:
            if key not in self._site_content:
                raise NotFoundError('site_content', key)
            del self._site_content[key]
            self.flush()


def get_store():
    """Store attached to the current application by ``create_app``"""
    return current_app.extensions[STORE_EXTENSION_KEY]


__all__ = [
    'DEFAULT_SITE_CONTENT',
    'EntityCollection',
    'NotFoundError',
    'PersistenceError',
    'PortfolioStore',
    'STORE_EXTENSION_KEY',
    'get_store',
]
