import logging
import threading

from .errors import EntityNotFoundError, GraphError


_logger = logging.getLogger(__name__)


class Collection(object):
    """
    An ordered, in-memory collection of entities of one kind.

    Entities are plain dicts keyed by field name. Writes are serialised with a
    lock so that identifier assignment and append happen as one step. Stored
    entities are never modified in place: ``update`` replaces the entity with
    a new dict, so readers always see either the old or the new entity.
    """

    def __init__(self, name, entities=(), id_field="id"):
        self.name = name
        self.id_field = id_field
        self._lock = threading.RLock()
        self._entities = []
        self._positions = {}

        for entity in entities:
            self._append(dict(entity))

    def _append(self, entity):
        identifier = entity.get(self.id_field)
        if identifier is None:
            raise GraphError("{} entity is missing identifier field {}".format(self.name, self.id_field))
        if identifier in self._positions:
            raise GraphError("{} already has entity with identifier {!r}".format(self.name, identifier))

        self._positions[identifier] = len(self._entities)
        self._entities.append(entity)

    def all(self):
        with self._lock:
            return tuple(self._entities)

    def __iter__(self):
        return iter(self.all())

    def __len__(self):
        with self._lock:
            return len(self._entities)

    def get(self, identifier, default=None):
        with self._lock:
            position = self._positions.get(identifier)
            if position is None:
                return default
            else:
                return self._entities[position]

    def find(self, predicate):
        for entity in self.all():
            if predicate(entity):
                return entity

        return None

    def filter(self, predicate):
        return [
            entity
            for entity in self.all()
            if predicate(entity)
        ]

    def next_identifier(self):
        with self._lock:
            identifiers = [
                identifier
                for identifier in self._positions
                if isinstance(identifier, int)
            ]
            if identifiers:
                return max(identifiers) + 1
            else:
                return len(self._entities) + 1

    def insert(self, values):
        with self._lock:
            entity = dict(values)
            entity[self.id_field] = self.next_identifier()
            self._append(entity)

        _logger.debug("inserted %s %r", self.name, entity[self.id_field])
        return entity

    def update(self, identifier, values):
        with self._lock:
            position = self._positions.get(identifier)
            if position is None:
                raise EntityNotFoundError(self.name, identifier)

            entity = dict(self._entities[position])
            entity.update(values)
            entity[self.id_field] = identifier
            self._entities[position] = entity

        _logger.debug("updated %s %r", self.name, identifier)
        return entity

    def __repr__(self):
        return "Collection(name={!r}, size={})".format(self.name, len(self))


class Store(object):
    def __init__(self, collections=()):
        self._collections = {}
        for collection in collections:
            self.add(collection)

    def add(self, collection):
        if collection.name in self._collections:
            raise GraphError("store already has collection {}".format(collection.name))
        self._collections[collection.name] = collection
        return collection

    def __getitem__(self, name):
        return self._collections[name]

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        try:
            return self._collections[name]
        except KeyError:
            raise AttributeError("store has no collection {}".format(name))

    def __contains__(self, name):
        return name in self._collections

    def __iter__(self):
        return iter(self._collections.values())
