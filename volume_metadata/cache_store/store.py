import threading

from volume_metadata.utility.exceptions import StoreLookupError
from volume_metadata.utility.utility import logging
from volume_metadata.utility.utility import meta_namespace_key
from volume_metadata.utility.utility import split_meta_namespace_key


def object_key(obj):
    metadata = getattr(obj, 'metadata', None)
    if metadata is None or not metadata.name:
        raise StoreLookupError(f"object has no metadata name: {obj!r}")
    return meta_namespace_key(metadata.namespace, metadata.name)


class Store():
    """
    Thread-safe keyed snapshot of API objects.

    Keys are "<namespace>/<name>" for namespaced objects and "<name>" for
    cluster-scoped ones. Lookups raise StoreLookupError until the store has
    been populated once through replace() or sync_from().
    """

    def __init__(self, key_func=object_key):
        self.key_func = key_func
        self._items = {}
        self._lock = threading.Lock()
        self._synced = False

    @classmethod
    def from_objects(cls, objects, key_func=object_key):
        store = cls(key_func=key_func)
        store.replace(objects)
        return store

    def has_synced(self):
        with self._lock:
            return self._synced

    def add(self, obj):
        key = self.key_func(obj)
        with self._lock:
            self._items[key] = obj

    update = add

    def delete(self, obj):
        key = self.key_func(obj)
        with self._lock:
            self._items.pop(key, None)

    def get(self, obj):
        return self.get_by_key(self.key_func(obj))

    def get_by_key(self, key):
        try:
            split_meta_namespace_key(key)
        except ValueError as e:
            raise StoreLookupError(str(e)) from e

        with self._lock:
            if not self._synced:
                raise StoreLookupError(
                    f"store has not synced yet, unable to look up {key}")
            obj = self._items.get(key)
        return obj, obj is not None

    def list(self):
        with self._lock:
            return list(self._items.values())

    def list_keys(self):
        with self._lock:
            return list(self._items.keys())

    def replace(self, objects):
        items = {self.key_func(obj): obj for obj in objects}
        with self._lock:
            self._items = items
            self._synced = True

    def sync_from(self, list_func, **kwargs):
        resp = list_func(**kwargs)
        self.replace(resp.items)
        logging(f"Synced {len(resp.items)} objects into store")
        return self
