from kubernetes.client import V1PersistentVolume

from volume_metadata.persistent_volume.base import Base
from volume_metadata.utility.constant import KIND_PERSISTENT_VOLUME
from volume_metadata.utility.exceptions import ObjectNotFoundError
from volume_metadata.utility.exceptions import TypeMismatchError


class Cache(Base):

    def __init__(self, store):
        self.store = store

    def get(self, volume_name):
        # persistent volumes are cluster-scoped, the key is the bare name
        obj, exists = self.store.get_by_key(volume_name)
        if not exists:
            raise ObjectNotFoundError(KIND_PERSISTENT_VOLUME, volume_name)
        if not isinstance(obj, V1PersistentVolume):
            raise TypeMismatchError(KIND_PERSISTENT_VOLUME, obj)
        return obj
