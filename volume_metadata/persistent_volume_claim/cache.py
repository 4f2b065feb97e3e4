from kubernetes.client import V1PersistentVolumeClaim

from volume_metadata.persistent_volume_claim.base import Base
from volume_metadata.utility.constant import KIND_PERSISTENT_VOLUME_CLAIM
from volume_metadata.utility.exceptions import ObjectNotFoundError
from volume_metadata.utility.exceptions import TypeMismatchError
from volume_metadata.utility.utility import meta_namespace_key


class Cache(Base):

    def __init__(self, store):
        self.store = store

    def get(self, claim_name, claim_namespace):
        pvc, exists = self.find(claim_name, claim_namespace)
        if not exists:
            raise ObjectNotFoundError(
                KIND_PERSISTENT_VOLUME_CLAIM,
                meta_namespace_key(claim_namespace, claim_name))
        return pvc

    def find(self, claim_name, claim_namespace):
        obj, exists = self.store.get_by_key(
            meta_namespace_key(claim_namespace, claim_name))
        if not exists:
            return None, False
        if not isinstance(obj, V1PersistentVolumeClaim):
            raise TypeMismatchError(KIND_PERSISTENT_VOLUME_CLAIM, obj)
        return obj, True
