from volume_metadata.persistent_volume_claim.base import Base
from volume_metadata.persistent_volume_claim.cache import Cache
from volume_metadata.persistent_volume_claim.crd import CRD
from volume_metadata.strategy import ResolveStrategy


class PersistentVolumeClaim(Base):

    def __init__(self, strategy=ResolveStrategy.CLIENT, store=None,
                 core_v1_api=None, request_timeout=None):
        self._strategy = strategy
        if self._strategy == ResolveStrategy.STORE:
            if store is None:
                raise ValueError("a claim store is required for the store strategy")
            self.pvc = Cache(store)
        else:
            self.pvc = CRD(core_v1_api, request_timeout=request_timeout)

    def get(self, claim_name, claim_namespace):
        return self.pvc.get(claim_name, claim_namespace)

    def find(self, claim_name, claim_namespace):
        return self.pvc.find(claim_name, claim_namespace)
