from volume_metadata.persistent_volume.base import Base
from volume_metadata.persistent_volume.cache import Cache
from volume_metadata.persistent_volume.crd import CRD
from volume_metadata.strategy import ResolveStrategy


class PersistentVolume(Base):

    def __init__(self, strategy=ResolveStrategy.CLIENT, store=None,
                 core_v1_api=None, request_timeout=None):
        self._strategy = strategy
        if self._strategy == ResolveStrategy.STORE:
            if store is None:
                raise ValueError("a volume store is required for the store strategy")
            self.pv = Cache(store)
        else:
            self.pv = CRD(core_v1_api, request_timeout=request_timeout)

    def get(self, volume_name):
        return self.pv.get(volume_name)
