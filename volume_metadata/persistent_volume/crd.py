from kubernetes import client

from volume_metadata.persistent_volume.base import Base
from volume_metadata.utility.utility import get_request_timeout


class CRD(Base):

    def __init__(self, core_v1_api=None, request_timeout=None):
        self.core_v1_api = core_v1_api or client.CoreV1Api()
        self.request_timeout = get_request_timeout(request_timeout)

    def get(self, volume_name):
        return self.core_v1_api.read_persistent_volume(
            name=volume_name,
            _request_timeout=self.request_timeout
        )
