from kubernetes import client
from kubernetes.client.rest import ApiException

from volume_metadata.persistent_volume_claim.base import Base
from volume_metadata.utility.utility import get_request_timeout
from volume_metadata.utility.utility import is_not_found


class CRD(Base):

    def __init__(self, core_v1_api=None, request_timeout=None):
        self.core_v1_api = core_v1_api or client.CoreV1Api()
        self.request_timeout = get_request_timeout(request_timeout)

    def get(self, claim_name, claim_namespace):
        return self.core_v1_api.read_namespaced_persistent_volume_claim(
            name=claim_name,
            namespace=claim_namespace,
            _request_timeout=self.request_timeout
        )

    def find(self, claim_name, claim_namespace):
        try:
            return self.get(claim_name, claim_namespace), True
        except ApiException as e:
            if is_not_found(e):
                return None, False
            raise
