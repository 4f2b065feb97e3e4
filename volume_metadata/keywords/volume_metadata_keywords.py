from volume_metadata.cache_store import Store
from volume_metadata.pvc import get_pvc_host_path_from_client
from volume_metadata.pvc import get_pvc_host_path_from_store
from volume_metadata.pvc import is_pvc_block_from_client
from volume_metadata.pvc import is_pvc_block_from_store
from volume_metadata.pvc import is_shared_pvc_from_client
from volume_metadata.pvc import is_shared_pvc_from_store
from volume_metadata.utility.utility import get_default_namespace
from volume_metadata.utility.utility import get_request_timeout
from volume_metadata.utility.utility import init_k8s_api_client
from volume_metadata.utility.utility import logging


class volume_metadata_keywords:

    def __init__(self, core_api=None):
        self.core_api = core_api if core_api is not None else init_k8s_api_client()
        self.pvc_store = Store()
        self.pv_store = Store()

    def sync_volume_metadata_stores(self):
        logging('Syncing persistentvolumeclaim and persistentvolume stores')
        timeout = get_request_timeout()
        self.pvc_store.sync_from(
            self.core_api.list_persistent_volume_claim_for_all_namespaces,
            _request_timeout=timeout)
        self.pv_store.sync_from(self.core_api.list_persistent_volume,
                                _request_timeout=timeout)

    def is_persistentvolumeclaim_block(self, claim_name, namespace=None,
                                       from_store=False):
        namespace = namespace or get_default_namespace()
        if from_store:
            _, exists, is_block = is_pvc_block_from_store(
                self.pvc_store, namespace, claim_name)
        else:
            _, exists, is_block = is_pvc_block_from_client(
                self.core_api, namespace, claim_name)
        logging(f'Persistentvolumeclaim {namespace}/{claim_name} '
                f'exists={exists} block={is_block}')
        return is_block

    def persistentvolumeclaim_should_exist(self, claim_name, namespace=None):
        namespace = namespace or get_default_namespace()
        _, exists, _ = is_pvc_block_from_client(
            self.core_api, namespace, claim_name)
        assert exists, \
            f"persistentvolumeclaim {namespace}/{claim_name} does not exist"

    def is_persistentvolumeclaim_shared(self, claim_name, namespace=None,
                                        from_store=False):
        namespace = namespace or get_default_namespace()
        if from_store:
            _, is_shared = is_shared_pvc_from_store(
                self.pvc_store, namespace, claim_name)
        else:
            _, is_shared = is_shared_pvc_from_client(
                self.core_api, namespace, claim_name)
        logging(f'Persistentvolumeclaim {namespace}/{claim_name} '
                f'shared={is_shared}')
        return is_shared

    def get_persistentvolumeclaim_host_path(self, claim_name, namespace=None,
                                            from_store=False):
        namespace = namespace or get_default_namespace()
        if from_store:
            path = get_pvc_host_path_from_store(
                self.pvc_store, self.pv_store, namespace, claim_name)
        else:
            path = get_pvc_host_path_from_client(
                self.core_api, namespace, claim_name)
        logging(f'Persistentvolumeclaim {namespace}/{claim_name} '
                f'host path is "{path}"')
        return path
