from volume_metadata.host_path import HostPathResolver
from volume_metadata.persistent_volume import PersistentVolume
from volume_metadata.persistent_volume_claim import PersistentVolumeClaim
from volume_metadata.persistent_volume_claim.predicate import is_pvc_block
from volume_metadata.persistent_volume_claim.predicate import is_pvc_shared
from volume_metadata.strategy import ResolveStrategy


def is_pvc_block_from_store(store, namespace, claim_name):
    """
    Look the claim up in a synced store.

    Returns (pvc, exists, is_block). A missing claim is (None, False, False).
    Raises StoreLookupError when the store lookup fails and
    TypeMismatchError when the stored object is not a claim.
    """
    claims = PersistentVolumeClaim(ResolveStrategy.STORE, store=store)
    return _block_result(*claims.find(claim_name, namespace))


def is_pvc_block_from_client(core_api, namespace, claim_name,
                             request_timeout=None):
    """
    Fetch the claim from the API server.

    Returns (pvc, exists, is_block). NotFound is (None, False, False), any
    other ApiException propagates.
    """
    claims = PersistentVolumeClaim(ResolveStrategy.CLIENT,
                                   core_v1_api=core_api,
                                   request_timeout=request_timeout)
    return _block_result(*claims.find(claim_name, namespace))


def _block_result(pvc, exists):
    if not exists:
        return None, False, False
    return pvc, True, is_pvc_block(pvc)


def is_shared_pvc_from_client(core_api, namespace, claim_name,
                              request_timeout=None):
    # NotFound is not suppressed here, the ApiException reaches the caller
    claims = PersistentVolumeClaim(ResolveStrategy.CLIENT,
                                   core_v1_api=core_api,
                                   request_timeout=request_timeout)
    pvc = claims.get(claim_name, namespace)
    return pvc, is_pvc_shared(pvc)


def is_shared_pvc_from_store(store, namespace, claim_name):
    claims = PersistentVolumeClaim(ResolveStrategy.STORE, store=store)
    pvc = claims.get(claim_name, namespace)
    return pvc, is_pvc_shared(pvc)


def get_pvc_host_path_from_store(pvc_store, pv_store, namespace, claim_name):
    """
    Return the host path of the volume bound to the claim, or "" when the
    claim is not bound or its volume is not a hostPath volume.
    """
    resolver = HostPathResolver(
        PersistentVolumeClaim(ResolveStrategy.STORE, store=pvc_store),
        PersistentVolume(ResolveStrategy.STORE, store=pv_store))
    return resolver.resolve(namespace, claim_name)


def get_pvc_host_path_from_client(core_api, namespace, claim_name,
                                  request_timeout=None):
    resolver = HostPathResolver(
        PersistentVolumeClaim(ResolveStrategy.CLIENT, core_v1_api=core_api,
                              request_timeout=request_timeout),
        PersistentVolume(ResolveStrategy.CLIENT, core_v1_api=core_api,
                         request_timeout=request_timeout))
    return resolver.resolve(namespace, claim_name)
