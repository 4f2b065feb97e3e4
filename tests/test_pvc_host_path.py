import pytest

from kubernetes.client.rest import ApiException

from common import HOST_PATH, NAMESPACE
from common import not_found, pv_make, pvc_make

from volume_metadata.cache_store import Store
from volume_metadata.pvc import get_pvc_host_path_from_client
from volume_metadata.pvc import get_pvc_host_path_from_store
from volume_metadata.utility.exceptions import ObjectNotFoundError
from volume_metadata.utility.exceptions import StoreLookupError
from volume_metadata.utility.exceptions import TypeMismatchError


def test_host_path_from_store(pvc_store, pv_store):
    assert get_pvc_host_path_from_store(
        pvc_store, pv_store, NAMESPACE, "c1") == HOST_PATH


def test_non_host_path_volume_from_store(pvc_store):
    pv_store = Store.from_objects([pv_make("v1", nfs_server="nfs.local")])

    assert get_pvc_host_path_from_store(
        pvc_store, pv_store, NAMESPACE, "c1") == ""


def test_pending_claim_skips_volume_lookup(pvc_store):
    # an unsynced volume store would raise if it were consulted
    assert get_pvc_host_path_from_store(
        pvc_store, Store(), NAMESPACE, "c2") == ""


def test_bound_phase_without_volume_name(pv_store):
    pvc_store = Store.from_objects([pvc_make("c1", phase="Bound")])

    assert get_pvc_host_path_from_store(
        pvc_store, pv_store, NAMESPACE, "c1") == ""


def test_volume_name_without_bound_phase(pv_store):
    pvc_store = Store.from_objects(
        [pvc_make("c1", phase="Lost", volume_name="v1")])

    assert get_pvc_host_path_from_store(
        pvc_store, pv_store, NAMESPACE, "c1") == ""


def test_missing_claim_raises(pvc_store, pv_store):
    with pytest.raises(ObjectNotFoundError) as e:
        get_pvc_host_path_from_store(pvc_store, pv_store, NAMESPACE, "c3")
    assert str(e.value) == f"Unable to find PersistentVolumeClaim {NAMESPACE}/c3"


def test_missing_volume_raises(pvc_store):
    pv_store = Store.from_objects([])

    with pytest.raises(ObjectNotFoundError) as e:
        get_pvc_host_path_from_store(pvc_store, pv_store, NAMESPACE, "c1")
    assert str(e.value) == "Unable to find PersistentVolume v1"


def test_claim_store_lookup_error_raises(pv_store):
    with pytest.raises(StoreLookupError):
        get_pvc_host_path_from_store(Store(), pv_store, NAMESPACE, "c1")


def test_wrong_kind_in_volume_store_raises(pvc_store):
    pv_store = Store(key_func=lambda obj: obj.metadata.name)
    pv_store.replace([pvc_make("v1")])

    with pytest.raises(TypeMismatchError):
        get_pvc_host_path_from_store(pvc_store, pv_store, NAMESPACE, "c1")


def test_wrong_kind_in_claim_store_raises(pv_store):
    pvc_store = Store(
        key_func=lambda obj: f"{NAMESPACE}/{obj.metadata.name}")
    pvc_store.replace([pv_make("c1", host_path=HOST_PATH)])

    with pytest.raises(TypeMismatchError):
        get_pvc_host_path_from_store(pvc_store, pv_store, NAMESPACE, "c1")


def test_host_path_from_client(core_api, bound_pvc):
    core_api.read_namespaced_persistent_volume_claim.return_value = bound_pvc
    core_api.read_persistent_volume.return_value = \
        pv_make("v1", host_path=HOST_PATH)

    assert get_pvc_host_path_from_client(
        core_api, NAMESPACE, "c1") == HOST_PATH
    core_api.read_persistent_volume.assert_called_once_with(
        name="v1", _request_timeout=30.0)


def test_pending_claim_from_client(core_api):
    core_api.read_namespaced_persistent_volume_claim.return_value = \
        pvc_make("c2")

    assert get_pvc_host_path_from_client(core_api, NAMESPACE, "c2") == ""
    core_api.read_persistent_volume.assert_not_called()


def test_missing_volume_from_client_raises(core_api, bound_pvc):
    core_api.read_namespaced_persistent_volume_claim.return_value = bound_pvc
    core_api.read_persistent_volume.side_effect = not_found()

    with pytest.raises(ApiException) as e:
        get_pvc_host_path_from_client(core_api, NAMESPACE, "c1")
    assert e.value.status == 404


def test_unbound_claim_without_metadata():
    pvc = pvc_make("c1")
    pvc.metadata = None
    pvc_store = Store(key_func=lambda obj: f"{NAMESPACE}/c1")
    pvc_store.replace([pvc])

    assert get_pvc_host_path_from_store(
        pvc_store, Store.from_objects([]), NAMESPACE, "c1") == ""


def test_volume_store_lookup_error_raises(pvc_store):
    with pytest.raises(StoreLookupError):
        get_pvc_host_path_from_store(pvc_store, Store(), NAMESPACE, "c1")
