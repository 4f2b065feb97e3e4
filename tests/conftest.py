import pytest

from unittest import mock

from kubernetes import client as k8sclient

from common import HOST_PATH
from common import pv_make, pvc_make

from volume_metadata.cache_store import Store
from volume_metadata.utility import settings


@pytest.fixture(autouse=True)
def settings_env(monkeypatch, tmp_path):
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
    monkeypatch.delenv("DEFAULT_NAMESPACE", raising=False)
    monkeypatch.setenv("VOLUME_METADATA_CONFIG",
                       str(tmp_path / "settings.ini"))
    monkeypatch.setattr(settings, "_settings", {})


@pytest.fixture
def core_api():
    return mock.create_autospec(k8sclient.CoreV1Api, instance=True)


@pytest.fixture
def bound_pvc():
    return pvc_make("c1", phase="Bound", volume_name="v1")


@pytest.fixture
def pvc_store(bound_pvc):
    return Store.from_objects([
        bound_pvc,
        pvc_make("c2", phase="Pending"),
    ])


@pytest.fixture
def pv_store():
    return Store.from_objects([pv_make("v1", host_path=HOST_PATH)])
