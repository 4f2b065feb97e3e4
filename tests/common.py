from kubernetes import client as k8sclient
from kubernetes.client.rest import ApiException

NAMESPACE = "ns"
HOST_PATH = "/data/x"


def pvc_make(name, namespace=NAMESPACE, volume_mode=None,
             access_modes=None, phase="Pending", volume_name=None):
    return k8sclient.V1PersistentVolumeClaim(
        metadata=k8sclient.V1ObjectMeta(name=name, namespace=namespace),
        spec=k8sclient.V1PersistentVolumeClaimSpec(
            volume_mode=volume_mode,
            access_modes=access_modes or ["ReadWriteOnce"],
            volume_name=volume_name),
        status=k8sclient.V1PersistentVolumeClaimStatus(phase=phase))


def pv_make(name, host_path=None, nfs_server=None):
    spec = k8sclient.V1PersistentVolumeSpec(capacity={"storage": "1Gi"})
    if host_path is not None:
        spec.host_path = k8sclient.V1HostPathVolumeSource(path=host_path)
    if nfs_server is not None:
        spec.nfs = k8sclient.V1NFSVolumeSource(server=nfs_server,
                                               path="/export")
    return k8sclient.V1PersistentVolume(
        metadata=k8sclient.V1ObjectMeta(name=name), spec=spec)


def not_found():
    return ApiException(status=404, reason="Not Found")
