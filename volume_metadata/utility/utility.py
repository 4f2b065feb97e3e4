import os

from robot.api import logger

from kubernetes import client
from kubernetes import config

from volume_metadata.utility.constant import DEFAULT_NAMESPACE
from volume_metadata.utility.constant import DEFAULT_REQUEST_TIMEOUT
from volume_metadata.utility.settings import get_setting


def logging(msg, also_report=False):
    if also_report:
        logger.info(msg, also_console=True)
    else:
        logger.console(msg)


def get_request_timeout(timeout=None):
    if timeout is None:
        timeout = get_setting("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)
    timeout = float(timeout)
    if timeout <= 0:
        raise ValueError(f"request timeout must be positive, got {timeout}")
    return timeout


def get_default_namespace():
    return get_setting("DEFAULT_NAMESPACE", DEFAULT_NAMESPACE)


def init_k8s_api_client():
    if os.getenv('KUBECONFIG') or not os.getenv('KUBERNETES_SERVICE_HOST'):
        # for develop or debug, run in local environment
        config.load_kube_config()
        logging("Initialized out-of-cluster k8s api client")
    else:
        config.load_incluster_config()
        logging("Initialized in-cluster k8s api client")
    return client.CoreV1Api()


def meta_namespace_key(namespace, name):
    if namespace:
        return f"{namespace}/{name}"
    return name


def split_meta_namespace_key(key):
    parts = key.split('/')
    if len(parts) == 1:
        return "", parts[0]
    if len(parts) == 2 and parts[0] and parts[1]:
        return parts[0], parts[1]
    raise ValueError(f"unexpected key format: {key!r}")


def is_not_found(e):
    return getattr(e, 'status', None) == 404
