from volume_metadata.utility.constant import CLAIM_PHASE_BOUND
from volume_metadata.utility.utility import logging


class HostPathResolver():
    """
    Resolves the node path behind a claim in four stages:

        locate claim -> bound volume name -> locate volume -> host path

    Each stage returns the value handed to the next one, returns None when
    the answer is an empty path, or raises when the lookup fails. A missing
    claim or volume raises, an unbound claim or a volume of another source
    kind resolves to "".
    """

    def __init__(self, claims, volumes):
        self.claims = claims
        self.volumes = volumes

    def resolve(self, namespace, claim_name):
        stages = (
            lambda _: self.locate_claim(namespace, claim_name),
            lambda pvc: self.bound_volume_name(pvc, namespace, claim_name),
            self.locate_volume,
            self.host_path,
        )
        value = None
        for stage in stages:
            value = stage(value)
            if value is None:
                return ""
        return value

    def locate_claim(self, namespace, claim_name):
        return self.claims.get(claim_name, namespace)

    def bound_volume_name(self, pvc, namespace, claim_name):
        phase = pvc.status.phase if pvc.status else None
        volume_name = pvc.spec.volume_name if pvc.spec else None
        if phase != CLAIM_PHASE_BOUND or not volume_name:
            logging(f"PVC {namespace}/{claim_name} is "
                    f"not bound (phase={phase}), no host path")
            return None
        return volume_name

    def locate_volume(self, volume_name):
        return self.volumes.get(volume_name)

    def host_path(self, pv):
        return self.volumes.get_host_path(pv) or None
