from volume_metadata.persistent_volume_claim.volume_mode import VolumeMode
from volume_metadata.utility.constant import ACCESS_MODE_RWX


def is_pvc_block(pvc):
    # A claim without volumeMode is not bound to a Block volume, so only an
    # explicit Block on the claim answers yes.
    return VolumeMode.of(pvc) is VolumeMode.BLOCK


def is_pvc_shared(pvc):
    access_modes = pvc.spec.access_modes if pvc.spec else None
    return ACCESS_MODE_RWX in (access_modes or [])
