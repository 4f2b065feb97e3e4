from volume_metadata.persistent_volume_claim.persistent_volume_claim import PersistentVolumeClaim
