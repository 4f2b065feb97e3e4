from volume_metadata.persistent_volume.persistent_volume import PersistentVolume
