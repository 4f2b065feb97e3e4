from enum import Enum

from volume_metadata.utility.constant import VOLUME_MODE_BLOCK
from volume_metadata.utility.constant import VOLUME_MODE_FILESYSTEM


class VolumeMode(Enum):
    BLOCK = VOLUME_MODE_BLOCK
    FILESYSTEM = VOLUME_MODE_FILESYSTEM
    UNSPECIFIED = None

    @classmethod
    def of(cls, pvc):
        mode = pvc.spec.volume_mode if pvc.spec else None
        if mode == VOLUME_MODE_BLOCK:
            return cls.BLOCK
        if mode == VOLUME_MODE_FILESYSTEM:
            return cls.FILESYSTEM
        return cls.UNSPECIFIED
