ACCESS_MODE_RWX = 'ReadWriteMany'
VOLUME_MODE_BLOCK = 'Block'
VOLUME_MODE_FILESYSTEM = 'Filesystem'
CLAIM_PHASE_BOUND = 'Bound'

KIND_PERSISTENT_VOLUME_CLAIM = 'PersistentVolumeClaim'
KIND_PERSISTENT_VOLUME = 'PersistentVolume'

DEFAULT_NAMESPACE = 'default'
DEFAULT_REQUEST_TIMEOUT = 30

CONFIG_FILE_PATH = 'settings.ini'
