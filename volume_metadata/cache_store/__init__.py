from volume_metadata.cache_store.store import Store
from volume_metadata.cache_store.store import object_key
