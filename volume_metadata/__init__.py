from volume_metadata.cache_store import Store
from volume_metadata.persistent_volume_claim.predicate import is_pvc_block
from volume_metadata.persistent_volume_claim.predicate import is_pvc_shared
from volume_metadata.pvc import get_pvc_host_path_from_client
from volume_metadata.pvc import get_pvc_host_path_from_store
from volume_metadata.pvc import is_pvc_block_from_client
from volume_metadata.pvc import is_pvc_block_from_store
from volume_metadata.pvc import is_shared_pvc_from_client
from volume_metadata.pvc import is_shared_pvc_from_store
from volume_metadata.strategy import ResolveStrategy
