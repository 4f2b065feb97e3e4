from volume_metadata.host_path.host_path import HostPathResolver
