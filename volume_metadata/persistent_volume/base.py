from abc import ABC, abstractmethod


class Base(ABC):

    @abstractmethod
    def get(self, volume_name):
        return NotImplemented

    def get_host_path(self, pv):
        if pv.spec and pv.spec.host_path:
            return pv.spec.host_path.path
        return ""
