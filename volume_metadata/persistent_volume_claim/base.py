from abc import ABC, abstractmethod


class Base(ABC):

    @abstractmethod
    def get(self, claim_name, claim_namespace):
        return NotImplemented

    @abstractmethod
    def find(self, claim_name, claim_namespace):
        return NotImplemented
