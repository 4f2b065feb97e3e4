from enum import Enum


class ResolveStrategy(Enum):
    STORE = 'store'
    CLIENT = 'client'
