class VolumeMetadataError(Exception):
    pass


class ObjectNotFoundError(VolumeMetadataError, LookupError):

    def __init__(self, kind, key):
        super().__init__(f"Unable to find {kind} {key}")
        self.kind = kind
        self.key = key


class StoreLookupError(VolumeMetadataError, LookupError):
    pass


class TypeMismatchError(VolumeMetadataError, TypeError):

    def __init__(self, expected, obj):
        super().__init__(f"this is not a {expected}! {obj!r}")
        self.expected = expected
        self.obj = obj
