class NormalizeError(Exception):
    """Base class for every failure that aborts a normalization run."""


class InvalidArgument(NormalizeError):
    pass


class InvalidArgumentCount(InvalidArgument):
    pass


class FileOpenError(NormalizeError):
    pass


class FileWriteError(FileOpenError):
    pass


class UnknownAttribute(NormalizeError):
    def __init__(self, name: str):
        super().__init__(f"Unknown attribute: {name}")
        self.name = name


class DegenerateRange(NormalizeError):
    def __init__(self, name: str, value: float):
        super().__init__(
            f"Attribute {name} has min == max ({value}); cannot rescale"
        )
        self.name = name
        self.value = value


class CapacityExceeded(NormalizeError):
    pass


class InputTooLarge(CapacityExceeded):
    pass


class EmptyDataset(NormalizeError):
    pass


class MalformedData(NormalizeError):
    pass
