class MTError(Exception):
    """Base class for every outcome a namespace node signals by raising."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class MTAlreadyExistsError(MTError, FileExistsError):
    """Raised when a name is already taken in the mapping being created into. Subclass of FileExistsError."""
    def __init__(self, name: str, kind: str = "entry") -> None:
        self.kind = kind
        super().__init__(name, f"MT {kind} already exists: '{name}'")


class MTNotFoundError(MTError, FileNotFoundError):
    """Raised when a name is absent from the mapping being looked up. Subclass of FileNotFoundError."""
    def __init__(self, name: str, kind: str = "entry") -> None:
        self.kind = kind
        super().__init__(name, f"MT {kind} not found: '{name}'")


class MTDanglingParentError(MTError, LookupError):
    """Raised when a parent reference no longer resolves to a live node."""
    def __init__(self, name: str) -> None:
        super().__init__(name, f"MT parent of '{name}' no longer exists.")
