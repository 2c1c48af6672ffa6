"""Domain-specific exceptions — framework-independent."""


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class DuplicateUsernameError(DuplicateEntityError):
    """Raised by registration when the username is already taken."""

    def __init__(self, username: str):
        super().__init__("User", "username", username)


class InvalidCredentialsError(Exception):
    """Raised when no user matches the given username and password."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Invalid username or password for '{username}'")


class UnauthenticatedError(Exception):
    """Raised when a record is created while nobody is signed in."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Sign in required to {action}")


class StorageWriteError(Exception):
    """Raised when the key-value substrate rejects a write.

    Wraps whatever the adapter raised (quota, I/O, database errors).
    """

    def __init__(self, key: str, cause: Exception):
        self.key = key
        self.cause = cause
        super().__init__(f"Could not save '{key}': {cause}")


class InvalidRegistrationError(ValueError):
    """Raised when registration data fails schema validation."""

    def __init__(self, username: str, reason: str):
        self.username = username
        self.reason = reason
        super().__init__(f"Cannot register '{username}': {reason}")
