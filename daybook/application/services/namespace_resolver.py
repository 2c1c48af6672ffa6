"""Per-user key namespacing for the shared key-value substrate."""

from daybook.application.interfaces import KeyNamespace

GUEST_SCOPE = "guest"


class NamespaceResolver(KeyNamespace):
    """Maps a logical collection name to the substrate key of one user.

    ``resolve`` is a pure function of (user id, collection name); while
    nobody is signed in the guest scope stands in for the user id.
    """

    def __init__(self, guest_scope: str = GUEST_SCOPE):
        self._guest_scope = guest_scope

    def resolve(self, collection: str, user_id: str | None) -> str:
        return f"{user_id or self._guest_scope}_{collection}"
