"""Request-scoped identity: who is making the current call and with which authority."""

from dataclasses import dataclass

from bookreviewhub.models.user import Role

AUTHORITY_PREFIX = "ROLE_"


def authority_for(role: Role) -> str:
    """Authority string derived from a role, e.g. ROLE_ADMIN."""
    return f"{AUTHORITY_PREFIX}{role.value}"


@dataclass(frozen=True)
class IdentityContext:
    """Authenticated caller (user id, username, role)."""

    user_id: int
    username: str
    role: Role

    @property
    def authorities(self) -> tuple[str, ...]:
        return (authority_for(self.role),)

    def has_role(self, *roles: Role) -> bool:
        return self.role in roles


class SecurityContext:
    """
    Holds at most one authenticated identity for a single request.

    One instance is attached to each request (request.state.security) and
    handed explicitly to whatever needs to read or establish the identity.
    """

    def __init__(self) -> None:
        self._identity: IdentityContext | None = None

    @property
    def identity(self) -> IdentityContext | None:
        return self._identity

    @property
    def is_authenticated(self) -> bool:
        return self._identity is not None

    def authenticate(self, identity: IdentityContext) -> None:
        self._identity = identity
