"""
Authentication adapter.

Bridges a persisted Usuario into the credential shape the HTTP Basic
dependency compares against. Token issuance and sessions are not handled
here.

Usage:
    service = UserDetailsService(UsuarioRepository())
    details = await service.load_user_by_username("maria@email.com")
    if hasher.verify("plain password", details.password):
        ...
"""

import base64
import hashlib
import logging
import secrets
from dataclasses import dataclass
from typing import Protocol

from blogpessoal.exceptions import UsernameNotFoundError
from blogpessoal.models import Usuario

logger = logging.getLogger(__name__)


class PasswordHasher:
    """
    PBKDF2-SHA256 hasher.

    Hash format: pbkdf2_sha256$iterations$salt$hash
    """

    algorithm = "pbkdf2_sha256"
    iterations = 600_000

    def __init__(self, iterations: int | None = None) -> None:
        if iterations is not None:
            self.iterations = iterations

    def _derive(self, password: str, salt: str, iterations: int) -> str:
        digest = hashlib.pbkdf2_hmac(
            "sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations
        )
        return base64.b64encode(digest).decode("ascii")

    def hash(self, password: str) -> str:
        salt = secrets.token_hex(16)
        hash_b64 = self._derive(password, salt, self.iterations)
        return f"{self.algorithm}${self.iterations}${salt}${hash_b64}"

    def verify(self, password: str, hashed: str) -> bool:
        try:
            algorithm, iterations_str, salt, stored_hash = hashed.split("$")
            if algorithm != self.algorithm:
                return False
            new_hash = self._derive(password, salt, int(iterations_str))
        except ValueError:
            return False
        return secrets.compare_digest(stored_hash, new_hash)


@dataclass(frozen=True)
class UserDetails:
    """What the authentication layer needs to check a login"""

    username: str
    password: str
    nome: str
    id: int | None = None

    @classmethod
    def from_usuario(cls, usuario: Usuario) -> "UserDetails":
        return cls(
            username=usuario.usuario,
            password=usuario.senha,
            nome=usuario.nome,
            id=usuario.id,
        )


class UsuarioLookup(Protocol):
    async def find_by_usuario(self, usuario: str) -> Usuario | None: ...


class UserDetailsService:
    def __init__(self, repository: UsuarioLookup, hasher: PasswordHasher | None = None):
        self.repository = repository
        self.hasher = hasher or PasswordHasher()

    async def load_user_by_username(self, username: str) -> UserDetails:
        """Raises UsernameNotFoundError when nobody is registered under `username`"""
        usuario = await self.repository.find_by_usuario(username)
        if usuario is None:
            raise UsernameNotFoundError(username)
        return UserDetails.from_usuario(usuario)

    async def authenticate(self, username: str, password: str) -> UserDetails | None:
        """The user's details if the password matches, otherwise None"""
        try:
            details = await self.load_user_by_username(username)
        except UsernameNotFoundError:
            logger.warning("Login attempt for unknown user %r", username)
            return None
        if not self.hasher.verify(password, details.password):
            logger.warning("Wrong password for user %r", username)
            return None
        return details
