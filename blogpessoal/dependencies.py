"""FastAPI providers for repositories and services (overridable in tests)"""

from fastapi import Depends

from blogpessoal.config import get_settings
from blogpessoal.postagem_repository import PostagemRepository
from blogpessoal.security import PasswordHasher, UserDetailsService
from blogpessoal.tema_repository import TemaRepository
from blogpessoal.usuario_repository import UsuarioRepository


def get_postagem_repository() -> PostagemRepository:
    return PostagemRepository()


def get_tema_repository(
    postagem_repository: PostagemRepository = Depends(get_postagem_repository),
) -> TemaRepository:
    return TemaRepository(postagem_repository)


def get_usuario_repository() -> UsuarioRepository:
    return UsuarioRepository()


def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(get_settings().password_hash_iterations)


def get_user_details_service(
    repository: UsuarioRepository = Depends(get_usuario_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> UserDetailsService:
    return UserDetailsService(repository, hasher)
