"""HTTP endpoints for /usuarios: registration and HTTP Basic login check"""

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from blogpessoal.db_context import DatabaseManager, transactional
from blogpessoal.dependencies import (
    get_password_hasher,
    get_user_details_service,
    get_usuario_repository,
)
from blogpessoal.models import Usuario, UsuarioCreate, UsuarioOut
from blogpessoal.security import PasswordHasher, UserDetails, UserDetailsService
from blogpessoal.usuario_repository import UsuarioRepository

basic_auth = HTTPBasic()


def create_router(pool_name: str = "default") -> APIRouter:
    """Build the /usuarios router; database work runs on ``pool_name``"""
    router = APIRouter(prefix="/usuarios", tags=["usuarios"])

    async def authenticated_user(
        credentials: HTTPBasicCredentials = Depends(basic_auth),
        service: UserDetailsService = Depends(get_user_details_service),
    ) -> UserDetails:
        """Resolve the Basic credentials to a user or answer 401"""
        async with DatabaseManager.transaction(pool_name):
            details = await service.authenticate(credentials.username, credentials.password)
        if details is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Usuário ou senha inválidos",
                headers={"WWW-Authenticate": "Basic"},
            )
        return details

    @router.post("/cadastrar", response_model=UsuarioOut, status_code=status.HTTP_201_CREATED)
    @transactional(pool_name)
    async def cadastrar(
        payload: UsuarioCreate,
        repository: UsuarioRepository = Depends(get_usuario_repository),
        hasher: PasswordHasher = Depends(get_password_hasher),
    ):
        if await repository.find_by_usuario(payload.usuario) is not None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Usuário já existe"
            )
        usuario = Usuario(
            nome=payload.nome,
            usuario=payload.usuario,
            senha=hasher.hash(payload.senha),
        )
        return await repository.save(usuario)

    @router.get("/me", response_model=UsuarioOut)
    async def me(user: UserDetails = Depends(authenticated_user)):
        return UsuarioOut(id=user.id, nome=user.nome, usuario=user.username)

    @router.get("/nome/{nome}", response_model=list[UsuarioOut])
    @transactional(pool_name)
    async def get_by_nome(
        nome: str, repository: UsuarioRepository = Depends(get_usuario_repository)
    ):
        return await repository.find_all_by_nome_containing(nome)

    return router
