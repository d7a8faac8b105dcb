"""HTTP endpoints for the /postagens resource"""

from fastapi import APIRouter, Depends, Response, status

from blogpessoal.db_context import transactional
from blogpessoal.dependencies import get_postagem_repository
from blogpessoal.models import Postagem, PostagemCreate, PostagemUpdate
from blogpessoal.postagem_repository import PostagemRepository


def create_router(pool_name: str = "default") -> APIRouter:
    """Build the /postagens router; every handler runs in a transaction on ``pool_name``"""
    router = APIRouter(prefix="/postagens", tags=["postagens"])

    @router.get("", response_model=list[Postagem])
    @transactional(pool_name)
    async def get_all(repository: PostagemRepository = Depends(get_postagem_repository)):
        return await repository.find_all()

    @router.get("/{postagem_id}", response_model=Postagem)
    @transactional(pool_name)
    async def get_by_id(
        postagem_id: int,
        repository: PostagemRepository = Depends(get_postagem_repository),
    ):
        postagem = await repository.find_by_id(postagem_id)
        if postagem is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return postagem

    @router.get("/titulo/{titulo}", response_model=list[Postagem])
    @transactional(pool_name)
    async def get_by_titulo(
        titulo: str,
        repository: PostagemRepository = Depends(get_postagem_repository),
    ):
        return await repository.find_all_by_titulo_containing(titulo)

    @router.post("", response_model=Postagem, status_code=status.HTTP_201_CREATED)
    @transactional(pool_name)
    async def post(
        payload: PostagemCreate,
        repository: PostagemRepository = Depends(get_postagem_repository),
    ):
        return await repository.save(payload.to_entity())

    @router.put("", response_model=Postagem)
    @transactional(pool_name)
    async def put(
        payload: PostagemUpdate,
        repository: PostagemRepository = Depends(get_postagem_repository),
    ):
        postagem = await repository.save(payload.to_entity())
        if postagem is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return postagem

    @router.delete("/{postagem_id}", status_code=status.HTTP_204_NO_CONTENT)
    @transactional(pool_name)
    async def delete(
        postagem_id: int,
        repository: PostagemRepository = Depends(get_postagem_repository),
    ):
        # EntityNotFoundError is answered with 404 by the app handler
        await repository.delete_by_id(postagem_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
