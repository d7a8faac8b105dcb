"""HTTP endpoints for the /temas resource; every theme is sent with its posts"""

from fastapi import APIRouter, Depends, Response, status

from blogpessoal.db_context import transactional
from blogpessoal.dependencies import get_tema_repository
from blogpessoal.models import TemaComPostagens, TemaCreate, TemaUpdate
from blogpessoal.tema_repository import TemaRepository


def create_router(pool_name: str = "default") -> APIRouter:
    """Build the /temas router; every handler runs in a transaction on ``pool_name``"""
    router = APIRouter(prefix="/temas", tags=["temas"])

    @router.get("", response_model=list[TemaComPostagens])
    @transactional(pool_name)
    async def get_all(repository: TemaRepository = Depends(get_tema_repository)):
        return await repository.with_postagens(await repository.find_all())

    @router.get("/{tema_id}", response_model=TemaComPostagens)
    @transactional(pool_name)
    async def get_by_id(
        tema_id: int, repository: TemaRepository = Depends(get_tema_repository)
    ):
        tema = await repository.find_with_postagens(tema_id)
        if tema is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        return tema

    @router.get("/descricao/{descricao}", response_model=list[TemaComPostagens])
    @transactional(pool_name)
    async def get_by_descricao(
        descricao: str, repository: TemaRepository = Depends(get_tema_repository)
    ):
        temas = await repository.find_all_by_descricao_containing(descricao)
        return await repository.with_postagens(temas)

    @router.post("", response_model=TemaComPostagens, status_code=status.HTTP_201_CREATED)
    @transactional(pool_name)
    async def post(
        payload: TemaCreate, repository: TemaRepository = Depends(get_tema_repository)
    ):
        tema = await repository.save(payload.to_entity())
        return TemaComPostagens.of(tema, [])

    @router.put("", response_model=TemaComPostagens)
    @transactional(pool_name)
    async def put(
        payload: TemaUpdate, repository: TemaRepository = Depends(get_tema_repository)
    ):
        tema = await repository.save(payload.to_entity())
        if tema is None:
            return Response(status_code=status.HTTP_404_NOT_FOUND)
        (tema_com_postagens,) = await repository.with_postagens([tema])
        return tema_com_postagens

    @router.delete("/{tema_id}", status_code=status.HTTP_204_NO_CONTENT)
    @transactional(pool_name)
    async def delete(
        tema_id: int, repository: TemaRepository = Depends(get_tema_repository)
    ):
        # Posts of the theme go with it; an unknown id raises EntityNotFoundError (404)
        await repository.delete_by_id(tema_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
