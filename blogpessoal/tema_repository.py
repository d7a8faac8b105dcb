from collections import defaultdict

from blogpessoal.models import Postagem, Tema, TemaComPostagens, TemaSchema
from blogpessoal.postagem_repository import PostagemRepository
from blogpessoal.repository import Repository, RepositoryConfig


class TemaRepository(Repository[Tema]):
    def __init__(
        self,
        postagem_repository: PostagemRepository | None = None,
        config: RepositoryConfig | None = None,
    ):
        super().__init__(
            entity_class=Tema,
            table_name=TemaSchema.table,
            config=config,
        )
        self.postagem_repository = postagem_repository or PostagemRepository()

    async def find_all_by_descricao_containing(self, descricao: str) -> list[Tema]:
        """Themes whose description contains `descricao`, ignoring case"""
        return (
            await self.where_contains(TemaSchema.descricao, descricao)
            .order_by(TemaSchema.id)
            .get()
        )

    async def find_with_postagens(self, tema_id: int) -> TemaComPostagens | None:
        """The theme and the posts it owns, or None if the id is unknown"""
        tema = await self.find_by_id(tema_id)
        if tema is None:
            return None
        postagens = await self.postagem_repository.find_all_by_tema_id(tema_id)
        return TemaComPostagens.of(tema, postagens)

    async def with_postagens(self, temas: list[Tema]) -> list[TemaComPostagens]:
        """Attach to each theme its posts, loaded with a single query"""
        postagens = await self.postagem_repository.find_all_by_tema_ids(
            [tema.id for tema in temas]
        )
        por_tema: dict[int, list[Postagem]] = defaultdict(list)
        for postagem in postagens:
            por_tema[postagem.tema_id].append(postagem)
        return [TemaComPostagens.of(tema, por_tema[tema.id]) for tema in temas]

    async def delete(self, entity_id: int | None = None) -> bool | int:
        """Deleting a theme removes its posts first (same transaction)"""
        if entity_id is not None:
            await self.postagem_repository.delete_all_by_tema_id(entity_id)
        return await super().delete(entity_id)
