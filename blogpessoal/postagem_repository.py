from blogpessoal.features import UpdateTimestampFeature
from blogpessoal.models import Postagem, PostagemSchema
from blogpessoal.repository import Repository, RepositoryConfig


class PostagemRepository(Repository[Postagem]):
    def __init__(self, config: RepositoryConfig | None = None):
        # data is recomputed on every write
        config = config or RepositoryConfig(
            features=[UpdateTimestampFeature(PostagemSchema.data.column)]
        )
        super().__init__(
            entity_class=Postagem,
            table_name=PostagemSchema.table,
            config=config,
        )

    async def find_all_by_titulo_containing(self, titulo: str) -> list[Postagem]:
        """Posts whose title contains `titulo`, ignoring case"""
        return (
            await self.where_contains(PostagemSchema.titulo, titulo)
            .order_by(PostagemSchema.id)
            .get()
        )

    async def find_all_by_tema_id(self, tema_id: int) -> list[Postagem]:
        return await self.where(PostagemSchema.tema_id, tema_id).order_by(PostagemSchema.id).get()

    async def delete_all_by_tema_id(self, tema_id: int) -> int:
        """Remove every post of a theme; returns how many were deleted"""
        return await self.where(PostagemSchema.tema_id, tema_id).delete()

    async def find_all_by_tema_ids(self, tema_ids: list[int]) -> list[Postagem]:
        """Posts of several themes in one query (tema_id = ANY($1))"""
        if not tema_ids:
            return []
        return (
            await self.where_any(PostagemSchema.tema_id, tema_ids)
            .order_by(PostagemSchema.id)
            .get()
        )
