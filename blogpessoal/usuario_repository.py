from blogpessoal.models import Usuario, UsuarioSchema
from blogpessoal.repository import Repository, RepositoryConfig


class UsuarioRepository(Repository[Usuario]):
    def __init__(self, config: RepositoryConfig | None = None):
        super().__init__(
            entity_class=Usuario,
            table_name=UsuarioSchema.table,
            config=config,
        )

    async def find_by_usuario(self, usuario: str) -> Usuario | None:
        """Exact lookup on the login name"""
        return await self.where(UsuarioSchema.usuario, usuario).first()

    async def find_all_by_nome_containing(self, nome: str) -> list[Usuario]:
        return (
            await self.where_contains(UsuarioSchema.nome, nome)
            .order_by(UsuarioSchema.id)
            .get()
        )
