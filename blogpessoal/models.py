"""Blog entities, their table definitions and the request payloads"""

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, StringConstraints

from blogpessoal.entities import BaseEntity, Column, SchemaBase


def _not_blank(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be blank")
    return value


Titulo = Annotated[
    str, StringConstraints(min_length=3, max_length=255), AfterValidator(_not_blank)
]
Texto = Annotated[
    str, StringConstraints(min_length=5, max_length=1000), AfterValidator(_not_blank)
]
Descricao = Annotated[
    str, StringConstraints(min_length=3, max_length=255), AfterValidator(_not_blank)
]
Nome = Annotated[str, StringConstraints(max_length=255), AfterValidator(_not_blank)]
Username = Annotated[
    str, StringConstraints(min_length=1, max_length=255), AfterValidator(_not_blank)
]


# ============================================================
# TABLES
# ============================================================


class PostagemSchema(SchemaBase):
    table = "tb_postagens"
    id = Column[int]("id")
    titulo = Column[str]("titulo")
    texto = Column[str]("texto")
    data = Column[datetime]("data")
    tema_id = Column[int]("tema_id")


class TemaSchema(SchemaBase):
    table = "tb_temas"
    id = Column[int]("id")
    descricao = Column[str]("descricao")


class UsuarioSchema(SchemaBase):
    table = "tb_usuarios"
    id = Column[int]("id")
    nome = Column[str]("nome")
    usuario = Column[str]("usuario")
    senha = Column[str]("senha")


# ============================================================
# ENTITIES
# ============================================================


class Postagem(BaseEntity):
    titulo: Titulo
    texto: Texto
    # Stamped by the repository on every write
    data: datetime | None = None
    tema_id: int | None = None


class Tema(BaseEntity):
    descricao: Descricao


class PostagemDoTema(BaseEntity):
    """A post nested in its theme; the owning theme is implied"""

    titulo: str
    texto: str
    data: datetime | None = None


class TemaComPostagens(Tema):
    """A theme together with the posts it owns"""

    postagem: list[PostagemDoTema] = Field(default_factory=list)

    @classmethod
    def of(cls, tema: Tema, postagens: list[Postagem]) -> "TemaComPostagens":
        return cls(
            **tema.model_dump(),
            postagem=[PostagemDoTema(**p.model_dump()) for p in postagens],
        )


class Usuario(BaseEntity):
    nome: Nome
    usuario: Username
    # PBKDF2 hash, never the plain password
    senha: str


# ============================================================
# REQUEST / RESPONSE PAYLOADS
# ============================================================


class PostagemCreate(BaseModel):
    """Body of POST /postagens; id and data sent by the client are ignored"""

    titulo: Titulo
    texto: Texto
    tema_id: int | None = None

    def to_entity(self) -> Postagem:
        return Postagem(**self.model_dump())


class PostagemUpdate(PostagemCreate):
    """Body of PUT /postagens"""

    id: int


class TemaCreate(BaseModel):
    descricao: Descricao

    def to_entity(self) -> Tema:
        return Tema(**self.model_dump())


class TemaUpdate(TemaCreate):
    id: int


class UsuarioCreate(BaseModel):
    nome: Nome
    usuario: Username
    senha: str = Field(min_length=8, max_length=255)


class UsuarioOut(BaseModel):
    """A user as exposed over HTTP (no credential)"""

    id: int
    nome: str
    usuario: str
