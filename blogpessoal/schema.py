"""DDL for the blog tables (PostgreSQL)."""

import logging

import asyncpg

logger = logging.getLogger(__name__)

TEMAS_TABLE = """
CREATE TABLE IF NOT EXISTS tb_temas (
    id          SERIAL PRIMARY KEY,
    descricao   VARCHAR(255) NOT NULL
        CHECK (char_length(descricao) >= 3)
);
"""

POSTAGENS_TABLE = """
CREATE TABLE IF NOT EXISTS tb_postagens (
    id          SERIAL PRIMARY KEY,
    titulo      VARCHAR(255)  NOT NULL
        CHECK (char_length(titulo) >= 3),
    texto       VARCHAR(1000) NOT NULL
        CHECK (char_length(texto) >= 5),
    data        TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW(),
    tema_id     INTEGER REFERENCES tb_temas (id) ON DELETE CASCADE
);
CREATE INDEX IF NOT EXISTS idx_postagens_tema_id ON tb_postagens (tema_id);
"""

USUARIOS_TABLE = """
CREATE TABLE IF NOT EXISTS tb_usuarios (
    id          SERIAL PRIMARY KEY,
    nome        VARCHAR(255) NOT NULL,
    usuario     VARCHAR(255) NOT NULL,
    senha       VARCHAR(255) NOT NULL,

    CONSTRAINT uq_usuarios_usuario UNIQUE (usuario)
);
"""

ALL_TABLES = [TEMAS_TABLE, POSTAGENS_TABLE, USUARIOS_TABLE]

# Children first
TABLE_NAMES = ["tb_postagens", "tb_temas", "tb_usuarios"]


async def create_schema(pool: asyncpg.Pool) -> None:
    """Create every table and index; safe to run repeatedly."""
    async with pool.acquire() as conn:
        for ddl in ALL_TABLES:
            await conn.execute(ddl)
    logger.info("Schema ready: %s", ", ".join(TABLE_NAMES))


async def truncate_all(pool: asyncpg.Pool) -> None:
    """Empty every table and restart the id sequences."""
    async with pool.acquire() as conn:
        await conn.execute(
            f"TRUNCATE TABLE {', '.join(TABLE_NAMES)} RESTART IDENTITY CASCADE"
        )
