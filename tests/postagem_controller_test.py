"""HTTP contract of /postagens"""

from datetime import datetime

import pytest

from blogpessoal.db_context import DatabaseManager
from blogpessoal.postagem_repository import PostagemRepository


async def count_postagens() -> int:
    async with DatabaseManager.transaction():
        return len(await PostagemRepository().find_all())


async def criar(client, titulo="Hello World", texto="Minha primeira postagem", **extra):
    response = await client.post("/postagens", json={"titulo": titulo, "texto": texto, **extra})
    assert response.status_code == 201
    return response.json()


class TestPostagemController:
    @pytest.mark.asyncio
    async def test_get_all_empty(self, client):
        response = await client.get("/postagens")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_post_then_get_by_id(self, client):
        created = await criar(client)

        assert created["id"] is not None
        assert created["data"] is not None

        response = await client.get(f"/postagens/{created['id']}")
        assert response.status_code == 200
        body = response.json()
        assert body["titulo"] == "Hello World"
        assert body["texto"] == "Minha primeira postagem"
        assert body["id"] == created["id"]
        assert body["data"] is not None

    @pytest.mark.asyncio
    async def test_post_ignores_client_id_and_data(self, client):
        created = await criar(client, id=500, data="1999-01-01T00:00:00Z")

        assert created["id"] != 500
        assert not created["data"].startswith("1999")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("titulo", ["", "ab", "   "])
    async def test_post_invalid_titulo_is_400(self, client, titulo):
        response = await client.post(
            "/postagens", json={"titulo": titulo, "texto": "Texto válido"}
        )

        assert response.status_code == 400
        assert await count_postagens() == 0

    @pytest.mark.asyncio
    async def test_post_missing_texto_is_400(self, client):
        response = await client.post("/postagens", json={"titulo": "Título"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_post_unknown_tema_is_400(self, client):
        response = await client.post(
            "/postagens", json={"titulo": "Título", "texto": "Texto válido", "tema_id": 12345}
        )

        assert response.status_code == 400
        assert await count_postagens() == 0

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(self, client):
        response = await client.get("/postagens/999")

        assert response.status_code == 404
        assert response.content == b""

    @pytest.mark.asyncio
    async def test_get_by_titulo_case_insensitive(self, client):
        await criar(client, titulo="Hello World")
        await criar(client, titulo="Outro assunto")

        response = await client.get("/postagens/titulo/hello")

        assert response.status_code == 200
        assert [p["titulo"] for p in response.json()] == ["Hello World"]

    @pytest.mark.asyncio
    async def test_put_updates(self, client):
        created = await criar(client)

        response = await client.put(
            "/postagens",
            json={"id": created["id"], "titulo": "Título novo", "texto": "Texto atualizado"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["titulo"] == "Título novo"
        assert datetime.fromisoformat(body["data"]) >= datetime.fromisoformat(created["data"])

    @pytest.mark.asyncio
    async def test_put_unknown_id_is_404(self, client):
        created = await criar(client)

        response = await client.put(
            "/postagens", json={"id": 9999, "titulo": "Título novo", "texto": "Texto novo"}
        )

        assert response.status_code == 404
        assert response.content == b""
        unchanged = (await client.get(f"/postagens/{created['id']}")).json()
        assert unchanged == created

    @pytest.mark.asyncio
    async def test_put_without_id_is_400(self, client):
        response = await client.put(
            "/postagens", json={"titulo": "Título", "texto": "Texto válido"}
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_delete_then_get_is_404(self, client):
        created = await criar(client)

        response = await client.delete(f"/postagens/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""

        assert (await client.get(f"/postagens/{created['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_unknown_is_404_error(self, client):
        response = await client.delete("/postagens/4040")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}
