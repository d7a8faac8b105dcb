"""HTTP contract of /temas"""

import pytest


async def criar_tema(client, descricao="Tecnologia"):
    response = await client.post("/temas", json={"descricao": descricao})
    assert response.status_code == 201
    return response.json()


class TestTemaController:
    @pytest.mark.asyncio
    async def test_post_and_get_with_postagens(self, client):
        tema = await criar_tema(client)
        await client.post(
            "/postagens",
            json={"titulo": "Python", "texto": "Texto sobre Python", "tema_id": tema["id"]},
        )

        response = await client.get(f"/temas/{tema['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["descricao"] == "Tecnologia"
        assert [p["titulo"] for p in body["postagem"]] == ["Python"]
        assert "tema_id" not in body["postagem"][0]

    @pytest.mark.asyncio
    async def test_post_invalid_is_400(self, client):
        response = await client.post("/temas", json={"descricao": "ab"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_get_by_descricao(self, client):
        await criar_tema(client, "Tecnologia")
        await criar_tema(client, "Esportes")

        response = await client.get("/temas/descricao/TEC")

        assert [t["descricao"] for t in response.json()] == ["Tecnologia"]
        assert response.json()[0]["postagem"] == []

    @pytest.mark.asyncio
    async def test_put(self, client):
        tema = await criar_tema(client)

        response = await client.put("/temas", json={"id": tema["id"], "descricao": "Ciência"})

        assert response.status_code == 200
        assert response.json() == {"id": tema["id"], "descricao": "Ciência", "postagem": []}
        missing = await client.put("/temas", json={"id": 999, "descricao": "Ciência"})
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_cascades(self, client):
        tema = await criar_tema(client)
        postagem = (
            await client.post(
                "/postagens",
                json={"titulo": "Filha", "texto": "Pertence ao tema", "tema_id": tema["id"]},
            )
        ).json()

        response = await client.delete(f"/temas/{tema['id']}")

        assert response.status_code == 204
        assert (await client.get(f"/temas/{tema['id']}")).status_code == 404
        assert (await client.get(f"/postagens/{postagem['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_unknown_is_404(self, client):
        response = await client.delete("/temas/12")

        assert response.status_code == 404
        assert response.json() == {"detail": "Not Found"}

    @pytest.mark.asyncio
    async def test_post_answers_with_empty_postagem(self, client):
        tema = await criar_tema(client)

        assert tema["postagem"] == []

    @pytest.mark.asyncio
    async def test_get_all_carries_postagem_of_each_theme(self, client):
        tecnologia = await criar_tema(client, "Tecnologia")
        esportes = await criar_tema(client, "Esportes")
        await client.post(
            "/postagens",
            json={"titulo": "Python", "texto": "Texto sobre Python", "tema_id": tecnologia["id"]},
        )

        response = await client.get("/temas")

        assert response.status_code == 200
        body = {t["id"]: t for t in response.json()}
        assert [p["titulo"] for p in body[tecnologia["id"]]["postagem"]] == ["Python"]
        assert "tema_id" not in body[tecnologia["id"]]["postagem"][0]
        assert body[esportes["id"]]["postagem"] == []

    @pytest.mark.asyncio
    async def test_put_keeps_postagem(self, client):
        tema = await criar_tema(client)
        await client.post(
            "/postagens",
            json={"titulo": "Python", "texto": "Texto sobre Python", "tema_id": tema["id"]},
        )

        response = await client.put("/temas", json={"id": tema["id"], "descricao": "Ciência"})

        assert [p["titulo"] for p in response.json()["postagem"]] == ["Python"]
