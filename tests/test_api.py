from remarkdeck import main


class TestDeckApi:
    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200

    def test_create_and_fetch_deck(self, client, di_deck_source):
        response = client.post("/decks", json={"source": di_deck_source})
        assert response.status_code == 200

        data = response.json()
        assert data["length"] == 4
        assert data["title"] == "Dependency Injection"
        assert [slide["index"] for slide in data["slides"]] == [0, 1, 2, 3]

        deck_id = data["deck_id"]
        fetched = client.get(f"/decks/{deck_id}")
        assert fetched.status_code == 200
        assert fetched.json()["slides"] == data["slides"]

    def test_get_slide_by_index(self, client):
        deck_id = client.post("/decks", json={"source": "A\n---\nB"}).json()["deck_id"]

        response = client.get(f"/decks/{deck_id}/slides/1")

        assert response.status_code == 200
        assert response.json()["raw_content"] == "B"

    def test_slide_out_of_range(self, client):
        deck_id = client.post("/decks", json={"source": "A\n---\nB"}).json()["deck_id"]

        assert client.get(f"/decks/{deck_id}/slides/2").status_code == 404
        assert client.get(f"/decks/{deck_id}/slides/-1").status_code == 404

    def test_unknown_deck(self, client):
        assert client.get("/decks/does-not-exist").status_code == 404
        assert client.delete("/decks/does-not-exist").status_code == 404

    def test_empty_source_rejected(self, client):
        response = client.post("/decks", json={"source": ""})

        assert response.status_code == 422
        assert "Malformed" in response.json()["detail"]

    def test_unterminated_fence_rejected(self, client):
        response = client.post("/decks", json={"source": "```\nopen"})

        assert response.status_code == 422
        assert "Unterminated" in response.json()["detail"]

    def test_source_too_large(self, client, monkeypatch):
        monkeypatch.setattr(main, "MAX_SOURCE_BYTES", 4)

        response = client.post("/decks", json={"source": "A\n---\nB"})

        assert response.status_code == 413

    def test_upload_markdown(self, client, di_deck_source):
        response = client.post(
            "/decks/upload",
            files={"source": ("slides.md", di_deck_source.encode("utf-8"), "text/markdown")}
        )

        assert response.status_code == 200
        assert response.json()["length"] == 4

    def test_upload_html(self, client):
        html = b"<html><body><textarea id='source'>A\n---\nB\n---\nC</textarea></body></html>"

        response = client.post("/decks/upload", files={"source": ("index.html", html, "text/html")})

        assert response.status_code == 200
        assert response.json()["length"] == 3

    def test_upload_invalid_utf8(self, client):
        response = client.post("/decks/upload", files={"source": ("slides.md", b"\xff\xfe\xfa", "text/plain")})
        assert response.status_code == 400

    def test_delete_deck(self, client):
        deck_id = client.post("/decks", json={"source": "A"}).json()["deck_id"]

        assert client.delete(f"/decks/{deck_id}").status_code == 200
        assert client.get(f"/decks/{deck_id}").status_code == 404

    def test_upload_too_large(self, client, monkeypatch):
        monkeypatch.setattr(main, "MAX_SOURCE_BYTES", 4)

        response = client.post("/decks/upload", files={"source": ("slides.md", b"A\n---\nB", "text/markdown")})

        assert response.status_code == 413
