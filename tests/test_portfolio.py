# =============================================================================
# tests/test_portfolio.py - Portfolio Endpoint Tests
# =============================================================================
# The four portfolio sub-types share generated CRUD routes; each is run
# through the same create/read/update/delete cycle.
# =============================================================================

import pytest

PORTFOLIO_CASES = [
    (
        "/api/applications",
        {"title": "Bank App", "description": "Mobile banking", "features": "Payments, Cards",
         "platforms": "iOS, Android"},
        {"platforms": "iOS"},
    ),
    (
        "/api/games",
        {"title": "Racer", "description": "Arcade racer", "features": ["Multiplayer", "Leaderboards"]},
        {"features": ["Multiplayer"]},
    ),
    (
        "/api/web-portals",
        {"title": "Corporate Site", "client": "Acme", "project_url": "https://acme.example"},
        {"client": "Acme Holding"},
    ),
    (
        "/api/digital-marketing",
        {"title": "Summer Campaign", "client": "Acme", "services": ["SEO", "Social Ads"]},
        {"services": ["SEO"]},
    ),
]


@pytest.mark.parametrize("path,payload,changes", PORTFOLIO_CASES)
class TestPortfolioCrud:
    """Create, read, update and delete for every portfolio sub-type."""

    def test_create_then_get(self, client, admin_headers, path, payload, changes):
        # Act
        created = client.post(path, json=payload, headers=admin_headers)
        fetched = client.get(f"{path}/{created.json()['id']}")

        # Assert
        assert created.status_code == 201
        assert fetched.status_code == 200
        for field, value in payload.items():
            assert fetched.json()[field] == value

    def test_update_changes_only_sent_fields(self, client, admin_headers, path, payload, changes):
        item_id = client.post(path, json=payload, headers=admin_headers).json()["id"]

        response = client.put(f"{path}/{item_id}", json=changes, headers=admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == payload["title"]
        for field, value in changes.items():
            assert body[field] == value

    def test_null_title_is_400(self, client, admin_headers, path, payload, changes):
        """A required column cannot be cleared with null."""
        # Arrange
        item_id = client.post(path, json=payload, headers=admin_headers).json()["id"]

        # Act
        response = client.put(f"{path}/{item_id}", json={"title": None}, headers=admin_headers)

        # Assert: rejected up front, stored row untouched
        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "title"
        assert client.get(f"{path}/{item_id}").json()["title"] == payload["title"]

    def test_null_optional_field_clears_it(self, client, admin_headers, path, payload, changes):
        item_id = client.post(
            path, json={**payload, "image": "/portfolio/cover.png"}, headers=admin_headers
        ).json()["id"]

        response = client.put(f"{path}/{item_id}", json={"image": None}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["image"] is None

    def test_delete_then_get_is_404(self, client, admin_headers, path, payload, changes):
        item_id = client.post(path, json=payload, headers=admin_headers).json()["id"]

        deleted = client.delete(f"{path}/{item_id}", headers=admin_headers)
        fetched = client.get(f"{path}/{item_id}")

        assert deleted.json() == {"success": True, "id": item_id}
        assert fetched.status_code == 404

    def test_list_is_public(self, client, admin_headers, path, payload, changes):
        client.post(path, json=payload, headers=admin_headers)

        response = client.get(path)

        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_create_requires_admin(self, client, user_headers, path, payload, changes):
        assert client.post(path, json=payload).status_code == 401
        assert client.post(path, json=payload, headers=user_headers).status_code == 403


class TestPortfolioValidation:
    """Sub-type specific required fields."""

    def test_web_portal_requires_client(self, client, admin_headers):
        response = client.post(
            "/api/web-portals", json={"title": "Site"}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "client"

    def test_game_requires_description(self, client, admin_headers):
        response = client.post("/api/games", json={"title": "Racer"}, headers=admin_headers)

        assert response.status_code == 400

    def test_non_numeric_id_is_400(self, client):
        response = client.get("/api/games/not-a-number")

        assert response.status_code == 400

    def test_null_game_features_read_as_empty(self, client, fake_supabase):
        [game] = fake_supabase.seed(
            "games", {"title": "Racer", "description": "Arcade", "features": None}
        )

        response = client.get(f"/api/games/{game['id']}")

        assert response.json()["features"] == []
