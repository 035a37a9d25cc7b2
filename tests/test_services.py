# =============================================================================
# tests/test_services.py - Service Catalog Tests
# =============================================================================

class TestServiceCatalog:
    """Tests for /api/services."""

    def test_id_derived_from_name(self, client, admin_headers):
        # Act
        response = client.post(
            "/api/services",
            json={"name": "Rich Media", "description": "Interactive formats", "icon": "sparkles"},
            headers=admin_headers,
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["id"] == "rich-media"

    def test_explicit_id_kept(self, client, admin_headers):
        response = client.post(
            "/api/services",
            json={"id": "seo", "name": "Search Engine Optimisation"},
            headers=admin_headers,
        )

        assert response.json()["id"] == "seo"

    def test_duplicate_id_is_409(self, client, fake_supabase, admin_headers):
        fake_supabase.seed("services", {"id": "rich-media", "name": "Rich Media"})

        response = client.post(
            "/api/services", json={"name": "Rich Media"}, headers=admin_headers
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE"

    def test_get_update_delete(self, client, fake_supabase, admin_headers):
        # Arrange
        fake_supabase.seed("services", {"id": "video", "name": "Video", "description": "Spots"})

        # Act
        updated = client.put(
            "/api/services/video", json={"description": "Video production"}, headers=admin_headers
        )
        deleted = client.delete("/api/services/video", headers=admin_headers)
        missing = client.get("/api/services/video")

        # Assert
        assert updated.json()["description"] == "Video production"
        assert updated.json()["name"] == "Video"
        assert deleted.json() == {"success": True, "id": "video"}
        assert missing.status_code == 404

    def test_null_name_is_400(self, client, fake_supabase, admin_headers):
        fake_supabase.seed("services", {"id": "video", "name": "Video"})

        response = client.put("/api/services/video", json={"name": None}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_list_is_public(self, client, fake_supabase):
        fake_supabase.seed(
            "services",
            {"id": "b-video", "name": "Video"},
            {"id": "a-seo", "name": "SEO"},
        )

        response = client.get("/api/services")

        assert response.status_code == 200
        assert [s["id"] for s in response.json()] == ["a-seo", "b-video"]
