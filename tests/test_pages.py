# =============================================================================
# tests/test_pages.py - Server-Rendered Page & Health Tests
# =============================================================================

import pytest


class TestHomePage:
    """Tests for GET /."""

    def test_renders_content(self, client, fake_supabase):
        # Arrange
        fake_supabase.seed("services", {"id": "rich-media", "name": "Rich Media"})
        fake_supabase.seed(
            "team_members",
            {"name": "Deniz", "position": "CEO", "image": "/t/d.jpg", "display_order": 0, "is_active": True},
            {"name": "Hidden", "position": "Intern", "image": "/t/h.jpg", "display_order": 1, "is_active": False},
        )
        fake_supabase.seed("games", {"title": "Racer", "description": "Arcade", "features": ["Drift"]})
        fake_supabase.seed(
            "top_banner",
            {"id": 1, "background_image": "https://cdn/banner.png", "button_link": "https://go.example"},
        )

        # Act
        response = client.get("/")

        # Assert
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        html = response.text
        assert "Rich Media" in html
        assert "Deniz" in html
        assert "Hidden" not in html
        assert "Racer" in html
        assert "https://cdn/banner.png" in html

    def test_failing_section_renders_empty(self, client, fake_supabase):
        fake_supabase.failing_tables.update({"games", "partner_categories"})
        fake_supabase.seed("services", {"id": "video", "name": "Video Production"})

        response = client.get("/")

        assert response.status_code == 200
        assert "Video Production" in response.text

    def test_content_security_policy_header(self, client):
        response = client.get("/")

        assert "frame-ancestors 'self'" in response.headers["content-security-policy"]


class TestOtherPages:
    """Static pages, the masthead gallery and the dashboard shell."""

    @pytest.mark.parametrize(
        "path",
        ["/privacy-policy", "/terms-of-service", "/cookie-policy", "/admin"],
    )
    def test_page_renders(self, client, path):
        response = client.get(path)

        assert response.status_code == 200
        assert "<html" in response.text

    def test_masthead_gallery(self, client, fake_supabase):
        fake_supabase.seed(
            "interactive_mastheads",
            {
                "id": "m-1",
                "category": "Online",
                "brand": "Acme",
                "title": "Launch Ad",
                "popup_html_path": "/interactive_mastheads_zips/online/acme/1/index.html",
            },
        )

        response = client.get("/interactive-mastheads")

        assert "Launch Ad" in response.text
        assert "/interactive_mastheads_zips/online/acme/1/index.html" in response.text

    def test_admin_page_loads_dashboard_script(self, client):
        response = client.get("/admin")

        assert "/static/js/admin.js" in response.text


class TestHealth:
    """Tests for the health endpoints."""

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.json()["status"] == "healthy"

    def test_ready(self, client):
        response = client.get("/api/health/ready")

        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"] == {"database": "healthy", "storage": "healthy", "files": "healthy"}

    def test_degraded_when_database_fails(self, client, fake_supabase):
        fake_supabase.failing_tables.add("partner_categories")

        response = client.get("/api/health/ready")

        assert response.json()["status"] == "degraded"
        assert response.json()["checks"]["database"].startswith("unhealthy")

    def test_degraded_when_storage_fails(self, client, fake_supabase):
        fake_supabase.storage.listing_fails = True

        response = client.get("/api/health/ready")

        assert response.json()["status"] == "degraded"
        assert response.json()["checks"]["storage"].startswith("unhealthy")

    def test_degraded_when_site_directory_missing(self, client, site_dirs):
        site_dirs["data"].rmdir()

        response = client.get("/api/health/ready")

        body = response.json()
        assert body["status"] == "degraded"
        assert body["checks"]["files"] == "unhealthy: not writable: data"
        assert body["checks"]["database"] == "healthy"

    def test_api_root(self, client):
        assert client.get("/api").json()["health"] == "/api/health"
