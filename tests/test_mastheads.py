# =============================================================================
# tests/test_mastheads.py - Interactive Masthead Tests
# =============================================================================

from uuid import UUID

from tests.conftest import make_zip

MASTHEAD = {
    "category": "Finance & Banking",
    "brand": "Garanti",
    "title": "Summer Campaign",
    "popup_html_path": "/interactive_mastheads_zips/finance---banking/garanti/abc/index.html",
    "banner_size": "970x250",
}


class TestMastheadCrud:
    """Tests for /api/mastheads."""

    def test_create_assigns_uuid(self, client, admin_headers):
        response = client.post("/api/mastheads", json=MASTHEAD, headers=admin_headers)

        assert response.status_code == 201
        assert UUID(response.json()["id"])
        assert response.json()["banner_size"] == "970x250"

    def test_missing_popup_path_is_400(self, client, admin_headers):
        payload = {key: value for key, value in MASTHEAD.items() if key != "popup_html_path"}

        response = client.post("/api/mastheads", json=payload, headers=admin_headers)

        assert response.status_code == 400

    def test_update_and_delete(self, client, admin_headers):
        masthead_id = client.post("/api/mastheads", json=MASTHEAD, headers=admin_headers).json()["id"]

        updated = client.put(
            f"/api/mastheads/{masthead_id}", json={"title": "Winter"}, headers=admin_headers
        )
        deleted = client.delete(f"/api/mastheads/{masthead_id}", headers=admin_headers)

        assert updated.json()["title"] == "Winter"
        assert deleted.json() == {"success": True, "id": masthead_id}
        assert client.get(f"/api/mastheads/{masthead_id}").status_code == 404

    def test_null_popup_path_is_400(self, client, admin_headers):
        masthead_id = client.post("/api/mastheads", json=MASTHEAD, headers=admin_headers).json()["id"]

        response = client.put(
            f"/api/mastheads/{masthead_id}", json={"popup_html_path": None}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "popup_html_path"
        stored = client.get(f"/api/mastheads/{masthead_id}").json()
        assert stored["popup_html_path"] == MASTHEAD["popup_html_path"]


class TestMastheadWorkflow:
    """Upload an ad archive, then register it as a masthead."""

    def test_uploaded_path_serves_as_popup(self, client, admin_headers, masthead_zip):
        # Arrange: upload and extract the ad
        upload = client.post(
            "/api/upload",
            data={"category": "Online", "brand": "Acme", "type": "masthead", "is_zip": "true"},
            files={"file": ("ad.zip", masthead_zip, "application/zip")},
            headers=admin_headers,
        )
        popup_path = upload.json()["file_path"]

        # Act
        created = client.post(
            "/api/mastheads",
            json={**MASTHEAD, "popup_html_path": popup_path},
            headers=admin_headers,
        )
        check = client.get("/api/check-masthead-file", params={"path": popup_path})

        # Assert
        assert created.status_code == 201
        assert created.json()["popup_html_path"] == popup_path
        assert check.json() == {"exists": True, "path": popup_path}

    def test_second_upload_gets_its_own_directory(self, client, admin_headers):
        archive = make_zip({"index.html": "<html></html>"})
        form = {"category": "Online", "brand": "Acme", "is_zip": "true"}

        first = client.post(
            "/api/upload", data=form, files={"file": ("ad.zip", archive)}, headers=admin_headers
        )
        second = client.post(
            "/api/upload", data=form, files={"file": ("ad.zip", archive)}, headers=admin_headers
        )

        assert first.json()["file_path"] != second.json()["file_path"]
