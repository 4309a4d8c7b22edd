import pytest
from fastapi import status
from pydantic import ValidationError

from app.models.favorite import Favorite
from app.schemas.favorite import AddFavoriteRequest, FileTarget, FolderTarget, favorite_target_adapter

FAVORITES_URL = "/api/v1/favorites"


class TestFavoriteTarget:
    """Test cases for the file/folder tagged union"""

    def test_request_resolves_to_file_target(self):
        target = AddFavoriteRequest(item_type="file", item_id=3).to_target()

        assert isinstance(target, FileTarget)
        assert target.item_id == 3

    def test_request_resolves_to_folder_target(self):
        target = AddFavoriteRequest(item_type="folder", item_id=2).to_target()

        assert isinstance(target, FolderTarget)

    def test_unknown_tag_is_rejected(self):
        with pytest.raises(ValidationError):
            favorite_target_adapter.validate_python({"item_type": "drive", "item_id": 1})


class TestAddFavorite:
    """Test cases for POST /api/v1/favorites"""

    def test_add_favorite_success(self, client, sample_data):
        folders, _ = sample_data

        response = client.post(f"{FAVORITES_URL}/", json={"item_type": "folder", "item_id": folders["/Pictures"].id})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["item_type"] == "folder"
        assert data["item_id"] == folders["/Pictures"].id
        assert data["created_at"] is not None

    def test_add_favorite_is_idempotent(self, client, sample_data, db_session):
        """Adding the same item twice stores one row and returns the same id"""
        _, files = sample_data
        payload = {"item_type": "file", "item_id": files["/Pictures/photo.jpg"].id}

        first = client.post(f"{FAVORITES_URL}/", json=payload).json()
        second = client.post(f"{FAVORITES_URL}/", json=payload).json()

        assert first["id"] == second["id"]
        assert db_session.query(Favorite).count() == 1

    def test_same_id_different_type_are_distinct(self, client, sample_data, db_session):
        """(file, 1) and (folder, 1) are different favorites"""
        client.post(f"{FAVORITES_URL}/", json={"item_type": "file", "item_id": 1})
        client.post(f"{FAVORITES_URL}/", json={"item_type": "folder", "item_id": 1})

        assert db_session.query(Favorite).count() == 2

    def test_add_favorite_invalid_type(self, client, db_session):
        response = client.post(f"{FAVORITES_URL}/", json={"item_type": "drive", "item_id": 1})

        assert response.status_code == 422


class TestListFavorites:
    """Test cases for GET /api/v1/favorites"""

    def test_list_resolves_name_and_path(self, client, sample_data):
        folders, files = sample_data
        client.post(f"{FAVORITES_URL}/", json={"item_type": "folder", "item_id": folders["/Documents/Work"].id})
        client.post(f"{FAVORITES_URL}/", json={"item_type": "file", "item_id": files["/Videos/vacation.mp4"].id})

        response = client.get(f"{FAVORITES_URL}/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        # newest first
        assert [(fav["item_type"], fav["name"], fav["path"]) for fav in data] == [
            ("file", "vacation.mp4", "/Videos/vacation.mp4"),
            ("folder", "Work", "/Documents/Work"),
        ]
        assert all(fav["exists"] for fav in data)

    def test_dangling_favorite_has_null_name(self, client, sample_data):
        """Deleting the target leaves the favorite with null name and path"""
        _, files = sample_data
        photo_id = files["/Pictures/photo.jpg"].id
        client.post(f"{FAVORITES_URL}/", json={"item_type": "file", "item_id": photo_id})
        client.delete(f"/api/v1/files/{photo_id}")

        data = client.get(f"{FAVORITES_URL}/").json()

        assert len(data) == 1
        assert data[0]["item_id"] == photo_id
        assert data[0]["name"] is None
        assert data[0]["path"] is None
        assert data[0]["exists"] is False


class TestRemoveFavorite:
    """Test cases for DELETE /api/v1/favorites/{id}"""

    def test_remove_favorite_success(self, client, sample_data, db_session):
        favorite = client.post(f"{FAVORITES_URL}/", json={"item_type": "folder", "item_id": 1}).json()

        response = client.delete(f"{FAVORITES_URL}/{favorite['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"] == "Removed from favorites"
        assert db_session.query(Favorite).count() == 0

    def test_remove_favorite_not_found(self, client, db_session):
        response = client.delete(f"{FAVORITES_URL}/9999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "Favorite not found"


class TestCheckFavorite:
    """Test cases for GET /api/v1/favorites/check/{item_type}/{item_id}"""

    def test_check_favorite(self, client, sample_data):
        client.post(f"{FAVORITES_URL}/", json={"item_type": "file", "item_id": 2})

        assert client.get(f"{FAVORITES_URL}/check/file/2").json() == {"is_favorite": True}
        assert client.get(f"{FAVORITES_URL}/check/folder/2").json() == {"is_favorite": False}

    def test_check_favorite_invalid_type(self, client, db_session):
        response = client.get(f"{FAVORITES_URL}/check/drive/2")

        assert response.status_code == 422
