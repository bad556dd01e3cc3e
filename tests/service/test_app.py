"""Tests for the FastAPI service mode."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from adrman.filesystem import LocalFileSystem
from adrman.manager import AdrManager
from adrman.service import create_app


class _RecordingFactory:
    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []

    def __call__(self, paths: List[str], adr_directory: Optional[str]) -> AdrManager:
        self.calls.append({"paths": list(paths), "adr_directory": adr_directory})
        return AdrManager.from_paths(list(paths), adr_directory=adr_directory)


@pytest.fixture
def factory() -> _RecordingFactory:
    return _RecordingFactory()


@pytest.fixture
def client(factory: _RecordingFactory) -> TestClient:
    return TestClient(create_app(factory))


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_init_then_exists_and_list(client: TestClient, tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    repo.mkdir()

    response = client.post("/exists", json={"roots": [str(repo)]})
    assert response.status_code == 200
    assert response.json()["results"][0]["exists"] is False

    response = client.post("/init", json={"path": str(repo)})
    assert response.status_code == 200
    data = response.json()
    assert data["outcome"] == "created"
    assert data["adr_directory"].endswith(str(Path("docs") / "decisions"))

    response = client.post("/init", json={"path": str(repo)})
    assert response.json()["outcome"] == "declined"

    response = client.post("/init", json={"path": str(repo), "refill": True})
    assert response.json()["outcome"] == "refilled"

    response = client.post("/adrs", json={"roots": [str(repo)]})
    assert response.status_code == 200
    documents = response.json()["documents"]
    assert [document["name"] for document in documents] == [
        "0000-use-markdown-architectural-decision-records.md"
    ]
    assert documents[0]["root"] == "repo"


def test_adrs_passes_directory_override(client: TestClient, factory: _RecordingFactory, tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    (repo / "adr").mkdir(parents=True)
    (repo / "adr" / "0001-choose-ci.md").write_text("# CI\n", encoding="utf-8")

    response = client.post("/adrs", json={"roots": [str(repo)], "adr_directory": "adr"})

    assert response.json()["documents"][0]["content"] == "# CI\n"
    assert factory.calls[-1]["adr_directory"] == "adr"


def test_missing_root_maps_to_404(client: TestClient, tmp_path: Path) -> None:
    response = client.post("/adrs", json={"roots": [str(tmp_path / "missing")]})

    assert response.status_code == 404
    assert "Root path not found" in response.json()["detail"]


def test_init_without_usable_root_maps_to_400(client: TestClient, tmp_path: Path) -> None:
    target = tmp_path / "file.txt"
    target.write_text("x", encoding="utf-8")

    response = client.post("/init", json={"path": str(target)})

    assert response.status_code == 400


def test_unlistable_directory_maps_to_json_error(
    client: TestClient, tmp_path: Path, monkeypatch
) -> None:
    repo = tmp_path / "repo"
    (repo / "docs" / "decisions").mkdir(parents=True)
    original = LocalFileSystem.list_directory

    def _list(self, path: Path):
        if path.name == "docs":
            raise PermissionError(f"permission denied: {path}")
        return original(self, path)

    monkeypatch.setattr(LocalFileSystem, "list_directory", _list)

    response = client.post("/exists", json={"roots": [str(repo)]})
    assert response.status_code == 500
    assert "permission denied" in response.json()["detail"]

    response = client.post("/adrs", json={"roots": [str(repo)]})
    assert response.status_code == 200
    assert response.json() == {"documents": []}
