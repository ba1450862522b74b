"""
Tests for the REST API.
"""

import pytest
from fastapi.testclient import TestClient

from api import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("ES2TS_PROPERTY_MAPPING", "ES2TS_TYPESENSE_SCHEMA", "ES2TS_ELASTIC_SCHEMA", "ES2TS_AUTO_MAP"):
        monkeypatch.delenv(var, raising=False)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_transform():
    response = client.post(
        "/transform",
        json={
            "query": {"query": {"match": {"name": "Berlin"}}, "size": 10},
            "property_mapping": {"name": "city"},
        },
    )
    assert response.status_code == 200
    assert response.json() == {
        "query": {"q": "*", "filter_by": 'city:= "Berlin"', "per_page": 10},
        "warnings": [],
    }


def test_transform_reports_warnings():
    response = client.post("/transform", json={"query": {"query": {"foo": {}}}})
    assert response.status_code == 200
    assert response.json()["warnings"] == ['Unsupported clause: "foo"']


def test_transform_with_schema():
    response = client.post(
        "/transform",
        json={
            "query": {"query": {"term": {"missing": 1, "title": "x"}}},
            "typesense_schema": {"fields": [{"name": "title", "type": "string"}]},
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["query"]["filter_by"] == 'title:= "x"'
    assert body["warnings"] == ['Skipped unmapped field "missing"']


def test_transform_requires_object_query():
    response = client.post("/transform", json={"query": "match_all"})
    assert response.status_code == 422


def test_configuration_errors_are_server_errors(monkeypatch, tmp_path):
    monkeypatch.setenv("ES2TS_PROPERTY_MAPPING", str(tmp_path / "missing.json"))
    response = client.post("/transform", json={"query": {}})
    assert response.status_code == 500
