# ============================================================================
# FILE: tests/unit/test_api.py
# ============================================================================
"""
Unit tests for the FastAPI endpoints
"""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from api.main import create_app

REPORT = b"Hemoglobin: 16.3 g/dL\nGlucose 89 mg/dL\nSodium 134 mmol/L"


@pytest.fixture
def client(pipeline):
    return TestClient(create_app(pipeline))


def _upload(client, user_id="user_1", name="report.txt", content=REPORT):
    return client.post(
        "/api/blood-report/upload",
        files={"file": (name, content, "text/plain")},
        data={"userId": user_id},
    )


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_upload(client):
    response = _upload(client)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["originalName"] == "report.txt"
    assert body["fileSize"] == len(REPORT)


def test_upload_wrong_type(client):
    response = _upload(client, name="report.docx")

    assert response.status_code == 400


def test_upload_missing_user(client):
    response = client.post(
        "/api/blood-report/upload",
        files={"file": ("report.txt", REPORT, "text/plain")},
    )

    assert response.status_code == 422


def test_process(client):
    file_id = _upload(client).json()["fileId"]
    response = client.post(
        "/api/blood-report/process",
        json={"userId": "user_1", "fileId": file_id},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["parameters"]["hemoglobin"]["value"] == 16.3
    assert body["parameters"]["sodium"]["status"] == "low"
    assert body["summary"]["totalParameters"] == 3


def test_process_unknown_file(client):
    response = client.post(
        "/api/blood-report/process",
        json={"userId": "user_1", "fileId": "missing"},
    )

    assert response.status_code == 404


def test_extract_text(client):
    response = client.post(
        "/api/blood-report/extract-text",
        json={"text": "Hemoglobin: 16.3 g/dL\nGlucose 89 mg/dL"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["parameters"]["hemoglobin"] == {
        "displayName": "Hemoglobin",
        "value": 16.3,
        "unit": "g/dL",
        "confidence": 1.0,
        "normalRange": "13.5-17.5 g/dL (men); 12.0-15.5 (women)",
        "status": "normal",
        "rawText": "Hemoglobin: 16.3 g/dL",
    }
    assert body["summary"]["highConfidence"] == 2


def test_extract_text_empty(client):
    response = client.post("/api/blood-report/extract-text", json={"text": ""})

    assert response.status_code == 200
    assert response.json()["parameters"] == {}


def test_extract_text_non_string(client):
    response = client.post("/api/blood-report/extract-text", json={"text": 42})

    assert response.status_code == 422


def test_confirm_and_fetch(client):
    response = client.post(
        "/api/blood-report/confirm",
        json={
            "userId": "user_1",
            "reportId": "report-1",
            "parameters": {"hemoglobin": {"value": 16.3}, "tsh": 2.5},
            "reportDate": "2025-05-10",
        },
    )

    assert response.status_code == 200
    assert response.json()["parameters"] == {"hemoglobin": 16.3, "tsh": 2.5}

    markers = client.get("/api/blood-markers/user_1").json()
    assert markers["markers"] == {"hemoglobin": 16.3, "tsh": 2.5}
    assert markers["reportDate"] == "2025-05-10"


def test_confirm_missing_fields(client):
    response = client.post(
        "/api/blood-report/confirm",
        json={"userId": "user_1", "parameters": {"tsh": 2.5}},
    )

    assert response.status_code == 400


def test_markers_none_stored(client):
    response = client.get("/api/blood-markers/nobody")

    assert response.status_code == 200
    assert response.json()["message"] == "No blood markers found"


def test_markers_store_failure(client, pipeline):
    """Read errors from the store become a 500 with a detail message"""
    conn = sqlite3.connect(str(pipeline.store.db_path))
    try:
        conn.execute("DROP TABLE blood_markers")
        conn.commit()
    finally:
        conn.close()

    response = client.get("/api/blood-markers/user_1")

    assert response.status_code == 500
    assert "Failed to fetch blood markers" in response.json()["detail"]
