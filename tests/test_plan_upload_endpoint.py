"""
Tests for POST /plans/upload endpoint

Uses the conftest.py `client` fixture. PDF decoding is mocked so the tests
stay offline and independent of real PDF files.
"""

import pytest
from unittest.mock import patch

from workout_plan_ingestor.api.plan_routes import NO_WORKOUTS_MESSAGE
from workout_plan_ingestor.config import settings


def _upload(client, filename, content, content_type="text/plain"):
    return client.post("/plans/upload", files={"file": (filename, content, content_type)})


class TestPlanUploadSuccess:
    """Happy-path uploads."""

    def test_text_plan(self, client, two_day_plan_text):
        response = _upload(client, "week11.txt", two_day_plan_text.encode("utf-8"))

        assert response.status_code == 200
        data = response.json()

        assert data["message"] == "Successfully parsed 2 workouts from plan"
        assert len(data["workouts"]) == 2

        monday = data["workouts"][0]
        assert monday["fileName"] == "week11.txt"
        assert monday["workoutDay"] == "MONDAY - Hinge/Push"
        assert monday["program"] == "GYM DAILY"
        assert monday["equipment"] == ["Barbell", "Bands"]
        assert [e["name"] for e in monday["exercises"]] == ["Jumping Jacks", "Back Squat", "Child's Pose"]
        assert "createdAt" in monday["exercises"][0]
        assert "uploadDate" in monday

    def test_pdf_plan(self, client, two_day_plan_text):
        with patch(
            "workout_plan_ingestor.parsers.pdf_parser.PdfPlanParser.extract_text",
            return_value=two_day_plan_text,
        ):
            response = _upload(client, "week11.pdf", b"%PDF-1.4", "application/pdf")

        assert response.status_code == 200
        assert [w["workoutDay"] for w in response.json()["workouts"]] == [
            "MONDAY - Hinge/Push",
            "TUESDAY - Sprint Conditioning",
        ]


class TestPlanUploadErrors:
    """Rejected uploads and parse failures."""

    def test_missing_file(self, client):
        response = client.post("/plans/upload")

        assert response.status_code == 400
        assert response.json()["detail"] == "No file uploaded"

    def test_empty_file(self, client):
        response = _upload(client, "plan.txt", b"")

        assert response.status_code == 400
        assert response.json()["detail"] == "No file uploaded"

    def test_unsupported_type(self, client):
        response = _upload(client, "plan.docx", b"PK\x03\x04", "application/msword")

        assert response.status_code == 415

    def test_too_large(self, client, monkeypatch):
        monkeypatch.setattr(settings, "MAX_UPLOAD_BYTES", 10)

        response = _upload(client, "plan.txt", b"BLOCK 1: Squat x 5")

        assert response.status_code == 413

    def test_no_workouts_found(self, client):
        response = _upload(client, "notes.txt", b"Sleep eight hours.")

        assert response.status_code == 400
        assert response.json()["detail"] == NO_WORKOUTS_MESSAGE

    def test_unreadable_pdf(self, client):
        with patch(
            "workout_plan_ingestor.parsers.pdf_parser.pdfplumber.open",
            side_effect=ValueError("No /Root object"),
        ):
            response = _upload(client, "broken.pdf", b"garbage", "application/pdf")

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Failed to process plan"
        assert "No /Root object" in data["details"]


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
