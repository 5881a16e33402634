import os
import sys
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep API tests independent of per-client request budgets.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

from fastapi.testclient import TestClient  # noqa: E402

from document_factory import DOCX_MIME, PDF_MIME, RESUME_LINES, build_docx  # noqa: E402
from resume_autofill.main import app  # noqa: E402
from resume_autofill.parsing import ExtractionFailed  # noqa: E402

SAMPLE_TEXT = (
    "Jane Doe\n"
    "janedoe@email.com\n"
    "(415) 555-0199\n"
    "San Francisco, CA 94102\n"
    "linkedin.com/in/janedoe"
)


class ResumeApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "healthy")
        self.assertIn("application/pdf", body["accepted_mime_types"])

    def test_extract_text_contract_shape(self):
        response = self.client.post("/v1/resume/extract-text", json={"text": SAMPLE_TEXT})
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["fields_found"], 5)
        self.assertEqual(
            body["data"],
            {
                "fullName": "Jane Doe",
                "email": "janedoe@email.com",
                "phone": "(415) 555-0199",
                "location": "San Francisco, CA",
                "linkedIn": "linkedin.com/in/janedoe",
                "portfolio": None,
                "rawText": SAMPLE_TEXT,
            },
        )

    def test_extract_upload_docx(self):
        files = {"file": ("jane-doe.docx", build_docx(RESUME_LINES), DOCX_MIME)}
        response = self.client.post("/v1/resume/extract", files=files)
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["file_name"], "jane-doe.docx")
        self.assertEqual(body["source_type"], "word")
        self.assertEqual(body["fields_found"], 5)
        self.assertEqual(body["data"]["location"], "Denver, CO")
        self.assertEqual(body["data"]["portfolio"], "github.com/janedoe")

    def test_extract_upload_rejects_unsupported_type(self):
        files = {"file": ("resume.txt", b"Jane Doe", "text/plain")}
        response = self.client.post("/v1/resume/extract", files=files)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Please upload a PDF or Word document")

    def test_extract_upload_rejects_oversized_file(self):
        with patch("resume_autofill.api.v1.resume.settings", SimpleNamespace(max_upload_bytes=1024, log_text_max_chars=200)):
            files = {"file": ("resume.pdf", b"%PDF-" + b"0" * 4096, PDF_MIME)}
            response = self.client.post("/v1/resume/extract", files=files)
        self.assertEqual(response.status_code, 413)

    def test_extract_upload_reports_decode_failure(self):
        files = {"file": ("resume.pdf", b"%PDF-1.4 truncated", PDF_MIME)}
        with patch(
            "resume_autofill.services.autofill_service.extract_document_text",
            side_effect=ExtractionFailed("Failed to extract text from PDF file"),
        ):
            response = self.client.post("/v1/resume/extract", files=files)
        self.assertEqual(response.status_code, 422)
        self.assertIn("fill in the form manually", response.json()["detail"])

    def test_autofill_merges_only_found_fields(self):
        payload = {
            "text": "Jane Doe\njanedoe@email.com",
            "form": {"phone": "555-0100", "location": "Remote", "fullName": "J. Doe"},
            "resume_file_name": "jane.pdf",
        }
        response = self.client.post("/v1/resume/autofill", json=payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["fields_found"], 2)
        self.assertEqual(body["form"]["fullName"], "Jane Doe")
        self.assertEqual(body["form"]["email"], "janedoe@email.com")
        self.assertEqual(body["form"]["phone"], "555-0100")
        self.assertEqual(body["form"]["location"], "Remote")
        self.assertEqual(body["form"]["resumeFileName"], "jane.pdf")

    def test_autofill_result_can_be_posted_back(self):
        long_name = " ".join(["Alexandria"] * 30)
        payload = {"text": f"{long_name}\njanedoe@email.com", "form": {}}
        first = self.client.post("/v1/resume/autofill", json=payload)
        self.assertEqual(first.status_code, 200)
        form = first.json()["form"]
        self.assertEqual(form["fullName"], "")
        self.assertEqual(form["email"], "janedoe@email.com")

        second = self.client.post("/v1/resume/autofill", json={"text": "", "form": form})
        self.assertEqual(second.status_code, 200)
        self.assertEqual(second.json()["form"], form)

    def test_extract_text_rejects_oversized_text(self):
        response = self.client.post("/v1/resume/extract-text", json={"text": "a" * 50001})
        self.assertEqual(response.status_code, 422)

    def test_api_key_is_enforced_when_configured(self):
        with patch("resume_autofill.core.security.settings", SimpleNamespace(api_key="secret")):
            denied = self.client.post("/v1/resume/extract-text", json={"text": SAMPLE_TEXT})
            allowed = self.client.post(
                "/v1/resume/extract-text",
                json={"text": SAMPLE_TEXT},
                headers={"X-API-Key": "secret"},
            )
        self.assertEqual(denied.status_code, 401)
        self.assertEqual(allowed.status_code, 200)


if __name__ == "__main__":
    unittest.main()
