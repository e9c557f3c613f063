"""
Acceptance tests for core user workflows.
Tests end-to-end scenarios from a student's perspective.
"""

import json
import os
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch
from services.pipeline import run
from fake_canvas import BASE_URL, FakeCanvasSession, docx_bytes


NOW = datetime(2025, 10, 15, 12, 0, tzinfo=timezone.utc)


def _routes():
    return {
        "courses": [
            {"id": 1, "name": "SENG 101"},
            {"id": 2, "name": "SENG 202"},
            {"id": 4, "name": "SENG 499 Capstone"},
        ],
        "courses/1/modules": [{"id": 10, "name": "Syllabus"}],
        "courses/1/modules/10/items": [
            {"title": "Syllabus", "type": "File", "content_id": 100},
        ],
        "files/100": {"display_name": "seng101.docx", "url": "https://files.test/100"},
        "courses/1/assignments": [
            {"name": "HW 3", "due_at": "2025-10-25T23:59:00Z", "html_url": "https://canvas.test/a/3"},
            {"name": "HW 1", "due_at": "2025-10-16T23:59:00Z", "html_url": "https://canvas.test/a/1"},
            {"name": "HW 0", "due_at": "2025-10-01T23:59:00Z", "html_url": "https://canvas.test/a/0"},
        ],
        "courses/2/modules": [{"id": 20, "name": "Introduction"}],
        "courses/2/modules/20/items": [
            {"title": "Course Outline", "type": "File", "content_id": 200},
        ],
        "files/200": {"display_name": "Outline.DOCX", "url": "https://files.test/200"},
        "courses/2/assignments": [
            {"name": "Quiz 1", "due_at": "2025-10-17T15:00:00Z", "html_url": "https://canvas.test/a/20"},
            {"name": "Quiz 2", "due_at": "2025-11-02T15:00:00Z", "html_url": "https://canvas.test/a/21"},
        ],
        # Capstone has a syllabus module whose only file fails to download
        "courses/4/modules": [{"id": 40, "name": "Start"}],
        "courses/4/modules/40/items": [
            {"title": "Capstone syllabus", "type": "File", "content_id": 400},
        ],
        "files/400": {"display_name": "capstone.pdf", "url": "https://files.test/missing"},
    }


class TestStudentSyllabusReportWorkflow(unittest.TestCase):
    """
    User Story: As a student, I want one file with my syllabi and upcoming deadlines
    so that I can see what is due next across all of my courses.

    Acceptance Criteria:
    - Syllabus documents are downloaded into my output folder
    - output.json holds each course's syllabus text, modules and assignments
    - The three nearest future due dates are listed first
    - Courses without a downloaded syllabus are left out
    """

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.output_dir = Path(self.tmp.name) / "syllabi"

    def tearDown(self):
        self.tmp.cleanup()

    def _run(self):
        session = FakeCanvasSession(_routes(), files={
            "https://files.test/100": docx_bytes("SENG 101 syllabus", "Late work: -10%/day"),
            "https://files.test/200": docx_bytes("SENG 202 outline"),
        })
        with patch('canvas_api.client.requests.Session', return_value=session):
            return run("student-token", self.output_dir, base_url=BASE_URL, now=NOW)

    def test_student_builds_syllabus_report(self):
        """
        SCENARIO: Student runs the scraper against their active courses

        GIVEN Alex is enrolled in three SENG courses
        AND two of them publish a syllabus document
        WHEN Alex runs the scraper with their token and an output folder
        THEN the folder is created and holds both documents and output.json
        AND output.json lists the two courses with their syllabus text
        AND the three nearest upcoming deadlines are listed in order
        """
        output_path = self._run()

        self.assertEqual(output_path, self.output_dir / "output.json")
        self.assertTrue((self.output_dir / "seng101.docx").exists())
        self.assertTrue((self.output_dir / "Outline.DOCX").exists())

        with open(output_path, encoding="utf-8") as f:
            report = json.load(f)

        self.assertEqual([c["className"] for c in report["courses"]], ["SENG 101", "SENG 202"])
        self.assertEqual(report["courses"][0]["syllabusText"], "SENG 101 syllabus\nLate work: -10%/day")
        self.assertEqual(report["courses"][1]["modules"],
                         [{"moduleName": "Introduction", "items": ["Course Outline"]}])

        self.assertEqual(report["closestDueDates"], [
            {"assignmentName": "HW 1", "dueDate": "2025-10-16T23:59:00Z",
             "className": "SENG 101", "url": "https://canvas.test/a/1"},
            {"assignmentName": "Quiz 1", "dueDate": "2025-10-17T15:00:00Z",
             "className": "SENG 202", "url": "https://canvas.test/a/20"},
            {"assignmentName": "HW 3", "dueDate": "2025-10-25T23:59:00Z",
             "className": "SENG 101", "url": "https://canvas.test/a/3"},
        ])

    def test_rerun_produces_identical_output(self):
        """
        SCENARIO: Student runs the scraper twice without anything changing

        WHEN the second run finishes
        THEN output.json is byte-for-byte the same as after the first run
        """
        first = self._run().read_bytes()
        second = self._run().read_bytes()

        self.assertEqual(first, second)

    def test_missing_token_writes_nothing(self):
        """
        SCENARIO: Student forgets to pass a token

        WHEN the scraper runs with an empty token
        THEN no output folder or output.json is produced
        """
        with self.assertLogs("services.pipeline", level="ERROR"):
            result = run("", self.output_dir, base_url=BASE_URL, now=NOW)

        self.assertIsNone(result)
        self.assertFalse(os.path.exists(self.output_dir))


if __name__ == "__main__":
    unittest.main()
