"""Tests for the progress dashboard API."""

from fastapi import status
from fastapi.testclient import TestClient

from tests.conftest import API, generate
from tests.fakes import FakeContentGenerator, FixedClock


def _quiz(
    client: TestClient,
    headers: dict[str, str],
    subject: str,
    topic: str,
    correct: int,
    count: int = 4,
) -> int:
    """Generate and submit a quiz with `correct` right answers."""
    item_id = generate(client, headers, "quiz", count=count, subject=subject, topic=topic).json()[
        "item_id"
    ]
    questions = client.get(f"{API}/content/{item_id}", headers=headers).json()["questions"]
    answers = [
        {"question_id": q["id"], "answer": "A" if index < correct else "D"}
        for index, q in enumerate(questions)
    ]
    response = client.post(
        f"{API}/content/{item_id}/submit", json={"answers": answers}, headers=headers
    )
    assert response.status_code == status.HTTP_200_OK
    return item_id


class TestDashboard:
    """Test suite for GET /dashboard."""

    def test_empty_dashboard(self, client: TestClient, premium_headers: dict[str, str]) -> None:
        """Test a new user sees zeros and no averages."""
        response = client.get(f"{API}/dashboard", headers=premium_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["summary"]["total_generated"] == 0
        assert data["summary"]["by_content_type"]["quiz"] == {
            "generated": 0,
            "graded": 0,
            "marks_earned": 0,
            "marks_possible": 0,
            "average_score": None,
            "highest_score": None,
        }
        assert data["subjects"] == []
        assert data["weak_topics"] == []

    def test_dashboard_reflects_ledger(
        self, client: TestClient, premium_headers: dict[str, str]
    ) -> None:
        """Test counts, weighted averages, subject breakdown and weak topics."""
        _quiz(client, premium_headers, "Biology", "Cells", correct=1)
        _quiz(client, premium_headers, "Chemistry", "Moles", correct=4)
        generate(client, premium_headers, "flashcard", count=2, subject="Biology", topic="Cells")

        data = client.get(f"{API}/dashboard", headers=premium_headers).json()

        summary = data["summary"]
        assert summary["total_generated"] == 3
        assert summary["by_content_type"]["quiz"]["generated"] == 2
        assert summary["by_content_type"]["quiz"]["graded"] == 2
        assert summary["by_content_type"]["quiz"]["average_score"] == 62.5
        assert summary["by_content_type"]["flashcard"]["generated"] == 1
        assert summary["by_content_type"]["flashcard"]["average_score"] is None

        assert [s["subject"] for s in data["subjects"]] == ["Biology", "Chemistry"]
        assert data["subjects"][0]["topics"] == ["Cells"]
        assert data["subjects"][0]["summary"]["total_generated"] == 2

        assert data["weak_topics"] == [
            {
                "subject": "Biology",
                "topic": "Cells",
                "content_type": "quiz",
                "average_score": 25.0,
            }
        ]

    def test_dashboard_filter(self, client: TestClient, premium_headers: dict[str, str]) -> None:
        """Test the summary narrows to a subject and topic."""
        _quiz(client, premium_headers, "Biology", "Cells", correct=1)
        _quiz(client, premium_headers, "Chemistry", "Moles", correct=3)

        data = client.get(
            f"{API}/dashboard",
            params={"subject": "Chemistry", "topic": "Moles"},
            headers=premium_headers,
        ).json()

        quiz = data["summary"]["by_content_type"]["quiz"]
        assert data["summary"]["subject"] == "Chemistry"
        assert quiz["generated"] == 1
        assert quiz["average_score"] == 75.0
        assert len(data["subjects"]) == 2

    def test_dashboard_updates_immediately(
        self, client: TestClient, premium_headers: dict[str, str]
    ) -> None:
        """Test a new submission is visible on the next read."""
        _quiz(client, premium_headers, "Biology", "Cells", correct=2)
        before = client.get(f"{API}/dashboard", headers=premium_headers).json()

        _quiz(client, premium_headers, "Biology", "Cells", correct=4)
        after = client.get(f"{API}/dashboard", headers=premium_headers).json()

        assert before["summary"]["by_content_type"]["quiz"]["average_score"] == 50.0
        assert after["summary"]["by_content_type"]["quiz"]["average_score"] == 75.0

    def test_dashboard_is_per_user(
        self,
        client: TestClient,
        premium_headers: dict[str, str],
        other_headers: dict[str, str],
    ) -> None:
        """Test users only see their own progress."""
        _quiz(client, premium_headers, "Biology", "Cells", correct=4)

        data = client.get(f"{API}/dashboard", headers=other_headers).json()

        assert data["summary"]["total_generated"] == 0

    def test_pending_items_not_counted_as_graded(
        self,
        client: TestClient,
        free_headers: dict[str, str],
        fake_generator: FakeContentGenerator,
    ) -> None:
        """Test an item awaiting review adds no marks until it is complete."""
        fake_generator.rubric = []
        item_id = generate(client, free_headers, "mock_exam", count=2).json()["item_id"]
        questions = client.get(f"{API}/content/{item_id}", headers=free_headers).json()[
            "questions"
        ]
        client.post(
            f"{API}/content/{item_id}/submit",
            json={"answers": [{"question_id": q["id"], "answer": "A"} for q in questions]},
            headers=free_headers,
        )

        data = client.get(f"{API}/dashboard", headers=free_headers).json()

        mock_exam = data["summary"]["by_content_type"]["mock_exam"]
        assert mock_exam["generated"] == 1
        assert mock_exam["graded"] == 0
        assert mock_exam["average_score"] is None

    def test_highest_score_tracks_best_item(
        self, client: TestClient, premium_headers: dict[str, str]
    ) -> None:
        """Test the best single quiz is reported beside the weighted average."""
        _quiz(client, premium_headers, "Biology", "Cells", correct=1)
        _quiz(client, premium_headers, "Biology", "Cells", correct=3)

        data = client.get(f"{API}/dashboard", headers=premium_headers).json()

        quiz = data["summary"]["by_content_type"]["quiz"]
        assert quiz["highest_score"] == 75.0
        assert quiz["average_score"] == 50.0


class TestSubjectAnalytics:
    """Test suite for GET /dashboard/analytics/{subject}."""

    def test_topics_and_recent_results(
        self, client: TestClient, premium_headers: dict[str, str]
    ) -> None:
        """Test per-topic progress and graded items, newest first."""
        first = _quiz(client, premium_headers, "Biology", "Cells", correct=1)
        second = _quiz(client, premium_headers, "Biology", "Enzymes", correct=4)
        _quiz(client, premium_headers, "Chemistry", "Moles", correct=2)

        response = client.get(f"{API}/dashboard/analytics/Biology", headers=premium_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["subject"] == "Biology"
        assert [t["topic"] for t in data["topics"]] == ["Cells", "Enzymes"]
        cells = data["topics"][0]["summary"]["by_content_type"]["quiz"]
        assert cells["average_score"] == 25.0
        assert [r["item_id"] for r in data["recent_quizzes"]] == [second, first]
        assert data["recent_quizzes"][0]["percentage"] == 100.0
        assert data["recent_quizzes"][0]["topic"] == "Enzymes"
        assert data["recent_mock_exams"] == []

    def test_recent_results_capped_at_ten(
        self, client: TestClient, premium_headers: dict[str, str]
    ) -> None:
        """Test only the ten latest quizzes are listed."""
        item_ids = [
            _quiz(client, premium_headers, "Biology", "Cells", correct=2, count=2)
            for _ in range(11)
        ]

        data = client.get(f"{API}/dashboard/analytics/Biology", headers=premium_headers).json()

        assert [r["item_id"] for r in data["recent_quizzes"]] == item_ids[:0:-1]

    def test_pending_mock_exam_not_listed(
        self,
        client: TestClient,
        free_headers: dict[str, str],
        fake_generator: FakeContentGenerator,
    ) -> None:
        """Test a mock exam waiting for review has no result yet."""
        fake_generator.rubric = []
        item_id = generate(client, free_headers, "mock_exam", count=2).json()["item_id"]
        questions = client.get(f"{API}/content/{item_id}", headers=free_headers).json()[
            "questions"
        ]
        client.post(
            f"{API}/content/{item_id}/submit",
            json={"answers": [{"question_id": q["id"], "answer": "A"} for q in questions]},
            headers=free_headers,
        )

        data = client.get(f"{API}/dashboard/analytics/Biology", headers=free_headers).json()

        assert data["recent_mock_exams"] == []
        assert data["topics"][0]["summary"]["by_content_type"]["mock_exam"]["generated"] == 1

    def test_unknown_subject_is_empty(
        self, client: TestClient, premium_headers: dict[str, str]
    ) -> None:
        """Test a subject with no activity returns empty lists."""
        response = client.get(f"{API}/dashboard/analytics/Physics", headers=premium_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "subject": "Physics",
            "topics": [],
            "recent_quizzes": [],
            "recent_mock_exams": [],
        }

    def test_requires_auth(self, client: TestClient) -> None:
        """Test analytics needs a bearer token."""
        response = client.get(f"{API}/dashboard/analytics/Biology")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestPerformanceHistory:
    """Test suite for GET /dashboard/history/{subject}."""

    def test_daily_series(
        self,
        client: TestClient,
        premium_headers: dict[str, str],
        fixed_clock: FixedClock,
    ) -> None:
        """Test results are grouped by day, oldest first, skipping idle days."""
        _quiz(client, premium_headers, "Biology", "Cells", correct=1)
        fixed_clock.advance(days=2)
        _quiz(client, premium_headers, "Biology", "Cells", correct=3)
        _quiz(client, premium_headers, "Biology", "Enzymes", correct=4)

        response = client.get(
            f"{API}/dashboard/history/Biology", params={"days": 7}, headers=premium_headers
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["since"] == "2026-03-10"
        assert [d["day"] for d in data["days"]] == ["2026-03-14", "2026-03-16"]
        assert data["days"][0]["quiz"]["average_score"] == 25.0
        assert data["days"][1]["quiz"]["graded"] == 2
        assert data["days"][1]["quiz"]["average_score"] == 87.5
        assert data["days"][1]["mock_exam"]["graded"] == 0

    def test_window_excludes_older_days(
        self,
        client: TestClient,
        premium_headers: dict[str, str],
        fixed_clock: FixedClock,
    ) -> None:
        """Test days before the window are dropped."""
        _quiz(client, premium_headers, "Biology", "Cells", correct=1)
        fixed_clock.advance(days=3)
        _quiz(client, premium_headers, "Biology", "Cells", correct=4)

        data = client.get(
            f"{API}/dashboard/history/Biology", params={"days": 1}, headers=premium_headers
        ).json()

        assert data["since"] == "2026-03-17"
        assert [d["day"] for d in data["days"]] == ["2026-03-17"]

    def test_defaults_to_thirty_days(
        self,
        client: TestClient,
        premium_headers: dict[str, str],
        fixed_clock: FixedClock,
    ) -> None:
        """Test the default window covers thirty days including today."""
        data = client.get(f"{API}/dashboard/history/Biology", headers=premium_headers).json()

        assert data["since"] == "2026-02-13"
        assert data["days"] == []

    def test_rejects_out_of_range_days(
        self, client: TestClient, premium_headers: dict[str, str]
    ) -> None:
        """Test the window must be between one day and a year."""
        for days in (0, 366):
            response = client.get(
                f"{API}/dashboard/history/Biology", params={"days": days}, headers=premium_headers
            )
            assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
