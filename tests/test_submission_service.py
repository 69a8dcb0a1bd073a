"""
Unit tests for quiz submission and its write paths
"""
import uuid

import pytest
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from app.models import QuizResult, QuizSession, UserProfile
from app.services.exceptions import PersistenceError, ProfileNotFoundError, QuizSessionError
from app.services.submission_service import SubmissionService, submission_service


def completed_session(db, profile, visual, auditory, reading_writing, kinesthetic):
    session = QuizSession(
        user_id=profile.id,
        current_question_index=40,
        answers=[0] * 40,
        visual_score=visual,
        auditory_score=auditory,
        reading_writing_score=reading_writing,
        kinesthetic_score=kinesthetic,
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def transient_failure(*args, **kwargs):
    raise OperationalError("INSERT INTO quiz_results", {}, Exception("connection reset"))


class TestSubmitSession:

    def test_end_to_end_scores(self, db, profile):
        session = completed_session(db, profile, 8, 6, 4, 9)

        outcome = submission_service.submit_session(db, session.id)
        result = outcome.result

        assert result.dominant_style == "kinesthetic"
        assert result.quiz_level == "intermediate"
        assert result.total_score == 27
        assert result.dominance_percentage == 11.1
        assert result.time_taken >= 0

    def test_profile_updated_and_session_closed(self, db, profile):
        session = completed_session(db, profile, 2, 9, 1, 0)

        submission_service.submit_session(db, session.id)

        db.refresh(profile)
        assert profile.learning_style == "auditory"
        assert profile.quiz_completed is True
        assert db.query(QuizSession).count() == 0
        assert db.query(QuizResult).count() == 1

    def test_latest_attempt_wins_on_profile(self, db, profile):
        submission_service.submit_session(db, completed_session(db, profile, 9, 0, 0, 0).id)
        submission_service.submit_session(db, completed_session(db, profile, 0, 0, 9, 0).id)

        db.refresh(profile)
        assert profile.learning_style == "reading_writing"
        assert db.query(QuizResult).count() == 2

    def test_incomplete_session_rejected(self, db, profile):
        session = completed_session(db, profile, 1, 1, 1, 1)
        session.current_question_index = 12
        db.commit()

        with pytest.raises(QuizSessionError, match="12 of 40"):
            submission_service.submit_session(db, session.id)
        assert db.query(QuizResult).count() == 0

    def test_missing_age_uses_default(self, db):
        ageless = UserProfile(name="Lin", email="lin@example.com", quiz_completed=False)
        db.add(ageless)
        db.commit()

        outcome = submission_service.submit_session(db, completed_session(db, ageless, 1, 0, 0, 0).id)

        assert outcome.result.quiz_level == "intermediate"


class TestSubmitScores:

    @pytest.mark.parametrize("age, level", [(13, "beginner"), (14, "intermediate"), (20, "advanced")])
    def test_age_override(self, db, profile, age, level):
        outcome = submission_service.submit_scores(
            db, profile.id, {"visual": 1, "auditory": 0, "reading_writing": 0, "kinesthetic": 0}, age=age
        )
        assert outcome.result.quiz_level == level

    def test_all_zero_scores(self, db, profile):
        outcome = submission_service.submit_scores(
            db, profile.id, {"visual": 0, "auditory": 0, "reading_writing": 0, "kinesthetic": 0}
        )
        assert outcome.result.dominant_style == "visual"
        assert outcome.classification.dominance_percentage == 0.0

    def test_unknown_profile(self, db):
        with pytest.raises(ProfileNotFoundError):
            submission_service.submit_scores(
                db, uuid.uuid4(), {"visual": 1, "auditory": 0, "reading_writing": 0, "kinesthetic": 0}
            )


class TestWritePaths:

    def test_secondary_path_after_retries(self, db, profile, monkeypatch):
        service = SubmissionService(max_retries=1)
        calls = []

        def failing_primary(*args):
            calls.append(args)
            transient_failure()

        monkeypatch.setattr(service, "_write_primary", failing_primary)
        session = completed_session(db, profile, 3, 7, 2, 1)

        outcome = service.submit_session(db, session.id)

        assert len(calls) == 2
        # Every attempt carried the same precomputed record
        assert calls[0][1] is calls[1][1]
        assert outcome.result.dominant_style == "auditory"
        assert outcome.result.id == calls[0][1]["id"]

        db.refresh(profile)
        assert profile.learning_style == "auditory"
        assert profile.quiz_completed is True
        assert db.query(QuizSession).count() == 0

    def test_primary_recovers_on_retry(self, db, profile, monkeypatch):
        service = SubmissionService(max_retries=2)
        real_primary = service._write_primary
        attempts = {"count": 0}

        def flaky_primary(*args):
            attempts["count"] += 1
            if attempts["count"] == 1:
                transient_failure()
            return real_primary(*args)

        def unexpected_secondary(*args):
            raise AssertionError("secondary path should not be used")

        monkeypatch.setattr(service, "_write_primary", flaky_primary)
        monkeypatch.setattr(service, "_write_secondary", unexpected_secondary)

        outcome = service.submit_scores(
            db, profile.id, {"visual": 9, "auditory": 0, "reading_writing": 0, "kinesthetic": 8}
        )

        assert attempts["count"] == 2
        assert outcome.result.dominant_style == "visual"
        assert db.query(QuizResult).count() == 1

    def test_all_paths_failing_raises(self, db, profile, monkeypatch):
        service = SubmissionService(max_retries=0)

        def failing_secondary(*args):
            raise SQLAlchemyError("database unavailable")

        monkeypatch.setattr(service, "_write_primary", transient_failure)
        monkeypatch.setattr(service, "_write_secondary", failing_secondary)
        session = completed_session(db, profile, 1, 2, 3, 4)

        with pytest.raises(PersistenceError):
            service.submit_session(db, session.id)

        assert db.query(QuizResult).count() == 0
        assert db.query(QuizSession).count() == 1
        db.refresh(profile)
        assert profile.quiz_completed is False
