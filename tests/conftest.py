"""
Pytest configuration and shared fixtures

The app reads its settings at import time, so the environment is set up
before anything from app is imported.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REDIS_URL"] = "redis://localhost:6399/0"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

import app.models  # noqa: F401
from app.database import Base, SessionLocal, engine
from app.main import app as fastapi_app
from app.models import UserProfile
from app.services import question_bank


@pytest.fixture(autouse=True)
def reset_database():
    """Fresh schema for every test"""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def client():
    with TestClient(fastapi_app) as test_client:
        yield test_client


@pytest.fixture
def profile(db):
    """A 16 year old learner who has not taken the quiz"""
    user = UserProfile(name="Ada", email="ada@example.com", age=16, quiz_completed=False)
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def correct_answer(question):
    if question["type"] == question_bank.MULTIPLE_CHOICE:
        return question["correct"]
    return [{"left_id": p["id"], "right_id": p["id"]} for p in question["pairs"]]


def wrong_answer(question):
    if question["type"] == question_bank.MULTIPLE_CHOICE:
        return (question["correct"] + 1) % len(question["options"])
    ids = [p["id"] for p in question["pairs"]]
    # Swap the first two right-hand items
    rights = [ids[1], ids[0]] + ids[2:]
    return [{"left_id": left, "right_id": right} for left, right in zip(ids, rights)]


def answers_for(targets):
    """
    (question_id, answer) pairs for the whole bank that yield exactly the
    target number of correct answers per style
    """
    remaining = dict(targets)
    plan = []
    for question in question_bank.QUESTIONS:
        style = question["style"]
        if remaining.get(style, 0) > 0:
            remaining[style] -= 1
            plan.append((question["id"], correct_answer(question)))
        else:
            plan.append((question["id"], wrong_answer(question)))
    return plan
