"""Pytest configuration and shared fixtures"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from resumeai.core.config import Settings
from resumeai.main import create_app
from resumeai.repositories.candidate_repository import CandidateRepository
from resumeai.repositories.seed_data import seed_candidates
from resumeai.services.analysis_provider import RandomAnalysisProvider
from resumeai.services.ingest_service import IngestService
from resumeai.services.notification_service import NotificationCenter


@pytest.fixture
def test_settings() -> Settings:
    """Settings with no simulated delays"""
    return Settings(
        ANALYSIS_DELAY_SECONDS=0,
        RESET_DELAY_SECONDS=0,
        ANALYSIS_SEED=1234,
        LOG_FORMAT="text",
    )


@pytest.fixture
def repository() -> CandidateRepository:
    """Candidate store holding the demo candidates"""
    return CandidateRepository(seed_candidates())


@pytest.fixture
def notifications() -> NotificationCenter:
    return NotificationCenter(limit=50)


@pytest.fixture
def provider() -> RandomAnalysisProvider:
    """Deterministic analysis provider"""
    return RandomAnalysisProvider(seed=1234)


@pytest.fixture
def ingest_service(repository, provider, notifications, test_settings) -> IngestService:
    return IngestService(repository, provider, notifications, config=test_settings)


@pytest.fixture
def app(test_settings) -> FastAPI:
    return create_app(test_settings, RandomAnalysisProvider(seed=1234))


@pytest.fixture
def client(app) -> TestClient:
    """Test client"""
    return TestClient(app)
