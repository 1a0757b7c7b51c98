"""Request dependencies resolving the per-application service objects"""

from fastapi import Request

from resumeai.repositories.candidate_repository import CandidateRepository
from resumeai.services.ingest_service import IngestService
from resumeai.services.notification_service import NotificationCenter


def get_candidate_repository(request: Request) -> CandidateRepository:
    """Dependency to get the candidate store"""
    return request.app.state.candidate_repository


def get_ingest_service(request: Request) -> IngestService:
    """Dependency to get the ingest workflow"""
    return request.app.state.ingest_service


def get_notification_center(request: Request) -> NotificationCenter:
    """Dependency to get the notification center"""
    return request.app.state.notifications
