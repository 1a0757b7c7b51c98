"""Business logic services"""

from resumeai.services.analysis_provider import AnalysisProvider, RandomAnalysisProvider
from resumeai.services.analytics_service import build_analytics_report, build_dashboard_summary
from resumeai.services.ingest_service import IngestService, IngestState
from resumeai.services.notification_service import NotificationCenter

__all__ = [
    'AnalysisProvider',
    'RandomAnalysisProvider',
    'build_analytics_report',
    'build_dashboard_summary',
    'IngestService',
    'IngestState',
    'NotificationCenter',
]
