"""FastAPI application entry point"""

from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder

from resumeai.core.config import Settings, settings as default_settings
from resumeai.core.logging import setup_logging, get_logger
from resumeai.core.middleware import RequestContextMiddleware
from resumeai.core.exceptions import ResumeAIException
from resumeai.repositories.candidate_repository import CandidateRepository
from resumeai.repositories.seed_data import seed_candidates
from resumeai.services.analysis_provider import AnalysisProvider, RandomAnalysisProvider
from resumeai.services.ingest_service import IngestService
from resumeai.services.notification_service import NotificationCenter
from resumeai.api import analytics, candidates, notifications, resumes

logger = get_logger(__name__)


def create_app(
    config: Optional[Settings] = None,
    analysis_provider: Optional[AnalysisProvider] = None
) -> FastAPI:
    """
    Build the application and its in-memory state

    Args:
        config: Settings override, defaults to the environment-loaded settings
        analysis_provider: Provider override, defaults to the random mock

    Returns:
        Configured FastAPI application
    """
    config = config or default_settings
    setup_logging(config)

    app = FastAPI(
        title=config.APP_NAME,
        version=config.APP_VERSION,
        debug=config.DEBUG,
        description="""
## ResumeAI - AI-Powered Resume Screening

Upload resumes, review screened candidates and follow hiring analytics.

### Features

* **Resume Analysis**: Upload a PDF/DOC/DOCX resume with a job description and get a screening score
* **Candidate Review**: Search, filter by status, sort and move candidates through the review workflow
* **Analytics**: Score distribution, status breakdown, top skills and insights
* **Notifications**: Feedback messages for every user-facing action

All state is kept in memory and is lost on restart.
        """,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=f"{config.API_V1_PREFIX}/openapi.json",
        openapi_tags=[
            {
                "name": "Resumes",
                "description": "Resume upload and simulated analysis"
            },
            {
                "name": "Candidates",
                "description": "Candidate listing and review status"
            },
            {
                "name": "Analytics",
                "description": "Aggregate statistics and dashboard summary"
            },
            {
                "name": "Notifications",
                "description": "Recent user-facing messages"
            },
        ],
    )

    # Per-application state; endpoints reach it through api.dependencies
    candidate_repo = CandidateRepository(seed_candidates() if config.LOAD_SEED_DATA else None)
    notification_center = NotificationCenter(limit=config.NOTIFICATION_HISTORY_LIMIT)
    provider = analysis_provider or RandomAnalysisProvider(
        seed=config.ANALYSIS_SEED,
        default_position=config.DEFAULT_POSITION
    )

    app.state.settings = config
    app.state.candidate_repository = candidate_repo
    app.state.notifications = notification_center
    app.state.ingest_service = IngestService(
        candidate_repo,
        provider,
        notification_center,
        config=config
    )

    app.add_middleware(
        RequestContextMiddleware,
        resume_prefix=f"{config.API_V1_PREFIX}/resumes"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    @app.on_event("startup")
    async def startup_event():
        """Application startup tasks"""
        logger.info(f"Starting {config.APP_NAME} v{config.APP_VERSION}")
        logger.info(f"Environment: {config.ENVIRONMENT}")
        logger.info(f"Loaded {candidate_repo.count()} candidates")

    @app.on_event("shutdown")
    async def shutdown_event():
        """Application shutdown tasks"""
        logger.info("Shutting down application")
        await app.state.ingest_service.shutdown()

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "name": config.APP_NAME,
            "version": config.APP_VERSION,
            "status": "running",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy"}

    app.include_router(resumes.router, prefix=f"{config.API_V1_PREFIX}/resumes", tags=["Resumes"])
    app.include_router(candidates.router, prefix=f"{config.API_V1_PREFIX}/candidates", tags=["Candidates"])
    app.include_router(analytics.router, prefix=f"{config.API_V1_PREFIX}/analytics", tags=["Analytics"])
    app.include_router(notifications.router, prefix=f"{config.API_V1_PREFIX}/notifications", tags=["Notifications"])

    return app


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as {error, details, request_id}"""

    @app.exception_handler(ResumeAIException)
    async def resumeai_exception_handler(request: Request, exc: ResumeAIException):
        """Handle custom ResumeAI exceptions"""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.error(
            f"ResumeAI exception: {exc.message}",
            extra={
                "request_id": request_id,
                "status_code": exc.status_code,
            }
        )

        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.message,
                "details": jsonable_encoder(exc.details),
                "request_id": request_id,
            }
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle Pydantic validation errors"""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.warning(
            f"Validation error: {exc.errors()}",
            extra={"request_id": request_id}
        )

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={
                "error": "Validation error",
                "details": jsonable_encoder(exc.errors()),
                "request_id": request_id,
            }
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions"""
        request_id = getattr(request.state, "request_id", "unknown")

        logger.error(
            f"Unhandled exception: {str(exc)}",
            extra={"request_id": request_id},
            exc_info=True
        )

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "details": {"message": "An unexpected error occurred"},
                "request_id": request_id,
            }
        )


app = create_app()
