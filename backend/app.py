"""
Backend API Service

FastAPI application serving the employee settings forms, the one-time
login link tool and the greeting page.

Persistence: SQLite database holding named configuration and users.
"""

import logging
import sys
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

from backend.config import (
    API_TITLE, API_DESCRIPTION, API_VERSION,
    BACKEND_HOST, BACKEND_PORT, USER_ID_HEADER, VERBOSE,
)
from formkit.config.settings import LOG_LEVEL
from backend.models import (
    SubmissionRequest, SubmissionResponse, FieldValidationError, StatusMessage,
    FieldValidationRequest, FieldValidationResponse, FormConfigResponse,
    LoginLinkRequest, LoginLinkResponse, LoginLinkVerifyResponse,
    GreetingResponse, HealthResponse,
)
from formkit.accounts import InvalidLoginLinkError, OneTimeLoginService, greet
from formkit.db.database import get_db, close_db
from formkit.db.stores import ConfigStore, UserStore
from formkit.forms import (
    FormNotFoundError, FormService, LiveValidationDisabled, Messenger,
    UnknownFieldError, get_form, list_forms,
)
from formkit.logic.validators import SubmissionInput


def _log_level():
    """VERBOSE forces DEBUG; otherwise LOG_LEVEL applies."""
    return logging.DEBUG if VERBOSE else LOG_LEVEL.upper()


# Configure logging
logging.basicConfig(
    level=_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Module-level persistence (initialized in lifespan)
config_store: ConfigStore | None = None
user_store: UserStore | None = None
login_service: OneTimeLoginService | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown."""
    global config_store, user_store, login_service

    # Startup
    logger.info("Starting Employee Settings Forms...")

    from formkit.config.settings import DB_PATH

    conn = get_db(DB_PATH)
    config_store = ConfigStore(conn)
    user_store = UserStore(conn)
    login_service = OneTimeLoginService(user_store)

    logger.info(f"Database ready: {DB_PATH}")
    logger.info(f"Loaded {len(list_forms())} form(s)")

    yield

    # Shutdown
    close_db()
    logger.info("Shutdown complete")


# Create app
app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _form_service() -> FormService:
    """Form service bound to a fresh messenger for this request."""
    return FormService(config_store, Messenger())


# =========================================================================
# Health
# =========================================================================


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Check service health."""
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        forms_loaded=len(list_forms()),
    )


# =========================================================================
# Form Endpoints
# =========================================================================


@app.get("/forms", response_model=list)
async def get_forms():
    """List all available forms."""
    return [form.to_dict() for form in list_forms()]


@app.get("/forms/{form_id}")
async def get_form_definition(form_id: str):
    """Get the field layout of a form."""
    try:
        return get_form(form_id).to_dict()
    except FormNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.post(
    "/forms/{form_id}/fields/{field_name}/validate",
    response_model=FieldValidationResponse,
)
async def validate_field(form_id: str, field_name: str, request: FieldValidationRequest):
    """Validate one field as the user types."""
    service = _form_service()
    try:
        message = service.validate_field(form_id, field_name, request.value)
    except (FormNotFoundError, UnknownFieldError) as e:
        raise HTTPException(status_code=404, detail=str(e))
    except LiveValidationDisabled as e:
        raise HTTPException(status_code=400, detail=str(e))

    return FieldValidationResponse(
        field=message.field,
        selector=message.selector,
        valid=message.valid,
        message=message.message,
    )


@app.post("/forms/{form_id}/submit", response_model=SubmissionResponse)
async def submit_form(form_id: str, request: SubmissionRequest):
    """Validate a form submission and save it when every field passes."""
    service = _form_service()
    data = SubmissionInput(
        fullname=request.fullname,
        phone=request.phone,
        email=request.email,
        gender=request.gender,
    )
    try:
        result = service.submit(form_id, data)
    except FormNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return SubmissionResponse(
        form_id=form_id,
        valid=result.valid,
        errors=[
            FieldValidationError(field=e.field, message=e.message, kind=e.kind.value)
            for e in result.errors
        ],
        messages=[StatusMessage(**m) for m in service.messenger.delete_all()],
    )


@app.get("/forms/{form_id}/config", response_model=FormConfigResponse)
async def get_form_config(form_id: str):
    """Get the values saved by a form."""
    try:
        form = get_form(form_id)
    except FormNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return FormConfigResponse(
        form_id=form.form_id,
        config_name=form.config_name,
        values=_form_service().get_config(form_id),
    )


# =========================================================================
# Account Endpoints
# =========================================================================


@app.post("/one-time-login", response_model=LoginLinkResponse)
async def generate_login_link(request: LoginLinkRequest):
    """Generate a one-time login link for a user id."""
    result = login_service.generate_link(request.user_id)
    return LoginLinkResponse(message=result.message, link=result.link)


@app.get("/user/reset/{uid}/{timestamp}/{hashed}", response_model=LoginLinkVerifyResponse)
async def use_login_link(uid: int, timestamp: int, hashed: str):
    """Log in with a one-time link."""
    try:
        user = login_service.verify_link(uid, timestamp, hashed)
    except InvalidLoginLinkError as e:
        raise HTTPException(status_code=403, detail=str(e))
    return LoginLinkVerifyResponse(uid=user.uid, name=user.display_name)


@app.get("/hello", response_model=GreetingResponse)
async def hello(user_id: Optional[int] = Header(None, alias=USER_ID_HEADER)):
    """Greet the current user."""
    user = user_store.get(user_id) if user_id else None
    return GreetingResponse(message=greet(user))


# =========================================================================
# Run
# =========================================================================

if __name__ == "__main__":
    import uvicorn

    port = BACKEND_PORT
    # Auto-find port if default is in use
    import socket
    while True:
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
                s.bind(("", port))
                break
        except OSError:
            port += 1

    logger.info(f"Starting backend on port {port}")
    uvicorn.run(app, host=BACKEND_HOST, port=port)
