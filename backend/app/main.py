# Customs clearance office backend: invoicing, verification and site content.

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api import contact
from backend.app.api import invoices
from backend.app.api import login
from backend.app.api import settings as settings_api
from backend.app.api import verify
from backend.app.api import website_content
from backend.app.core.dev_seed import ensure_default_admin
from backend.app.core.logging import get_logger, setup_logging
from backend.app.core.settings import get_settings
from backend.app.db.base import Base
from backend.app.db.session import SessionLocal, engine

settings = get_settings()
setup_logging(settings.log_level)
logger = get_logger(__name__)

app = FastAPI(title=settings.app_name, version=settings.api_version)

origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    settings.public_base_url,
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(login.router)
app.include_router(settings_api.router)
app.include_router(invoices.router)
app.include_router(verify.router)
app.include_router(contact.router)
app.include_router(website_content.router)


@app.get("/")
def read_root():
    return {"app": "Customs Office Invoicing backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def initialise_database():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_default_admin(db)
    finally:
        db.close()
    logger.info("%s started (%s)", settings.app_name, settings.environment)
