"""
Point d'entrée principal de l'API School Registry.
Démarrage : uvicorn school_registry.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import school_registry.models  # noqa: F401 — enregistre tous les modèles dans Base.metadata avant les routers
from school_registry.config import settings
from school_registry.database import init_db
from school_registry.routers import schools, students
from school_registry.validation import validation_exception_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : crée les tables si CREATE_TABLES est activé."""
    if settings.CREATE_TABLES:
        init_db()
        logger.info("Tables créées (ou déjà présentes).")
    yield


app = FastAPI(
    title="School Registry API",
    description="API de gestion des écoles et de leurs élèves",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS — autorise tous les ports localhost en développement (à restreindre en production).
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=False,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


app.include_router(schools.router)
app.include_router(students.router)

app.add_exception_handler(RequestValidationError, validation_exception_handler)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées (erreurs d'intégrité comprises)
    pour que la réponse 500 passe par CORSMiddleware.
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "School Registry API", "version": "0.1.0"}
