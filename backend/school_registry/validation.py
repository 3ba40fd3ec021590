"""
Traduction des erreurs de validation des requêtes en réponse 400 {champ: message}.
Un seul message par champ : en cas de violations multiples, le dernier l'emporte.
"""

import logging
from typing import Any, Dict, Iterable, Mapping

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


def field_errors(errors: Iterable[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Construit le dictionnaire champ → message à partir des erreurs pydantic.
    Le champ est le dernier élément de la localisation (("body", "name") → "name").
    """
    result: Dict[str, str] = {}
    for error in errors:
        loc = error.get("loc") or ()
        field = str(loc[-1]) if loc else "__root__"
        result[field] = _message(error)
    return result


def _message(error: Mapping[str, Any]) -> str:
    # Les ValueError de nos validateurs sont préfixées "Value error, " par pydantic
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return str(error.get("msg", ""))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = field_errors(exc.errors())
    logger.info("Requête invalide %s %s : champs %s", request.method, request.url.path, sorted(errors))
    return JSONResponse(status_code=400, content=errors)
