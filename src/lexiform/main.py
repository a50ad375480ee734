"""lexiform FastAPI application - naming-convention inference API."""

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from lexiform import __version__
from lexiform.config import Settings
from lexiform.models import (
    ActionRequest,
    DeriveRequest,
    WordRequest,
    TypeNameRequest,
    ConjugateResponse,
    VerbFieldsResponse,
    DeriveResponse,
    InflectResponse,
    NounResponse,
    TypeMetaResponse,
)
from lexiform.services.analysis import TypeMetaCache, infer_noun
from lexiform.services.conjugation import Conjugator, KnownVerbs
from lexiform.services.noun import plural_rule, pluralize, singular_rule, singularize
from lexiform.services.verb import VerbForm, derive


# ============================================================================
# Settings & Shared State
# ============================================================================


# A local .env fills in LEXIFORM_* variables not already set
load_dotenv()
settings = Settings.from_env()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

conjugator = Conjugator(KnownVerbs.load(settings.known_verbs_path))
type_meta_cache = TypeMetaCache.get_instance()


# ============================================================================
# FastAPI Application
# ============================================================================


app = FastAPI(
    title="lexiform API",
    description="""Naming-convention inference for schema code.

## Features
- **Conjugation**: actor, present tense, gerund, result noun and reverse fields for an action
- **Nouns**: pluralize and singularize
- **Type metadata**: phrases, slugs, audit fields and event names for a type name

## Endpoints
- `/conjugate` - Full verb record for an action
- `/verb_fields` - Reverse fields of a registered action
- `/derive` - Individual verb forms
- `/pluralize`, `/singularize` - Noun inflection
- `/noun` - Singular/plural phrases for a type name
- `/type_meta` - Complete (cached) type metadata
""",
    version=__version__,
)


# ============================================================================
# Middleware
# ============================================================================


app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Health Endpoints
# ============================================================================


@app.get("/", tags=["Health"])
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "service": "lexiform", "version": __version__}


@app.get("/health", tags=["Health"])
async def health() -> dict[str, str | int]:
    """Detailed health check."""
    return {
        "status": "healthy",
        "version": __version__,
        "known_verbs": len(conjugator.known_verbs),
        "cached_types": len(type_meta_cache),
    }


# ============================================================================
# Verb Endpoints
# ============================================================================


@app.post("/conjugate", response_model=ConjugateResponse, response_model_exclude_none=True, tags=["Verbs"])
async def conjugate_endpoint(request: ActionRequest) -> ConjugateResponse:
    """
    Conjugate an action.

    Registered verbs come back exactly as registered; anything else is
    derived from its spelling.
    """
    try:
        forms = conjugator.conjugate(request.action)
        return ConjugateResponse.model_validate(forms.to_dict())
    except Exception as e:
        logger.exception("Conjugation failed for %r", request.action)
        raise HTTPException(status_code=500, detail=f"Conjugation failed: {e!s}") from e


@app.post("/verb_fields", response_model=VerbFieldsResponse, tags=["Verbs"])
async def verb_fields_endpoint(request: ActionRequest) -> VerbFieldsResponse:
    """Reverse fields of a registered action (empty for unregistered ones)."""
    return VerbFieldsResponse(action=request.action, reverse=conjugator.get_verb_fields(request.action))


@app.post("/derive", response_model=DeriveResponse, tags=["Verbs"])
async def derive_endpoint(request: DeriveRequest) -> DeriveResponse:
    """
    Derive individual verb forms.

    Specify which forms you want, or get all of them.
    """
    requested_forms = [form.value for form in VerbForm] if request.forms is None else request.forms
    try:
        forms = {
            form_name: derive(request.verb, form_name.lower().replace("-", "_").replace(" ", "_"))
            for form_name in requested_forms
        }
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return DeriveResponse(verb=request.verb, forms=forms)


# ============================================================================
# Noun Endpoints
# ============================================================================


@app.post("/pluralize", response_model=InflectResponse, tags=["Nouns"])
async def pluralize_endpoint(request: WordRequest) -> InflectResponse:
    """Pluralize a noun."""
    return InflectResponse(word=request.word, result=pluralize(request.word), rule=plural_rule(request.word))


@app.post("/singularize", response_model=InflectResponse, tags=["Nouns"])
async def singularize_endpoint(request: WordRequest) -> InflectResponse:
    """Singularize a noun."""
    return InflectResponse(word=request.word, result=singularize(request.word), rule=singular_rule(request.word))


# ============================================================================
# Type Endpoints
# ============================================================================


@app.post("/noun", response_model=NounResponse, tags=["Types"])
async def noun_endpoint(request: TypeNameRequest) -> NounResponse:
    """Singular and plural phrases for a type name."""
    return NounResponse.model_validate(infer_noun(request.type_name).to_dict())


@app.post("/type_meta", response_model=TypeMetaResponse, tags=["Types"])
async def type_meta_endpoint(request: TypeNameRequest) -> TypeMetaResponse:
    """
    Naming conventions for a type name.

    Served from the process-wide cache; repeated names are computed once.
    """
    try:
        meta = type_meta_cache.get(request.type_name)
        return TypeMetaResponse.model_validate(meta.to_dict())
    except Exception as e:
        logger.exception("Type metadata failed for %r", request.type_name)
        raise HTTPException(status_code=500, detail=f"Type metadata failed: {e!s}") from e


# ============================================================================
# CLI Entry Point
# ============================================================================


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "lexiform.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    run()
