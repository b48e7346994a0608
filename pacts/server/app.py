#!/usr/bin/env python3
"""
PACTS FastAPI Server
Provides REST API for precondition extraction and checking
"""
import logging
from typing import Any, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from pacts import __version__
from pacts.core.config import configure_logging, get_settings
from pacts.core.errors import ContractError
from pacts.core.models import CheckKind, PreconditionDescriptor
from pacts.extractor import ConditionExtractor, parse_docstring
from pacts.parser import ContractSourceParser
from pacts.router import ContractRouter

logger = logging.getLogger(__name__)


# ============================================================================
# Request/Response Models
# ============================================================================

class DescriptorModel(BaseModel):
    check: CheckKind
    type: str
    param: int


class ExtractRequest(BaseModel):
    docstring: Optional[str] = ""


class ExtractResponse(BaseModel):
    has_precondition: bool
    preconditions: List[DescriptorModel]


class InspectRequest(BaseModel):
    source: str


class FunctionEntry(BaseModel):
    name: str
    class_name: Optional[str] = None
    lineno: int
    preconditions: List[DescriptorModel]


class InspectResponse(BaseModel):
    functions: List[FunctionEntry]


class CheckRequest(BaseModel):
    descriptors: List[DescriptorModel]
    args: List[Any] = []


class CheckResultModel(BaseModel):
    descriptor: DescriptorModel
    passed: bool
    skipped: bool
    reason: str


class CheckResponse(BaseModel):
    passed: bool
    results: List[CheckResultModel]


class HealthResponse(BaseModel):
    status: str
    version: str


# ============================================================================
# FastAPI App
# ============================================================================

app = FastAPI(
    title="PACTS API",
    description="Docstring precondition extraction and checking",
    version=__version__
)


@app.get("/", response_model=HealthResponse)
async def health():
    """Health check endpoint"""
    return {"status": "ok", "version": __version__}


@app.post("/api/extract", response_model=ExtractResponse)
async def extract(request: ExtractRequest):
    """
    Extract preconditions from a docstring.

    Example:
        POST /api/extract
        {"docstring": "@param int a\\n@pre positive 1"}
    """
    descriptors = parse_docstring(request.docstring)
    return {
        "has_precondition": bool(descriptors),
        "preconditions": [d.to_dict() for d in descriptors]
    }


@app.post("/api/inspect", response_model=InspectResponse)
async def inspect_source(request: InspectRequest):
    """List the preconditions of every function in a source file"""
    try:
        functions = ContractSourceParser().parse_source(request.source)
    except SyntaxError as e:
        raise HTTPException(status_code=400, detail=f"Invalid source: {e}")

    return {
        "functions": [
            {
                "name": func["name"],
                "class_name": func["class"],
                "lineno": func["lineno"],
                "preconditions": func["preconditions"]
            }
            for func in functions
        ]
    }


@app.post("/api/check", response_model=CheckResponse)
async def check(request: CheckRequest):
    """
    Evaluate descriptors against a list of argument values.

    Custom checks resolve against the default registry.
    """
    descriptors = [
        PreconditionDescriptor(d.check, d.type, d.param) for d in request.descriptors
    ]
    extractor = ConditionExtractor(lambda _name: None)
    extractor.load("request", descriptors)
    router = ContractRouter(extractor)

    try:
        results = router.evaluate("request", request.args)
    except ContractError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "passed": all(result.passed for result in results),
        "results": [result.to_dict() for result in results]
    }


# ============================================================================
# Run Server
# ============================================================================

def main():
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting PACTS API on http://%s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
