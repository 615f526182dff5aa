from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .._version import __version__
from ..config import get_settings
from ..interpreter import get_example_commands, process_voice_input
from ..utils.logging import log_event

LOGGER = logging.getLogger(__name__)

# ---- FastAPI app ----
app = FastAPI(title="voxcalc API", version=__version__)


class CalculateIn(BaseModel):
    text: str = Field(..., description="Transcript or typed phrase")
    locale: Optional[str] = Field(None, description="Number formatting locale override")


class CalculateOut(BaseModel):
    input: str
    parsed: str
    result: str
    category: str
    error: Optional[str] = None


class ExampleGroupOut(BaseModel):
    category: str
    examples: List[str]


@app.get("/health")
def health():
    return {
        "status": "ok",
        "version": __version__,
        "locale": get_settings().locale,
    }


@app.post("/calculate", response_model=CalculateOut)
def calculate(payload: CalculateIn):
    try:
        outcome = process_voice_input(payload.text, locale=payload.locale)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    log_event(
        LOGGER,
        "service.calculate",
        category=outcome.category.value,
        ok=outcome.ok,
    )
    return CalculateOut(
        input=outcome.input,
        parsed=outcome.parsed,
        result=outcome.result,
        category=outcome.category.value,
        error=outcome.error,
    )


@app.get("/examples", response_model=List[ExampleGroupOut])
def examples():
    return [ExampleGroupOut(category=group.category, examples=list(group.examples)) for group in get_example_commands()]
