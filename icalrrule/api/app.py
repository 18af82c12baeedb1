"""FastAPI web application for icalrrule."""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field

from icalrrule.models.recurrence import RecurrenceRule
from icalrrule.recurrence.rrule_export import rule_to_property_line, rule_to_rrule

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="icalrrule API",
    description="Encodes iCalendar recurrence rules to their canonical RRULE text",
    version="0.1.0"
)


# Response models
class RRuleResponse(BaseModel):
    """Response for rule encoding."""
    rrule: str = Field(..., description="RRULE value without the property name")
    property_line: str = Field(..., description="Full content line, e.g. 'RRULE:FREQ=DAILY'")


@app.exception_handler(RequestValidationError)
async def log_validation_error(request: Request, exc: RequestValidationError):
    """Log rejected rules, then answer with FastAPI's standard 422 body."""
    error_types = sorted({e.get("type", "unknown") for e in exc.errors()})
    logger.warning(f"Rejected {request.method} {request.url.path}: {', '.join(error_types)}")
    return await request_validation_exception_handler(request, exc)


@app.get("/health")
async def health():
    """Liveness probe."""
    return {"status": "ok"}


@app.post("/rrule", response_model=RRuleResponse)
async def encode_rrule(rule: RecurrenceRule):
    """Encode a recurrence rule.

    `until` and `count` are accepted as top-level keys; sending both is a 422.
    """
    return RRuleResponse(rrule=rule_to_rrule(rule), property_line=rule_to_property_line(rule))
