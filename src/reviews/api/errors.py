"""HTTP error mapping for the Reviews API.

Builds on Protean's FastAPI exception handlers (400 for validation errors,
404 for unknown objects) and adds the mappings the review contract relies
on: eligibility refusals carry their reason code and repeated moderation
decisions are conflicts.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import InvalidOperationError
from protean.integrations.fastapi import register_exception_handlers

from reviews.review.exceptions import IneligibleToReview


def register_review_exception_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)

    @app.exception_handler(IneligibleToReview)
    async def ineligible_handler(request: Request, exc: IneligibleToReview) -> JSONResponse:
        content = {"error": exc.messages, "reason": exc.reason, "message": exc.message}
        if exc.existing_review is not None:
            content["existing_review"] = {
                "id": exc.existing_review.id,
                "title": exc.existing_review.title,
                "status": exc.existing_review.status,
            }
        return JSONResponse(status_code=400, content=content)

    @app.exception_handler(InvalidOperationError)
    async def conflict_handler(request: Request, exc: InvalidOperationError) -> JSONResponse:
        return JSONResponse(status_code=409, content={"error": str(exc)})
