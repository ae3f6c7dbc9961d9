"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import math
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from fenceline import __version__
from fenceline.config import Settings, configure_logging, load_settings
from fenceline.engine import FenceEstimator
from fenceline.exceptions import FencelineError, ValidationError
from fenceline.models.enums import FenceType, ValidationErrorKind
from fenceline.models.pricing import PricingConfig
from fenceline.models.takeoff import EstimationInput, EstimationResult
from fenceline.validation import check_run_lengths_finite

logger = logging.getLogger(__name__)


class CostRequest(BaseModel):
    """Body of POST /api/cost."""

    result: EstimationResult
    pricing: PricingConfig


def create_app(
    *,
    estimator: FenceEstimator | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    estimator
        Optional pre-built estimator for dependency injection (e.g. tests).
        If not provided, one is created via create_default_estimator on
        first request.
    settings
        Optional settings; read from the environment when omitted.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)
    app = FastAPI(title="fenceline", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.estimator = estimator
    app.state.settings = settings

    def _get_estimator() -> FenceEstimator:
        est: FenceEstimator | None = app.state.estimator
        if est is not None:
            return est
        from fenceline.factory import create_default_estimator

        est = create_default_estimator(app.state.settings)
        app.state.estimator = est
        return est

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.info("Rejected takeoff input on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=422, content=exc.to_dict())

    @app.exception_handler(FencelineError)
    async def engine_error_handler(
        request: Request, exc: FencelineError
    ) -> JSONResponse:
        logger.exception("Estimation error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    # ------------------------------------------------------------------
    # POST /api/takeoff
    # ------------------------------------------------------------------

    @app.post("/api/takeoff")
    def takeoff(estimation_input: EstimationInput) -> dict[str, Any]:
        check_run_lengths_finite(estimation_input)
        result = _get_estimator().takeoff.compute(estimation_input)
        return result.to_dict()

    # ------------------------------------------------------------------
    # POST /api/cost
    # ------------------------------------------------------------------

    @app.post("/api/cost")
    def cost(body: CostRequest) -> dict[str, Any]:
        if not math.isfinite(body.result.fabric_footage):
            raise ValidationError(
                ValidationErrorKind.INVALID_RUN_LENGTH,
                "result.fabric_footage",
                f"Fabric footage {body.result.fabric_footage!r} is not a finite number",
            )
        calculator = _get_estimator().cost
        total = calculator.compute_cost(body.result, body.pricing)
        breakdown = calculator.breakdown(body.result, body.pricing)
        return {
            "total": total,
            "breakdown": breakdown.model_dump(mode="json"),
        }

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(estimation_input: EstimationInput) -> dict[str, Any]:
        check_run_lengths_finite(estimation_input)
        result = _get_estimator().estimate(estimation_input)
        payload = result.model_dump(mode="json", exclude={"result"})
        payload["result"] = result.result.to_dict()
        payload["summary"] = result.to_summary_dict()
        return payload

    # ------------------------------------------------------------------
    # GET /api/pricing/{fence_type}/{fence_height}
    # ------------------------------------------------------------------

    @app.get("/api/pricing/{fence_type}/{fence_height}")
    def pricing(fence_type: FenceType, fence_height: str) -> dict[str, Any]:
        price_list = _get_estimator().pricing.get_pricing(fence_type, fence_height)
        if price_list is None:
            raise HTTPException(
                status_code=404,
                detail=f"No pricing found for {fence_type} {fence_height}'",
            )
        return price_list.model_dump(mode="json")

    return app
