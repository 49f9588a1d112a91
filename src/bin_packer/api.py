"""FastAPI endpoint for the bin packer."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from bin_packer.config import load_settings
from bin_packer.errors import PackingError
from bin_packer.io.schemas import ErrorResponse, PackRequest, PackResponse
from bin_packer.main import format_report
from bin_packer.metrics import summarize
from bin_packer.models import PackingResult
from bin_packer.packing.next_fit import pack

logger = logging.getLogger(__name__)

# Read once at startup
settings = load_settings()

# FastAPI app instance (exactly one)
app = FastAPI(
    title="Bin Packer API",
    description="Packs integer-sized packages into fixed-capacity bins",
)


def format_output(result: PackingResult) -> dict[str, Any]:
    """
    Build the response body for a packing result.

    Returns:
        Dict matching PackResponse: bin count, per-bin sizes, fill rate, summary line
    """
    response = PackResponse(
        bin_count=result.bin_count,
        package_count=result.package_count,
        bins=[b.sizes for b in result.bins],
        fill_rate=result.fill_rate,
        lower_bound=result.lower_bound,
        summary=format_report(result),
    )
    return response.model_dump()


def format_error(error: PackingError) -> dict[str, Any]:
    return ErrorResponse(
        error=error.code,
        summary=str(error),
        details=error.details(),
    ).model_dump()


@app.post("/pack", response_model=PackResponse, responses={422: {"model": ErrorResponse}})
async def pack_endpoint(request: PackRequest) -> Any:
    """
    Pack the request's sizes into bins of the request's capacity.

    Input (request body):
        { "capacity": 10, "sizes": [6, 5, 4] }

    Returns:
        { "bin_count": 2, "bins": [[6], [5, 4]], ... }
    """
    try:
        bins = pack(request.capacity, request.sizes)
        response = format_output(summarize(request.capacity, bins))
    except PackingError as e:
        logger.info(f"Rejected pack request: {e}")
        return JSONResponse(status_code=422, content=format_error(e))
    except Exception as e:
        logger.error(f"ERROR in /pack endpoint: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))

    # Log one concise line
    logger.info(
        f"capacity={request.capacity}, "
        f"packages={response['package_count']}, "
        f"bins={response['bin_count']}"
    )
    return response


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok", "default_bin_size": settings.bin_size}
