"""
Minimal web API: GET /api/puzzle resolves today's puzzle (NYT document, falling back to
the community archive) and returns {id, date, words, imageMap?}. On total failure returns
500 with a generic message telling the player to enter words manually.
"""

import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv
load_dotenv(PROJECT_ROOT / ".env")

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from daily_puzzle import ResolutionFailure, resolve_puzzle

logger = logging.getLogger(__name__)

# Ensure source fallbacks are visible (NYT failures, archive lag)
for _log in ("daily_puzzle.base", "daily_puzzle.router", "api.nyt", "api.archive", "ui.app"):
    logging.getLogger(_log).setLevel(logging.INFO)


app = FastAPI(title="Connections Helper")


@app.get("/api/puzzle")
def get_todays_puzzle():
    """
    Today's puzzle in the publisher timezone. No parameters.
    Returns { id, date, words, imageMap? }. On failure returns 500 { error, message }.
    """
    result = resolve_puzzle()
    if isinstance(result, ResolutionFailure):
        return JSONResponse(status_code=500, content=result.to_dict())
    logger.info("get_todays_puzzle id=%s date=%s picture=%s", result.id, result.date, result.is_picture_puzzle)
    return result.to_dict()
