from fastapi import APIRouter, Request, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
import logging
from app.domains.seed.service import Seeder

logger = logging.getLogger(__name__)

router = APIRouter()


def get_seeder(request: Request) -> Seeder:
    return request.app.state.seeder


@router.get("/initialize", response_class=PlainTextResponse)
async def initialize(seeder: Seeder = Depends(get_seeder)):
    try:
        await seeder.seed()
    except Exception as e:
        logger.error(f"Error initializing database: {e}")
        return JSONResponse(
            status_code=500,
            content={"message": "Error initializing database", "error": str(e)},
        )
    return PlainTextResponse("Database initialized with seed data")
