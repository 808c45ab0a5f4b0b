from fastapi import APIRouter, Request, Depends
from fastapi.responses import JSONResponse
import logging
from typing import Optional
from app.domains.transactions.services import TransactionService

logger = logging.getLogger(__name__)

router = APIRouter()


def get_transaction_service(request: Request) -> TransactionService:
    return request.app.state.transaction_service


def error_response(message: str, error: Exception, status_code: int = 500) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, "error": str(error)})


@router.get("")
async def list_transactions(
    search: Optional[str] = None,
    page: int = 1,
    per_page: int = 10,
    service: TransactionService = Depends(get_transaction_service)
):
    try:
        result = await service.list_transactions(search, page, per_page)
        return result.model_dump(mode="json")
    except Exception as e:
        logger.error(f"Error fetching transactions: {e}")
        return error_response("Error fetching transactions", e)


@router.get("/statistics")
async def get_statistics(
    month: Optional[str] = None,
    service: TransactionService = Depends(get_transaction_service)
):
    try:
        statistics = await service.get_statistics(month)
        return statistics.model_dump(mode="json")
    except Exception as e:
        logger.error(f"Error fetching statistics: {e}")
        return error_response("Error fetching statistics", e)


@router.get("/bar-chart")
async def get_bar_chart(
    month: Optional[str] = None,
    service: TransactionService = Depends(get_transaction_service)
):
    try:
        return await service.get_bar_chart(month)
    except Exception as e:
        logger.error(f"Error fetching bar chart data: {e}")
        return error_response("Error fetching bar chart data", e)


@router.get("/pie-chart")
async def get_pie_chart(
    month: Optional[str] = None,
    service: TransactionService = Depends(get_transaction_service)
):
    try:
        return await service.get_pie_chart(month)
    except Exception as e:
        logger.error(f"Error fetching pie chart data: {e}")
        return error_response("Error fetching pie chart data", e)


@router.get("/combined-data")
async def get_combined_data(
    month: Optional[str] = None,
    service: TransactionService = Depends(get_transaction_service)
):
    if not month:
        return JSONResponse(
            status_code=400,
            content={"message": "Month query parameter is required", "error": "missing month"},
        )
    try:
        combined = await service.get_combined_data(month)
        return combined.model_dump(mode="json")
    except Exception as e:
        logger.error(f"Error fetching combined data: {e}")
        return error_response("Error fetching combined data", e)
