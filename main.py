from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from app.domains.transactions.routes import router as transaction_router
from app.domains.transactions.repository import TransactionRepository
from app.domains.transactions.services import TransactionService
from app.domains.seed.routes import router as seed_router
from app.domains.seed.service import Seeder
from app.config.mongodb import mongodb
from app.config.setting import settings
import logging
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.parsed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

repository = TransactionRepository()
app.state.transaction_service = TransactionService(repository)
app.state.seeder = Seeder(repository)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Only combined-data answers 400; every other failure uses the 500 envelope
    logging.error(f"Invalid query parameters for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=500,
        content={"message": "Invalid query parameters", "error": str(exc.errors())},
    )


@app.on_event("startup")
async def startup():
    try:
        await mongodb.init_db(settings.mongo_collection)
    except Exception as e:
        logging.error(f"MongoDB connection failed: {str(e)}")
        raise

    if settings.seed_on_startup:
        try:
            await app.state.seeder.seed()
        except Exception as e:
            # The API keeps serving whatever the store already holds
            logging.error(f"Initial seed failed: {str(e)}")


@app.on_event("shutdown")
def shutdown_db():
    mongodb.close()


app.include_router(transaction_router, prefix="/transactions", tags=["Transaction"])
app.include_router(seed_router, tags=["Seed"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
