from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Transaction Dashboard API"
    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 4000
    allowed_origins: str = "*"
    log_level: str = "INFO"

    @property
    def parsed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]

    # MongoDB settings
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "transactions_dashboard"
    mongo_collection: str = "Transaction"
    mongo_timeout_ms: int = 5000

    # Seed feed settings
    seed_url: str = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"
    seed_timeout: float = 30.0
    seed_on_startup: bool = True

    # Dashboard client settings
    dashboard_api_url: str = "http://localhost:4000/transactions"
    dashboard_timeout: float = 10.0

    # All month queries are scoped to this year
    sales_year: int = 2022

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
