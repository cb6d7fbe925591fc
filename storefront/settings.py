import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
ENV_PATH = os.path.join(BASE_DIR, ".env")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=ENV_PATH,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # ---- Server ----
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")
    # Single allowed origin; unset means any origin
    cors_origin: Optional[str] = Field(default=None, alias="CORS_ORIGIN")

    # ---- Data files ----
    data_dir: str = Field(default="data", alias="DATA_DIR")
    products_file: str = Field(default="products.json", alias="PRODUCTS_FILE")
    orders_file: str = Field(default="orders.json", alias="ORDERS_FILE")
    admin_dir: str = Field(default="admin", alias="ADMIN_DIR")

    # ---- Behaviour ----
    # Re-read products.json on every GET /api/products (500 on a bad file)
    products_live_reload: bool = Field(default=False, alias="PRODUCTS_LIVE_RELOAD")
    # Let an "id" in the order body replace the generated order id
    allow_client_order_id: bool = Field(default=True, alias="ALLOW_CLIENT_ORDER_ID")

    # ---- Logging ----
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # relative folders live next to the project, not the working directory
    @property
    def data_path(self) -> str:
        return os.path.join(BASE_DIR, self.data_dir)

    @property
    def admin_path(self) -> str:
        return os.path.join(BASE_DIR, self.admin_dir)

    def _resolve(self, name: str) -> str:
        return os.path.join(self.data_path, name)

    @property
    def products_path(self) -> str:
        return self._resolve(self.products_file)

    @property
    def orders_path(self) -> str:
        return self._resolve(self.orders_file)


settings = Settings()
