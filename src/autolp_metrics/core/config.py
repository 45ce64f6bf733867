# src/autolp_metrics/core/config.py
import os
import logging
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- 1. Definiciones ---
logger = logging.getLogger(__name__)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', '..'))

DEFAULT_SUBGRAPH_URL = (
    "https://gateway.thegraph.com/api/subgraphs/id/"
    "EoCvJ5tyMLMJcTnLQwWpjAtPdn74PcrZgzfcT5bYxNBH"
)
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'

# --- 2. Clase de Configuración ---
class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        extra="ignore",
    )

    # --- The Graph ---
    SUBGRAPH_URL: str = DEFAULT_SUBGRAPH_URL
    SUBGRAPH_API_KEY: Optional[str] = None
    SUBGRAPH_TIMEOUT_SECONDS: int = 30

    # --- Logging ---
    LOG_LEVEL: str = "INFO"


def configure_logging(level: str | None = None) -> None:
    """Aplica el formato de logging del proyecto al logger raíz."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)

# --- 3. Instancia ---
settings = Settings()

# --- 4. Verificación ---
if not settings.SUBGRAPH_API_KEY:
    logger.error("Se requiere SUBGRAPH_API_KEY en el archivo .env para consultar el Subgraph.")
else:
    logger.info("Configuración de The Graph cargada exitosamente.")
