# src/autolp_metrics/core/exceptions.py


class AutoLPError(Exception):
    """Error base del cálculo de métricas."""


class SubgraphError(AutoLPError):
    """Fallo de transporte o de la API del Subgraph."""


class NoPositionDataError(AutoLPError):
    """El usuario no tiene eventos de liquidez para el pool consultado."""

    def __init__(self, message: str = "No position data found for this user and pool"):
        super().__init__(message)


class MetricsComputationError(AutoLPError):
    """Envuelve cualquier fallo al obtener los datos externos."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        detail = str(cause) or "Unknown error"
        super().__init__(f"Failed to calculate position metrics: {detail}")
