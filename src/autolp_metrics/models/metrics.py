# src/autolp_metrics/models/metrics.py
from pydantic import BaseModel, ConfigDict, Field


class MetricRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class PositionSize(MetricRecord):
    amount0: float
    amount1: float
    total_usd: float = Field(alias="totalUSD")
    token0_symbol: str = Field(alias="token0Symbol")
    token1_symbol: str = Field(alias="token1Symbol")


class EntryData(MetricRecord):
    average_entry_price0: float = Field(alias="averageEntryPrice0")
    average_entry_price1: float = Field(alias="averageEntryPrice1")
    total_deposited_usd: float = Field(alias="totalDepositedUSD")
    total_withdrawn_usd: float = Field(alias="totalWithdrawnUSD")


class CurrentData(MetricRecord):
    current_price0: float = Field(alias="currentPrice0")
    current_price1: float = Field(alias="currentPrice1")
    is_in_range: bool = Field(alias="isInRange")


class ImpermanentLossResult(MetricRecord):
    percentage: float
    entry_value: float = Field(alias="entryValue")
    current_value: float = Field(alias="currentValue")
    hold_value: float = Field(alias="holdValue")
    loss_amount: float = Field(alias="lossAmount")


class PositionMetrics(MetricRecord):
    """Resultado completo para un par usuario/pool. Se construye una vez y no se modifica."""

    position_size: PositionSize = Field(alias="positionSize")
    impermanent_loss: ImpermanentLossResult = Field(alias="impermanentLoss")
    entry_data: EntryData = Field(alias="entryData")
    current_data: CurrentData = Field(alias="currentData")
