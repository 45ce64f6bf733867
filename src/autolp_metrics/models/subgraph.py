# src/autolp_metrics/models/subgraph.py
"""
Entidades del Subgraph tal como llegan en la respuesta GraphQL.

El Subgraph devuelve los números como strings decimales; pydantic los
convierte a float/int al construir el modelo.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class SubgraphEntity(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Token(SubgraphEntity):
    id: str
    symbol: str
    name: Optional[str] = None
    decimals: Optional[int] = None
    derived_eth: Optional[float] = Field(default=None, alias="derivedETH")


class PoolSnapshot(SubgraphEntity):
    """Estado de un pool: el actual, o el observado en el momento de un evento."""

    id: str
    tick: Optional[int] = None
    fee_tier: Optional[int] = Field(default=None, alias="feeTier")
    token0: Token
    token1: Token
    token0_price: float = Field(alias="token0Price")
    token1_price: float = Field(alias="token1Price")
    total_value_locked_usd: Optional[float] = Field(default=None, alias="totalValueLockedUSD")


class Transaction(SubgraphEntity):
    id: str
    timestamp: Optional[int] = None
    block_number: Optional[int] = Field(default=None, alias="blockNumber")


class LiquidityEvent(SubgraphEntity):
    """Un `modifyLiquidity` del usuario. El signo de `amount` distingue depósito de retiro."""

    id: str
    amount: float
    amount0: float
    amount1: float
    amount_usd: float = Field(default=0.0, alias="amountUSD")
    origin: Optional[str] = None
    pool: PoolSnapshot
    timestamp: Optional[int] = None
    transaction: Optional[Transaction] = None
    tick_lower: int = Field(alias="tickLower")
    tick_upper: int = Field(alias="tickUpper")
    log_index: Optional[int] = Field(default=None, alias="logIndex")

    @field_validator("amount_usd", mode="before")
    @classmethod
    def _missing_usd_is_zero(cls, value):
        if value is None or value == "":
            return 0.0
        return value

    @property
    def is_deposit(self) -> bool:
        return self.amount > 0

    @property
    def is_withdrawal(self) -> bool:
        return self.amount < 0
