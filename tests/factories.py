from typing import Any

from autolp_metrics.models.subgraph import LiquidityEvent, PoolSnapshot

POOL_ID = "0x3258f413c7a88cda2fa8709a589d221a80f6574f63df5a5b6774485d8acc39d9"
USER = "0x14da5eef615205f7d3ddf80f8a0752f7f7dfe4f6"


def pool_payload(
    *,
    pool_id: str = POOL_ID,
    tick: Any = "100",
    token0_price: str = "2000",
    token1_price: str = "1",
) -> dict:
    return {
        "id": pool_id,
        "tick": tick,
        "feeTier": "3000",
        "token0": {"id": "0xeth", "symbol": "ETH", "name": "Ether", "decimals": "18", "derivedETH": "1"},
        "token1": {"id": "0xusdc", "symbol": "USDC", "name": "USD Coin", "decimals": "6", "derivedETH": "0.0005"},
        "token0Price": token0_price,
        "token1Price": token1_price,
        "totalValueLockedUSD": "1000000",
    }


def event_payload(
    *,
    event_id: str = "0xtx#1",
    amount: str = "1000",
    amount0: str = "1",
    amount1: str = "2000",
    amount_usd: Any = "4000",
    token0_price: str = "2000",
    token1_price: str = "1",
    tick_lower: str = "-600",
    tick_upper: str = "600",
    pool_id: str = POOL_ID,
    timestamp: str = "1700000000",
) -> dict:
    return {
        "id": event_id,
        "amount": amount,
        "amount0": amount0,
        "amount1": amount1,
        "amountUSD": amount_usd,
        "origin": USER,
        "pool": pool_payload(pool_id=pool_id, token0_price=token0_price, token1_price=token1_price),
        "timestamp": timestamp,
        "transaction": {"id": "0xtx", "timestamp": timestamp, "blockNumber": "123"},
        "tickLower": tick_lower,
        "tickUpper": tick_upper,
        "logIndex": "7",
    }


def make_event(**kwargs: Any) -> LiquidityEvent:
    return LiquidityEvent.model_validate(event_payload(**kwargs))


def make_pool(**kwargs: Any) -> PoolSnapshot:
    return PoolSnapshot.model_validate(pool_payload(**kwargs))

