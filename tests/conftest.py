from unittest.mock import AsyncMock

import pytest

from autolp_metrics.models.subgraph import LiquidityEvent, PoolSnapshot
from tests.factories import make_event, make_pool


@pytest.fixture
def deposit_event() -> LiquidityEvent:
    return make_event()


@pytest.fixture
def current_pool() -> PoolSnapshot:
    return make_pool(tick="100", token0_price="2500", token1_price="1")


@pytest.fixture
def mock_source(deposit_event: LiquidityEvent, current_pool: PoolSnapshot):
    source = AsyncMock()
    source.fetch_events = AsyncMock(return_value=[deposit_event])
    source.fetch_current_pool_state = AsyncMock(return_value=current_pool)
    source.fetch_all_user_events = AsyncMock(return_value=[deposit_event])
    return source
