# src/autolp_metrics/modules/subgraph_client.py
import logging
from typing import Any, Dict, List, Optional

from gql import gql, Client
from gql.transport.exceptions import TransportError
from gql.transport.httpx import HTTPXAsyncTransport
from graphql import DocumentNode
import httpx

from ..core.config import Settings
from ..core.exceptions import SubgraphError
from ..models.subgraph import LiquidityEvent, PoolSnapshot

logger = logging.getLogger(__name__)

# The Graph devuelve 100 entidades por defecto y como máximo 1000 por página
PAGE_SIZE = 1000

POOL_FIELDS = """
    fragment PoolFields on Pool {
        id
        tick
        feeTier
        token0 { id symbol name decimals derivedETH }
        token1 { id symbol name decimals derivedETH }
        token0Price
        token1Price
        totalValueLockedUSD
    }
"""

LIQUIDITY_EVENT_FIELDS = """
    fragment LiquidityEventFields on ModifyLiquidity {
        id
        amount
        amount0
        amount1
        amountUSD
        origin
        pool { ...PoolFields }
        timestamp
        transaction { id timestamp blockNumber }
        tickLower
        tickUpper
        logIndex
    }
"""

USER_POOL_EVENTS_QUERY = gql(POOL_FIELDS + LIQUIDITY_EVENT_FIELDS + """
    query($origin: String!, $pool: String!, $first: Int!, $skip: Int!) {
        modifyLiquidities(
            first: $first
            skip: $skip
            where: {origin: $origin, pool: $pool}
            orderBy: timestamp
            orderDirection: desc
        ) {
            ...LiquidityEventFields
        }
    }
""")

USER_EVENTS_QUERY = gql(POOL_FIELDS + LIQUIDITY_EVENT_FIELDS + """
    query($origin: String!, $first: Int!, $skip: Int!) {
        modifyLiquidities(
            first: $first
            skip: $skip
            where: {origin: $origin}
            orderBy: timestamp
            orderDirection: desc
        ) {
            ...LiquidityEventFields
        }
    }
""")

POOL_STATE_QUERY = gql(POOL_FIELDS + """
    query($pool_id: String!) {
        pool(id: $pool_id) {
            ...PoolFields
        }
    }
""")

ETH_PRICE_QUERY = gql("""
    query {
        bundle(id: "1") {
            ethPriceUSD
        }
    }
""")


class SubgraphClient:
    """
    Cliente asíncrono del Subgraph de Uniswap.

    Solo guarda configuración inmutable (URL, API key, timeout); cada consulta
    abre su propio transporte, así que varias consultas pueden correr en paralelo.
    """

    def __init__(self, query_url: str | None, api_key: str | None, timeout: int = 30):
        if not query_url:
            raise ValueError("Se requiere la URL del Subgraph (SUBGRAPH_URL).")
        if not api_key:
            raise ValueError("Se requiere la API key del Subgraph en el .env (SUBGRAPH_API_KEY).")

        self.query_url = query_url
        self._api_key = api_key
        self.timeout = timeout
        logger.info("SubgraphClient inicializado usando la URL de The Graph.")

    @classmethod
    def from_settings(cls, settings: Settings) -> "SubgraphClient":
        return cls(
            query_url=settings.SUBGRAPH_URL,
            api_key=settings.SUBGRAPH_API_KEY,
            timeout=settings.SUBGRAPH_TIMEOUT_SECONDS,
        )

    def _build_client(self) -> Client:
        transport = HTTPXAsyncTransport(
            url=self.query_url,
            headers={"Authorization": f"Bearer {self._api_key}"},
            timeout=self.timeout,
        )
        return Client(transport=transport, fetch_schema_from_transport=False)

    async def _execute(
        self, query: DocumentNode, operation: str, params: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        try:
            async with self._build_client() as session:
                return await session.execute(query, variable_values=params)
        except (TransportError, httpx.HTTPError) as e:
            logger.error(f"Error al consultar el Subgraph ({operation}): {e}", exc_info=True)
            raise SubgraphError(f"Failed to {operation}: {e}") from e

    async def _fetch_event_pages(
        self, query: DocumentNode, operation: str, params: Dict[str, Any]
    ) -> List[LiquidityEvent]:
        """Recorre todas las páginas de `modifyLiquidities` manteniendo el orden."""
        events: List[LiquidityEvent] = []
        skip = 0
        while True:
            page_params = {**params, "first": PAGE_SIZE, "skip": skip}
            result = await self._execute(query, operation, page_params)
            page = result.get("modifyLiquidities") or []
            events.extend(LiquidityEvent.model_validate(raw) for raw in page)
            if len(page) < PAGE_SIZE:
                return events
            skip += PAGE_SIZE

    async def fetch_events(self, user_address: str, pool_address: str) -> List[LiquidityEvent]:
        """Eventos de liquidez del usuario en un pool, del más reciente al más antiguo."""
        params = {"origin": user_address.lower(), "pool": pool_address.lower()}
        events = await self._fetch_event_pages(USER_POOL_EVENTS_QUERY, "fetch user data", params)
        logger.info(
            f"Subgraph query exitosa. Se encontraron {len(events)} eventos de liquidez "
            f"para {user_address} en el pool {pool_address}"
        )
        return events

    async def fetch_all_user_events(self, user_address: str) -> List[LiquidityEvent]:
        """Eventos de liquidez del usuario en todos sus pools."""
        params = {"origin": user_address.lower()}
        events = await self._fetch_event_pages(USER_EVENTS_QUERY, "fetch user positions", params)
        logger.info(f"Se encontraron {len(events)} eventos de liquidez para la wallet {user_address}")
        return events

    async def fetch_current_pool_state(self, pool_address: str) -> PoolSnapshot:
        params = {"pool_id": pool_address.lower()}
        result = await self._execute(POOL_STATE_QUERY, "fetch pool state", params)
        pool = result.get("pool")
        if not pool:
            raise SubgraphError(f"Failed to fetch pool state: pool {pool_address} not found")
        return PoolSnapshot.model_validate(pool)

    async def fetch_eth_price_usd(self) -> float:
        result = await self._execute(ETH_PRICE_QUERY, "fetch ETH price")
        bundle = result.get("bundle")
        if not bundle or bundle.get("ethPriceUSD") is None:
            raise SubgraphError("Failed to fetch ETH price: bundle not found")
        return float(bundle["ethPriceUSD"])
