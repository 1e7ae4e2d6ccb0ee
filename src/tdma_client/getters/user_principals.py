"""User principals getter and the streaming convenience call."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tdma_client.getters.base import APIGetter
from tdma_client.types import GetterKind
from tdma_client.util import require_bool

if TYPE_CHECKING:
    import httpx

    from tdma_client.config import TDMAConfig
    from tdma_client.models import Credentials

logger = logging.getLogger(__name__)


class UserPrincipalsGetter(APIGetter):
    """User principal details with optional extra fields.

    Not account-scoped. The enabled fields are always sent in the order
    streamerSubscriptionKeys, streamerConnectionInfo, preferences,
    surrogateIds regardless of the order they were switched on.
    """

    kind = GetterKind.USER_PRINCIPALS

    def __init__(
        self,
        credentials: Credentials,
        streamer_subscription_keys: bool = False,
        streamer_connection_info: bool = False,
        preferences: bool = False,
        surrogate_ids: bool = False,
        *,
        config: TDMAConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(credentials, config=config, http_client=http_client)
        self._streamer_subscription_keys = require_bool(
            streamer_subscription_keys, "streamer_subscription_keys"
        )
        self._streamer_connection_info = require_bool(
            streamer_connection_info, "streamer_connection_info"
        )
        self._preferences = require_bool(preferences, "preferences")
        self._surrogate_ids = require_bool(surrogate_ids, "surrogate_ids")
        self._refresh()

    @property
    def streamer_subscription_keys(self) -> bool:
        """Request streamerSubscriptionKeys."""
        return self._read("_streamer_subscription_keys")

    @streamer_subscription_keys.setter
    def streamer_subscription_keys(self, value: bool) -> None:
        self._assign("streamer_subscription_keys", value, require_bool)

    @property
    def streamer_connection_info(self) -> bool:
        """Request streamerConnectionInfo."""
        return self._read("_streamer_connection_info")

    @streamer_connection_info.setter
    def streamer_connection_info(self, value: bool) -> None:
        self._assign("streamer_connection_info", value, require_bool)

    @property
    def preferences(self) -> bool:
        """Request preferences."""
        return self._read("_preferences")

    @preferences.setter
    def preferences(self, value: bool) -> None:
        self._assign("preferences", value, require_bool)

    @property
    def surrogate_ids(self) -> bool:
        """Request surrogateIds."""
        return self._read("_surrogate_ids")

    @surrogate_ids.setter
    def surrogate_ids(self, value: bool) -> None:
        self._assign("surrogate_ids", value, require_bool)

    def rebuild(self) -> str:
        fields = [
            name
            for name, enabled in (
                ("streamerSubscriptionKeys", self._streamer_subscription_keys),
                ("streamerConnectionInfo", self._streamer_connection_info),
                ("preferences", self._preferences),
                ("surrogateIds", self._surrogate_ids),
            )
            if enabled
        ]
        query = f"?fields={','.join(fields)}" if fields else ""
        return f"{self.config.api_base_url}userprincipals{query}"


async def get_user_principals_for_streaming(
    credentials: Credentials,
    *,
    config: TDMAConfig | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> dict[str, Any] | list[Any]:
    """Fetch the user principals needed to open a streaming session.

    Requests subscription keys and connection info only.

    Returns:
        Parsed JSON document, or an empty dict if the body is empty
    """
    with UserPrincipalsGetter(
        credentials,
        streamer_subscription_keys=True,
        streamer_connection_info=True,
        preferences=False,
        surrogate_ids=False,
        config=config,
        http_client=http_client,
    ) as getter:
        data = await getter.get_json()

    if not data:
        logger.info("Empty user principals response")
    return data
