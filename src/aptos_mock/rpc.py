"""Read-only client for the Aptos node REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from aptos_mock.constants import DEFAULT_RPC_URL, RPC_REQUEST_TIMEOUT_SECONDS
from aptos_mock.errors import MalformedResponseError, RpcStatusError
from aptos_mock.schema import ModuleAbi, Resource

logger = logging.getLogger(__name__)


class AptosRpcClient:
    """
    Fetches account resources and module ABIs.

    Each call is a single GET; there are no retries. A non-2xx status raises
    RpcStatusError, connection problems surface as httpx.HTTPError.
    """

    def __init__(
        self,
        rpc_url: str = DEFAULT_RPC_URL,
        *,
        token: str | None = None,
        timeout: float = RPC_REQUEST_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.rpc_url = rpc_url.rstrip("/")
        self.has_token = bool(token)
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.Client(headers=headers, timeout=timeout, transport=transport)

    def __enter__(self) -> AptosRpcClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _get_json(self, url: str, *, account: str) -> Any:
        resp = self._client.get(url)
        if not resp.is_success:
            logger.error(f"RPC request failed: status={resp.status_code}, url={url}, account={account}")
            raise RpcStatusError(resp.status_code, url)
        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponseError(url, f"invalid JSON: {e}") from e

    def fetch_resources(self, account: str) -> list[Resource]:
        url = f"{self.rpc_url}/v1/accounts/{account}/resources"
        data = self._get_json(url, account=account)
        if not isinstance(data, list):
            raise MalformedResponseError(url, f"expected a list of resources, got {type(data).__name__}")
        try:
            return [Resource.from_json(item) for item in data]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise MalformedResponseError(url, f"{type(e).__name__}: {e}") from e

    def fetch_module_abi(self, account: str, module: str) -> ModuleAbi:
        url = f"{self.rpc_url}/v1/accounts/{account}/module/{module}"
        data = self._get_json(url, account=account)
        if not isinstance(data, dict) or not isinstance(data.get("abi"), dict):
            raise MalformedResponseError(url, "response has no abi object")
        try:
            return ModuleAbi.from_json(data["abi"])
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise MalformedResponseError(url, f"{type(e).__name__}: {e}") from e
