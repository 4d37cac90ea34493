"""Error types raised while mocking a package.

Resolution treats these as soft failures and keeps walking the graph;
materialization lets them propagate so the CLI can exit non-zero.
"""

from __future__ import annotations

from typing import Any


class AptosMockError(Exception):
    """Base class for aptos-mock errors."""

    def __init__(self, message: str, data: dict[str, Any] | None = None):
        self.message = message
        self.data = data or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": type(self).__name__,
            "message": self.message,
            "data": self.data,
        }


class RpcStatusError(AptosMockError):
    """RPC endpoint answered with a non-success HTTP status."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(
            message=f"HTTP error! status: {status_code} ({url})",
            data={"statusCode": status_code, "url": url},
        )


class MalformedResponseError(AptosMockError):
    """Response body does not have the expected shape."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            message=f"Malformed response from {url}: {reason}",
            data={"url": url, "reason": reason},
        )


class PackageRegistryNotFoundError(AptosMockError):
    """Account has no 0x1::code::PackageRegistry resource."""

    def __init__(self, account: str):
        self.account = account
        super().__init__(
            message=f"PackageRegistry not found for account {account}",
            data={"account": account},
        )


class PackageNotFoundError(AptosMockError):
    """Account's registry has no package with the requested name."""

    def __init__(self, account: str, package_name: str):
        self.account = account
        self.package_name = package_name
        super().__init__(
            message=f"Package {package_name} not found in account {account}",
            data={"account": account, "packageName": package_name},
        )
