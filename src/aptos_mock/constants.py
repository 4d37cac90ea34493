import os

# Default Aptos REST endpoint
# This is the public mainnet fullnode API. Public endpoints are rate limited;
# for large dependency trees either pass --token or set
# APTOS_MOCK_DEFAULT_RPC_URL to a dedicated provider.
DEFAULT_RPC_URL = os.environ.get(
    "APTOS_MOCK_DEFAULT_RPC_URL",
    "https://api.mainnet.aptoslabs.com",
)

# Environment variable holding the bearer token for the RPC endpoint
TOKEN_ENV_VAR = "APTOS_API_TOKEN"

# RPC request timeout (seconds). Requests are attempted once.
RPC_REQUEST_TIMEOUT_SECONDS = 30.0

# =============================================================================
# On-chain layout
# =============================================================================

# Resource type that lists every package published by an account
PACKAGE_REGISTRY_TYPE = "0x1::code::PackageRegistry"

# Struct field the compiler inserts into empty structs
PADDING_FIELD_NAME = "dummy_field"

# =============================================================================
# Framework Addresses
# =============================================================================

# Aptos framework accounts, matched exactly as they appear in package deps.
# Packages published here are referenced from git instead of being mocked.
FRAMEWORK_ADDRESSES = frozenset({"0x1", "0x3", "0x4"})

FRAMEWORK_GIT_URL = "https://github.com/aptos-labs/aptos-framework.git"
FRAMEWORK_REV = "mainnet"

# Framework package name -> subdirectory of the framework repository
FRAMEWORK_SUBDIRS = {
    "AptosStdlib": "aptos-stdlib",
    "AptosFramework": "aptos-framework",
    "AptosTokenObjects": "aptos-token-objects",
    "AptosToken": "aptos-token",
    "MoveStdlib": "move-stdlib",
}
DEFAULT_FRAMEWORK_SUBDIR = "aptos-framework"

# =============================================================================
# Output layout
# =============================================================================

MANIFEST_FILENAME = "Move.toml"
SOURCES_DIRNAME = "sources"
DEPS_DIRNAME = "deps"
SOURCE_EXTENSION = ".move"
MANIFEST_VERSION = "1.0.0"
