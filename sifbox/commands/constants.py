"""
Constants and configuration values used across the sifbox codebase.
"""

# Binary names
SIFNODED_BINARY = "sifnoded"
SIFGEN_BINARY = "sifgen"
EBRELAYER_BINARY = "ebrelayer"

# Keyring
KEYRING_BACKEND = "test"
ADMIN_KEY_NAME = "sifnodeadmin"
# Answers the overwrite and passphrase prompts of `keys add`
ADMIN_KEY_STDIN = "yes\nyes"

# Genesis
NODE_HOME_DIRNAME = ".sifnoded"
VALIDATORS_DIRNAME = "validators"
ADMIN_GENESIS_BALANCE = "100000000000000000000rowan"

# Daemon
NODE_RPC_LADDR = "tcp://0.0.0.0:26657"
MINIMUM_GAS_PRICES = "0.5rowan"

# Default bootstrap arguments. The node URLs match the RPC address sifnoded
# is started on and the local Web3 provider.
DEFAULT_CHAIN_ID = "localnet"
DEFAULT_CHAIN_NET = 1
DEFAULT_N_VALIDATORS = 1
DEFAULT_NETWORK_DIR = "/tmp/sifnodedNetwork"
DEFAULT_SEED_IP_ADDRESS = "10.10.1.1"
DEFAULT_NETWORK_CONFIG_FILE = "/tmp/sifnodedConfig.yml"
DEFAULT_WHITELIST_FILE = "../test/integration/whitelisted-denoms.json"
DEFAULT_TCP_URL = "tcp://0.0.0.0:26657"
DEFAULT_WEBSOCKET_ADDRESS = "ws://localhost:7545/"
DEFAULT_RELAYER_DB_PATH = "./relayerdb"

# Response field names (from `keys add --output json`)
FIELD_ADDRESS = "address"

# Topology record field names (from the generator's YAML output)
FIELD_MONIKER = "moniker"
FIELD_MNEMONIC = "mnemonic"
FIELD_PASSWORD = "password"

# Process management timeouts
PROCESS_WAIT_TIMEOUT = 5  # seconds
