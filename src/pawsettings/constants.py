from typing import Final

# Namespace key of the settings record in the key-value store
STORE_KEY: Final = "nanovault-appsettings"

# Server name sentinels
SERVER_RANDOM: Final = "random"
SERVER_CUSTOM: Final = "custom"
SERVER_OFFLINE: Final = "offline"

# Catalog entry used on first start and when leaving offline mode
DEFAULT_SERVER_NAME: Final = "peer"

# First-party host that is not part of the server catalog
SEEDED_API_HOST: Final = "peering.paw.digital"

# Staking address lookup endpoint
DEFAULT_STAKING_URL: Final = "https://apps.paw.digital/staking/stake_addresses.php"
