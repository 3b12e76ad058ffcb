"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache key structure (DRY). Every prefix ends with
CACHE_KEY_SEP so entity caches sharing one store never collide.
"""

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Cache key prefixes (used as <prefix><id>)
CACHE_PREFIX_FILES = "files:"
CACHE_PREFIX_MENUS = "menus:"
CACHE_PREFIX_PERMISSIONS = "permissions:"
CACHE_PREFIX_ROLE_PERMISSIONS = "rolePermissions:"
CACHE_PREFIX_ROLES = "roles:"
CACHE_PREFIX_USER_ROLES = "userRoles:"
CACHE_PREFIX_USERS = "users:"

# Stored in place of a record when the store confirmed the id does not exist
CACHE_PLACEHOLDER = "*"

# Default expiry (seconds)
CACHE_TTL_RECORDS = 300
CACHE_TTL_PLACEHOLDER = 600

# Cache backend selectors (anything else disables caching)
CACHE_TYPE_MEMORY = "memory"
CACHE_TYPE_REDIS = "redis"

# Largest identifier accepted (unsigned 64-bit)
MAX_RECORD_ID = 2**64 - 1

# Largest identifier the store columns can hold (signed 64-bit)
STORE_MAX_RECORD_ID = 2**63 - 1

# Sort value that skips the total-count query in list requests
SORT_IGNORE_COUNT = "ignore count"

# Largest page size accepted by list requests
QUERY_LIMIT_MAX = 1000
