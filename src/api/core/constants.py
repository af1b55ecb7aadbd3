API_VERSION_HEADER = "X-Quota-Image-Version"

# Session cookie carrying the Unkey API key
SESSION_COOKIE_NAME = "unkey"

# Remaining calls reported by the key service after verification
QUOTA_REMAINING_HEADER = "X-Quota-Remaining"

REQUEST_ID_HEADER = "X-Request-ID"

# Paths excluded from request logging
SKIP_LOGGING_PATHS = {
    "/health/liveness",
}

# Image generation parameters
IMAGES_PER_REQUEST = 1
IMAGE_RESPONSE_FORMAT = "url"

# Key service verification codes for keys that can no longer be used at all
REJECTED_KEY_CODES = frozenset({"NOT_FOUND", "DISABLED", "EXPIRED"})
