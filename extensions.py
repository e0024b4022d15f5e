from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Global limiter instance used across the app; storage and strategy come from
# RATELIMIT_STORAGE_URI / RATELIMIT_STRATEGY in the app config
limiter = Limiter(key_func=get_remote_address)
