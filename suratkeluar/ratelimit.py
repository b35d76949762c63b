# suratkeluar/ratelimit.py
from slowapi import Limiter
from slowapi.util import get_remote_address

from suratkeluar.config import settings

# Dipakai sebagai decorator di router (mis. login) dan dipasang di app.state
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
