import os

# Cheap hash so test suites stay fast.
AUTH_CONFIG = {
    "image_root": os.getenv("IMAGE_ROOT", "images/user_profile"),
    "password_hash_method": "pbkdf2:sha256:1000",
    "session_token_bytes": 16,
    "worker_threads": 2,
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

DEBUG = False
TESTING = True
