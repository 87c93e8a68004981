import os

AUTH_CONFIG = {
    "image_root": os.getenv("IMAGE_ROOT", "images/user_profile"),
    "password_hash_method": os.getenv("PASSWORD_HASH_METHOD", "scrypt"),
    "session_token_bytes": int(os.getenv("SESSION_TOKEN_BYTES", "32")),
    "worker_threads": int(os.getenv("WORKER_THREADS", "4")),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
