import os

AUTH_CONFIG = {
    "image_root": os.getenv("IMAGE_ROOT", "/var/lib/dispatch/images/user_profile"),
    "password_hash_method": os.getenv("PASSWORD_HASH_METHOD", "scrypt"),
    "session_token_bytes": int(os.getenv("SESSION_TOKEN_BYTES", "32")),
    "worker_threads": int(os.getenv("WORKER_THREADS", str(os.cpu_count() or 4))),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
