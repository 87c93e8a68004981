"""Defaults for the auth service: image storage, tokens, hashing, worker pool."""

DEFAULT_IMAGE_ROOT = "images/user_profile"
DEFAULT_SESSION_TOKEN_BYTES = 32
DEFAULT_PASSWORD_HASH_METHOD = "scrypt"
DEFAULT_WORKER_THREADS = 4
PROFILE_IMAGE_FORMAT = "PNG"
# Upper bound for a resized profile image side, in pixels.
MAX_PROFILE_IMAGE_DIMENSION = 4096
