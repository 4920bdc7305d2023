"""Test settings: in-memory SQLite, a fixed signing key and cheap bcrypt rounds.

Set before any techscope module is imported so the cached Settings pick them up.
"""

import os

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_PRIVATE_KEY"] = "test-private-key-for-techscope-tests-0123456789"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"
