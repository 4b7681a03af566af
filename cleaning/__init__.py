from .blacklist import BLACK_LIST, salted_digest, is_blacklisted
from .identity_cleaner import remove_id, clean

__all__ = [
    "BLACK_LIST", "salted_digest", "is_blacklisted", "remove_id", "clean"
]
