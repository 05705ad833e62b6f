"""
Session lookup configuration.
"""

from dataclasses import dataclass


@dataclass
class SessionConfig:
    """
    Where sessions live in the store and how records are augmented.

    Attributes:
        key_prefix: Prefix of the hash key holding a session (default: "session:")
        session_field: Field the session identifier is written to (default: "session")
        user_id_field: Numeric user id field (default: "userId")
    """

    key_prefix: str = "session:"
    session_field: str = "session"
    user_id_field: str = "userId"

    def key_for(self, session_string: str) -> str:
        """Store key holding the given session."""
        return f"{self.key_prefix}{session_string}"
