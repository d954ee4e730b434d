from .request_validators import (
    parse_identifier,
    validate_comment_payload,
    extract_vote_increment,
    ensure_vote_increment,
)

__all__ = [
    "parse_identifier",
    "validate_comment_payload",
    "extract_vote_increment",
    "ensure_vote_increment",
]
