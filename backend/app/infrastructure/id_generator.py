"""Profile Id Generator — collision-resistant hex ids from OS randomness.

Invariants:
    - Ids are 64-char lowercase hex (SHA-256 digest of random bytes)
    - Any failure to obtain randomness surfaces as IdentifierGenerationError,
      raised before the caller touches the store
"""

import hashlib
import secrets

from app.core.domain_types import ProfileId
from app.core.errors import IdentifierGenerationError

DEFAULT_ENTROPY_BYTES: int = 32


def generate_profile_id(entropy_bytes: int = DEFAULT_ENTROPY_BYTES) -> ProfileId:
    try:
        raw = secrets.token_bytes(entropy_bytes)
    except (OSError, ValueError) as e:
        raise IdentifierGenerationError(str(e)) from e
    return ProfileId(hashlib.sha256(raw).hexdigest())
