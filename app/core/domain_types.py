"""Domain Types: rich types that replace bare strings across the codebase.

Invariants:
    - PageId is the capability token (secret); PageName is the public key
    - Social networks encoded as an Enum: no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: the value doubles as the PageInput field name
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PageId = NewType("PageId", str)
PageName = NewType("PageName", str)


# ─── Enums ───────────────────────────────────────────────────────

class SocialNetwork(str, Enum):
    """Profile fields carrying a social handle, in validation order."""
    TWITTER = "twitter"
    GITHUB = "github"
    FACEBOOK = "facebook"
    INSTAGRAM = "instagram"
