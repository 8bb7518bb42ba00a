"""Utility modules for localhub.

- paths: hub root, member path and target path resolution
- validation: repository name validation rules
"""

from __future__ import annotations

from localhub.utils.paths import (
    BARE_REPO_SUFFIX,
    DEFAULT_HUB_DIRNAME,
    repo_dirname,
    resolve_hub_root,
    resolve_repo_path,
    resolve_target_path,
    strip_repo_suffix,
)
from localhub.utils.validation import (
    INVALID_NAME_CHARS,
    MAX_NAME_LENGTH,
    RESERVED_NAMES,
    check_repo_name,
    validate_repo_name,
)

__all__ = [
    "BARE_REPO_SUFFIX",
    "DEFAULT_HUB_DIRNAME",
    "INVALID_NAME_CHARS",
    "MAX_NAME_LENGTH",
    "RESERVED_NAMES",
    "check_repo_name",
    "repo_dirname",
    "resolve_hub_root",
    "resolve_repo_path",
    "resolve_target_path",
    "strip_repo_suffix",
    "validate_repo_name",
]
