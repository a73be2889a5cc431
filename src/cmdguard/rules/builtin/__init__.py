"""Built-in rules — aggregate all categories."""

from cmdguard.rules.builtin.filesystem import ALL_FILESYSTEM_RULES
from cmdguard.rules.builtin.git import ALL_GIT_RULES
from cmdguard.rules.builtin.github_cli import ALL_GITHUB_CLI_RULES
from cmdguard.rules.models import Rule

ALL_BUILTIN_RULES: list[Rule] = [
    *ALL_GIT_RULES,
    *ALL_GITHUB_CLI_RULES,
    *ALL_FILESYSTEM_RULES,
]

__all__ = ["ALL_BUILTIN_RULES"]
