"""Starter .cmdguard.toml template."""

CONFIG_FILENAME = ".cmdguard.toml"
CUSTOM_RULES_DIR = ".cmdguard-rules"

DEFAULT_TOML = """\
# cmdguard configuration
version = "1.0"

[rules]
# enable = ["GIT_PUSH_FORCE", "RM_RECURSIVE"]   # empty = all enabled
# disable = ["WIPE"]

[audit]
enabled = true
path = "/tmp/prevent-destructive-git.log"
"""
