"""Filesystem rules — recursive deletes, mass deletes, device and file wipes."""

from cmdguard.rules.models import Rule

RM_RECURSIVE = Rule(
    id="RM_RECURSIVE",
    name="rm -rf",
    description="Recursive delete: rm -rf, rm -fr, rm -r -f, rm -R.",
    category="filesystem",
    # flag groups before the last one may be any mix of r/R/f;
    # the last one must contain r or R
    pattern=r"\brm\s+(-[rRf]+\s+)*-[rRf]*[rR][fF]*\b",
)

RM_NO_PRESERVE_ROOT = Rule(
    id="RM_NO_PRESERVE_ROOT",
    name="rm --no-preserve-root",
    description="Delete that bypasses the protection of /.",
    category="filesystem",
    pattern=r"\brm\b.*--no-preserve-root\b",
)

FIND_DELETE = Rule(
    id="FIND_DELETE",
    name="find -delete",
    description="Deletes every file the find expression matches.",
    category="filesystem",
    pattern=r"\bfind\b.*-delete\b",
)

FIND_EXEC_RM = Rule(
    id="FIND_EXEC_RM",
    name="find -exec rm",
    description="Runs rm on every file the find expression matches.",
    category="filesystem",
    pattern=r"\bfind\b.*-exec\s+rm\b",
)

DD_BLOCK_DEVICE = Rule(
    id="DD_BLOCK_DEVICE",
    name="dd of=/dev/...",
    description="Writes raw bytes over a disk device.",
    category="filesystem",
    pattern=r"\bdd\b.*of=/dev/(sd|disk)",
)

SHRED = Rule(
    id="SHRED",
    name="shred",
    description="Overwrites file contents to make recovery impossible.",
    category="filesystem",
    pattern=r"\bshred\b",
)

WIPE = Rule(
    id="WIPE",
    name="wipe",
    description="Securely erases files or devices.",
    category="filesystem",
    pattern=r"\bwipe\b",
)

SRM = Rule(
    id="SRM",
    name="srm",
    description="Secure remove.",
    category="filesystem",
    pattern=r"\bsrm\b",
)

TRUNCATE_ZERO = Rule(
    id="TRUNCATE_ZERO",
    name="truncate -s 0",
    description="Truncates files to zero length.",
    category="filesystem",
    pattern=r"\btruncate\b.*-s\s*0\b",
)

ALL_FILESYSTEM_RULES = [
    RM_RECURSIVE,
    RM_NO_PRESERVE_ROOT,
    FIND_DELETE,
    FIND_EXEC_RM,
    DD_BLOCK_DEVICE,
    SHRED,
    WIPE,
    SRM,
    TRUNCATE_ZERO,
]
