"""Git rules — pushes that rewrite or delete remote refs, local history loss."""

from cmdguard.rules.models import Rule

GIT_PUSH_DELETE = Rule(
    id="GIT_PUSH_DELETE",
    name="git push --delete",
    description="Deletes a remote branch or tag.",
    category="git",
    pattern=r"\bgit\s+push\b.*--delete\b",
)

GIT_PUSH_REFSPEC_DELETE = Rule(
    id="GIT_PUSH_REFSPEC_DELETE",
    name="git push :ref",
    description="Deletes a remote ref through an empty-source refspec (origin :branch).",
    category="git",
    pattern=r"\bgit\s+push\b.*\s:[^\s]+",
)

GIT_PUSH_SHORT_FORCE = Rule(
    id="GIT_PUSH_SHORT_FORCE",
    name="git push -f",
    description="Force-push that can overwrite remote history.",
    category="git",
    pattern=r"\bgit\s+push\b.*\s-f\b",
)

GIT_PUSH_FORCE = Rule(
    id="GIT_PUSH_FORCE",
    name="git push --force",
    description="Force-push, including --force-with-lease and --force-if-includes.",
    category="git",
    pattern=r"\bgit\s+push\b.*--force\b",
)

GIT_PUSH_MIRROR = Rule(
    id="GIT_PUSH_MIRROR",
    name="git push --mirror",
    description="Mirrors local refs to the remote, deleting remote refs missing locally.",
    category="git",
    pattern=r"\bgit\s+push\b.*--mirror\b",
)

GIT_PUSH_PRUNE = Rule(
    id="GIT_PUSH_PRUNE",
    name="git push --prune",
    description="Removes remote branches that have no local counterpart.",
    category="git",
    pattern=r"\bgit\s+push\b.*--prune\b",
)

GIT_BRANCH_DELETE = Rule(
    id="GIT_BRANCH_DELETE",
    name="git branch -d / -D",
    description="Deletes a local branch.",
    category="git",
    pattern=r"\bgit\s+branch\b.*\s-[dD]\b",
)

GIT_TAG_DELETE = Rule(
    id="GIT_TAG_DELETE",
    name="git tag -d / --delete",
    description="Deletes a local tag.",
    category="git",
    pattern=r"\bgit\s+tag\b.*\s-(d|-delete)\b",
)

GIT_REMOTE_REMOVE = Rule(
    id="GIT_REMOTE_REMOVE",
    name="git remote remove",
    description="Removes a configured remote and its tracking branches.",
    category="git",
    pattern=r"\bgit\s+remote\b.*\sremove\b",
)

GIT_RM = Rule(
    id="GIT_RM",
    name="git rm",
    description="Removes tracked files from the index and the working tree.",
    category="git",
    pattern=r"\bgit\s+rm\b",
)

GIT_RESET_HARD = Rule(
    id="GIT_RESET_HARD",
    name="git reset --hard",
    description="Discards uncommitted changes in the index and working tree.",
    category="git",
    pattern=r"\bgit\s+reset\b.*--hard\b",
)

GIT_CLEAN = Rule(
    id="GIT_CLEAN",
    name="git clean",
    description="Deletes untracked (-f, -d) or ignored (-x, -X) files.",
    category="git",
    pattern=r"\bgit\s+clean\b.*-[fdxX]",
)

GIT_STASH_DROP = Rule(
    id="GIT_STASH_DROP",
    name="git stash drop / clear",
    description="Destroys stash entries.",
    category="git",
    pattern=r"\bgit\s+stash\b.*\s(drop|clear)\b",
)

GIT_ANY_FORCE = Rule(
    id="GIT_ANY_FORCE",
    name="git ... --force",
    description="Catch-all for any git subcommand run with --force.",
    category="git",
    pattern=r"\bgit\b.*--force\b",
)

ALL_GIT_RULES = [
    GIT_PUSH_DELETE,
    GIT_PUSH_REFSPEC_DELETE,
    GIT_PUSH_SHORT_FORCE,
    GIT_PUSH_FORCE,
    GIT_PUSH_MIRROR,
    GIT_PUSH_PRUNE,
    GIT_BRANCH_DELETE,
    GIT_TAG_DELETE,
    GIT_REMOTE_REMOVE,
    GIT_RM,
    GIT_RESET_HARD,
    GIT_CLEAN,
    GIT_STASH_DROP,
    GIT_ANY_FORCE,
]
