"""GitHub CLI rules — resource deletion and DELETE calls through gh api."""

from cmdguard.rules.models import Rule

GH_RESOURCE_DELETE = Rule(
    id="GH_RESOURCE_DELETE",
    name="gh <resource> delete",
    description="Deletes a repository, release, tag, pull request or branch.",
    category="github-cli",
    pattern=r"\bgh\s+(repo|release|tag|pr|branch)\s+delete\b",
)

GH_API_DELETE_METHOD = Rule(
    id="GH_API_DELETE_METHOD",
    name="gh api -X DELETE",
    description="Issues a raw DELETE request against the GitHub API.",
    category="github-cli",
    pattern=r"\bgh\s+api\b.*(-X|--method)\s+DELETE\b",
)

GH_API_DELETE_REF = Rule(
    id="GH_API_DELETE_REF",
    name="gh api DELETE refs",
    description="DELETE appearing before a branch or tag ref path.",
    category="github-cli",
    pattern=r"\bgh\s+api\b.*DELETE.*(refs/heads|refs/tags)",
)

GH_API_REF_DELETE = Rule(
    id="GH_API_REF_DELETE",
    name="gh api refs DELETE",
    description="DELETE appearing after a branch or tag ref path.",
    category="github-cli",
    pattern=r"\bgh\s+api\b.*(refs/heads|refs/tags).*DELETE",
)

GH_PR_MERGE_FORCE = Rule(
    id="GH_PR_MERGE_FORCE",
    name="gh pr merge --force",
    description="Merges a pull request bypassing checks.",
    category="github-cli",
    pattern=r"\bgh\s+pr\s+merge\b.*--force\b",
)

GH_ANY_FORCE = Rule(
    id="GH_ANY_FORCE",
    name="gh ... --force",
    description="Catch-all for any gh subcommand run with --force.",
    category="github-cli",
    pattern=r"\bgh\b.*--force\b",
)

ALL_GITHUB_CLI_RULES = [
    GH_RESOURCE_DELETE,
    GH_API_DELETE_METHOD,
    GH_API_DELETE_REF,
    GH_API_REF_DELETE,
    GH_PR_MERGE_FORCE,
    GH_ANY_FORCE,
]
