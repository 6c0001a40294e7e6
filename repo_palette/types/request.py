"""Request-related data models."""

from collections.abc import Mapping
from dataclasses import dataclass

from repo_palette.exceptions import ValidationError

REQUIRED_PARAMS = ("repo", "owner", "branch")


@dataclass(frozen=True)
class RequestOptions:
    """Identifies the repository branch whose stylesheets get scanned."""

    owner: str
    repo: str
    branch: str

    @classmethod
    def from_query(cls, params: Mapping[str, str]) -> "RequestOptions":
        """
        Build options from a parsed query string.

        Args:
            params: Query parameters of the inbound request

        Returns:
            RequestOptions with owner, repo and branch set

        Raises:
            ValidationError: If any required parameter is absent or blank
        """
        missing = [name for name in REQUIRED_PARAMS if not params.get(name, "").strip()]
        if missing:
            raise ValidationError(
                f"Missing required query parameter(s): {', '.join(missing)}",
                missing=missing,
            )

        return cls(
            owner=params["owner"],
            repo=params["repo"],
            branch=params["branch"],
        )
