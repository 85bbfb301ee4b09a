"""GitHub parser — repository metadata from the GitHub REST API payload.

Reads ``GET /repos/{owner}/{repo}``: name, full_name, description,
owner.avatar_url and the repository counters.
"""

from __future__ import annotations

import logging

from ..errors import StructuralMismatch
from ..schemas import ItemType, NormalizedItem
from . import Parser, first_non_empty, load_payload

logger = logging.getLogger(__name__)


class GithubApiParser(Parser):
    def parse(self, url: str, body: str) -> NormalizedItem:
        repo = load_payload(body)
        if not isinstance(repo, dict):
            raise StructuralMismatch("GitHub payload is not an object")

        try:
            name = repo["name"]
            avatar_url = repo["owner"]["avatar_url"]
        except (KeyError, TypeError) as exc:
            # The API answers {"message": "Not Found"} for unknown repos
            raise StructuralMismatch(
                f"GitHub payload missing {exc} (message: {repo.get('message')!r})"
            ) from exc

        logger.info("Parsed GitHub repo %s", repo.get("full_name", name))
        return NormalizedItem(
            title=first_non_empty(name),
            author=first_non_empty(repo.get("full_name")),
            description=first_non_empty(repo.get("description")),
            image_url=first_non_empty(avatar_url),
            product_url=url,
            provider="github",
            type=ItemType.REPOSITORY.value,
            meta={
                "starsCount": repo.get("stargazers_count"),
                "forksCount": repo.get("forks_count"),
                "watchersCount": repo.get("watchers_count"),
                "issuesCount": repo.get("open_issues"),
            },
        )
