"""Contains results of application execution."""


class RepoSyncResult:
    """Contains results of synchronizing one GitHub repository."""

    def __init__(self, repo: str, issue_count: int, created_count: int, updated_count: int) -> None:
        """Initialize the result with the counts of fetched issues and written tasks."""
        self.repo = repo
        self.issue_count = issue_count
        self.created_count = created_count
        self.updated_count = updated_count


class SyncRunResult:
    """Contains results of a full synchronization run."""

    def __init__(self, repo_results: list[RepoSyncResult]) -> None:
        """Initialize the result with one entry per synchronized repository."""
        self.repo_results = repo_results

    @property
    def created_count(self) -> int:
        """Total number of tasks created."""
        return sum(result.created_count for result in self.repo_results)

    @property
    def updated_count(self) -> int:
        """Total number of tasks updated."""
        return sum(result.updated_count for result in self.repo_results)
