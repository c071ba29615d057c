"""Config store error."""


class ConfigStoreError(RuntimeError):
    """Raised when repository configuration cannot be read at all."""

    def __init__(self, repo_path: str, detail: str):
        self.repo_path = repo_path
        self.detail = detail
        super().__init__(f"Cannot read configuration of {repo_path}: {detail}")
