"""Base client module for Jira API interactions."""

import logging

from atlassian import Jira

from .config import JiraConfig

logger = logging.getLogger("jira-mcp.jira")


class JiraClient:
    """Base client for Jira API interactions.

    Owns the single ``atlassian.Jira`` handle shared by every operation.
    """

    def __init__(self, config: JiraConfig | None = None) -> None:
        """Initialize the Jira client with a given configuration.

        Args:
            config: Jira configuration object. If None, will be loaded from environment variables.

        Raises:
            ValueError: If configuration is missing or invalid.
        """
        if config is None:
            self.config = JiraConfig.from_env()
        else:
            self.config = config

        if self.config.auth_type == "token":
            self.jira = Jira(
                url=self.config.url,
                token=self.config.personal_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
            )
        else:  # basic auth
            self.jira = Jira(
                url=self.config.url,
                username=self.config.username,
                password=self.config.api_token,
                cloud=self.config.is_cloud,
                verify_ssl=self.config.ssl_verify,
            )

        logger.debug(
            f"Jira client created for {self.config.url} "
            f"(auth: {self.config.auth_type}, cloud: {self.config.is_cloud})"
        )

    def user_field(self, user: str) -> dict[str, str]:
        """Build the user reference Jira expects for assignee-like fields.

        Cloud identifies users by accountId, Server/DC by username.

        Args:
            user: Account ID (Cloud) or username (Server/DC)

        Returns:
            The user reference dictionary
        """
        if self.config.is_cloud:
            return {"accountId": user}
        return {"name": user}
