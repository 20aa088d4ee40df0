"""
Base model for API response models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict

EMPTY_STRING = ""
JIRA_DEFAULT_ID = "0"
JIRA_DEFAULT_KEY = "UNKNOWN-0"


class ApiModel(BaseModel):
    """
    Base model for all API response models.

    Subclasses build themselves from raw API payloads with
    ``from_api_response`` and render with ``to_simplified_dict``.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "ApiModel":
        """
        Create a model instance from an API response.

        Args:
            data: The raw API response data
            **kwargs: Additional context needed for conversion

        Returns:
            An instance of the model
        """
        raise NotImplementedError("Subclasses must implement from_api_response")

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to simplified dictionary for API response."""
        return self.model_dump(exclude_none=True)
