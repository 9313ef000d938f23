"""LocalizationProtocol - localized string resources."""

from typing import Protocol


class LocalizationProtocol(Protocol):
    """Protocol for localized resource lookup."""

    async def get_resource(
        self, resource_key: str, language_id: int | None = None
    ) -> str:
        """Return the localized text for a resource key.

        Args:
            resource_key: Resource name (case-insensitive).
            language_id: Language; None means the current working language.

        Returns:
            str: Localized text, or the resource key itself if not found.
        """
        ...
