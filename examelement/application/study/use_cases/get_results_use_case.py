"""Use case for reading the results of a submitted item."""

from examelement.application.study.services.content_store import ContentStore, GradedItem
from examelement.domain.common.value_objects.ids import ContentItemId, UserId


class GetResultsUseCase:
    def __init__(self, content_store: ContentStore) -> None:
        """Initialize use case with dependencies."""
        self.content_store = content_store

    def get_results(self, item_id: int, user_id: int) -> GradedItem:
        """
        Per-question breakdown of a submitted item.

        Raises:
            ContentAccessDeniedError: If the item is missing or not the user's
            ResultsNotAvailableError: If the item has not been submitted yet
        """
        return self.content_store.results(ContentItemId(item_id), UserId(user_id))
