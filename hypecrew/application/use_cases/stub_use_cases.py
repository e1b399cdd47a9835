"""
Features that are part of the product but not built yet.

Each one is an explicit use case so the web layer can answer them with a
"coming soon" error instead of dropping the request.
"""

import logging
from typing import Any

from hypecrew.application.use_cases.base_use_case import AuthorizedUseCase, BaseUseCase
from hypecrew.domain.models.base import FeatureNotImplementedError

logger = logging.getLogger(__name__)


class NotYetImplementedUseCase(AuthorizedUseCase, BaseUseCase[Any, None]):
    """Logs the request and fails with FeatureNotImplementedError."""

    feature = "This feature"

    async def _execute_business_logic(self, request: Any) -> None:
        logger.info(f"{self.feature} requested by user {self.current_user_id}: {request!r}")
        raise FeatureNotImplementedError(self.feature)


class ApplyToGigUseCase(NotYetImplementedUseCase):
    feature = "Applying to gigs"


class ViewGigDetailUseCase(NotYetImplementedUseCase):
    feature = "Gig details"


class MessagesUseCase(NotYetImplementedUseCase):
    feature = "Messaging"


class EditProfileUseCase(NotYetImplementedUseCase):
    feature = "Profile editing"
