"""Reviews-specific exceptions.

Built on Protean's exception hierarchy so the HTTP layer and callers that
already handle `ValidationError` / `InvalidOperationError` keep working.
"""

from protean.exceptions import InvalidOperationError, ValidationError


class IneligibleToReview(ValidationError):
    """The customer may not review the product.

    `reason` is a stable code (`no_purchase`, `already_reviewed`) that
    clients rely on to render the precise explanation.
    """

    def __init__(self, reason: str, message: str, existing_review=None):
        super().__init__({"review": [message]})
        self.reason = reason
        self.message = message
        self.existing_review = existing_review


class ReviewAlreadyModerated(InvalidOperationError):
    """A moderation decision was attempted on a review that already has one."""

    def __init__(self, review_id, status: str):
        super().__init__(f"Review {review_id} is already {status}")
        self.review_id = review_id
        self.status = status


class NotificationDispatchError(Exception):
    """A notice could not be handed to the notification sink.

    Never propagated to command callers; the dispatcher logs it.
    """

    def __init__(self, kind: str, error: str):
        super().__init__(f"Failed to dispatch {kind} notice: {error}")
        self.kind = kind
        self.error = error
