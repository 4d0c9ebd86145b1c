"""Comment thread subscription use cases."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.service import SubscriptionService
from blog.domain.value import CommentId, PostId, UserId


class SubscriptionRequest(BaseModel):
    """Subscription request for one comment thread."""

    post_id: str
    comment_id: str
    user_id: str  # User ID from authenticated user


class SubscriptionResponse(BaseModel):
    comment_id: str
    subscribed: bool


class SubscribeUseCase:
    """Use case for following replies under a comment."""

    def __init__(self, subscription_service: SubscriptionService) -> None:
        """Initialize subscribe use case.

        Args:
            subscription_service: Subscription domain service
        """
        self.subscription_service = subscription_service

    async def execute(self, request: SubscriptionRequest) -> SubscriptionResponse:
        """Execute subscribe flow.

        Raises:
            NotFoundError: If the post or comment is missing
            ConflictError: If the user is already subscribed
        """
        await self.subscription_service.subscribe(
            user_id=UserId(UUID(request.user_id)),
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
        )
        return SubscriptionResponse(comment_id=request.comment_id, subscribed=True)


class UnsubscribeUseCase:
    """Use case for no longer following a comment thread."""

    def __init__(self, subscription_service: SubscriptionService) -> None:
        self.subscription_service = subscription_service

    async def execute(self, request: SubscriptionRequest) -> SubscriptionResponse:
        """Execute unsubscribe flow.

        Raises:
            NotFoundError: If the post, comment or subscription is missing
        """
        await self.subscription_service.unsubscribe(
            user_id=UserId(UUID(request.user_id)),
            post_id=PostId(UUID(request.post_id)),
            comment_id=CommentId(UUID(request.comment_id)),
        )
        return SubscriptionResponse(comment_id=request.comment_id, subscribed=False)


class GetSubscriptionStatusUseCase:
    """Use case for checking whether the user follows a comment thread."""

    def __init__(self, subscription_service: SubscriptionService) -> None:
        self.subscription_service = subscription_service

    async def execute(self, request: SubscriptionRequest) -> SubscriptionResponse:
        subscribed = await self.subscription_service.is_subscribed(
            UserId(UUID(request.user_id)), CommentId(UUID(request.comment_id))
        )
        return SubscriptionResponse(
            comment_id=request.comment_id, subscribed=subscribed
        )
