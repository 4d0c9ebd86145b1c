"""Comment thread subscription use cases."""

from .subscription import (
    GetSubscriptionStatusUseCase,
    SubscribeUseCase,
    SubscriptionRequest,
    SubscriptionResponse,
    UnsubscribeUseCase,
)

__all__ = [
    "GetSubscriptionStatusUseCase",
    "SubscribeUseCase",
    "SubscriptionRequest",
    "SubscriptionResponse",
    "UnsubscribeUseCase",
]
