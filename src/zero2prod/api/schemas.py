from pydantic import BaseModel, Field


class SubscriptionForm(BaseModel):
    """Form fields accepted by POST /subscriptions."""

    name: str = Field(..., description="Name the subscriber wants to be addressed by")
    email: str = Field(..., description="Address the newsletter is sent to")
