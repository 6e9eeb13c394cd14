"""Public profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from grifi.application.usecase.collab import (
    CreateGuestInquiryRequest,
    CreateGuestInquiryResponse,
    CreateGuestInquiryUseCase,
)
from grifi.domain.value import RequestKind

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


class GuestInquiryAPIRequest(BaseModel):
    """API request for a visitor contacting a member."""

    contact: str | None = Field(default=None, max_length=255)
    kind: RequestKind = RequestKind.COLLAB
    message: str = Field(min_length=1, max_length=5000)


@router.post(
    "/{username}/inquiries",
    response_model=CreateGuestInquiryResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_guest_inquiry(
    username: str,
    request: GuestInquiryAPIRequest,
    use_case: FromDishka[CreateGuestInquiryUseCase],
) -> CreateGuestInquiryResponse:
    """Contact a member from their public profile without an account.

    No authentication. The visitor must leave an email address or phone
    number so the member can reply outside the platform.

    Args:
        username: Public username of the member
        request: Inquiry data
        use_case: Create guest inquiry use case from DI

    Returns:
        The new pending inquiry
    """
    return await use_case.execute(
        CreateGuestInquiryRequest(
            username=username,
            contact=request.contact,
            kind=request.kind,
            message=request.message,
        )
    )
