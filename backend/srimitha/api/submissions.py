from __future__ import annotations

from fastapi import APIRouter, Response, status
from sqlmodel import Session

from srimitha.api.deps import SESSION_DEP
from srimitha.core.errors import SubmissionError, storage_errors
from srimitha.core.logging import get_logger
from srimitha.schemas.common import SubmissionResponse
from srimitha.schemas.submissions import (
    ContactMessageCreate,
    ContactMessageRead,
    InternshipApplicationCreate,
    InternshipApplicationRead,
    NewsletterSubscribe,
    NewsletterSubscriberRead,
)
from srimitha.services import submissions

router = APIRouter(tags=["submissions"])
logger = get_logger(__name__)

CONTACT_SENT = "Your message has been sent successfully. We'll get back to you soon!"
NEWSLETTER_SUBSCRIBED = "Thank you for subscribing to our newsletter!"
NEWSLETTER_ALREADY_SUBSCRIBED = "You are already subscribed to our newsletter."
APPLICATION_SUBMITTED = (
    "Your application has been submitted successfully! We'll review it and get back to you."
)


@router.post(
    "/contact",
    response_model=SubmissionResponse[ContactMessageRead],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def submit_contact(
    payload: ContactMessageCreate,
    session: Session = SESSION_DEP,
) -> SubmissionResponse[ContactMessageRead]:
    with storage_errors(
        "submissions.contact",
        "Failed to send your message. Please try again later.",
        session=session,
        error=SubmissionError,
    ):
        row = submissions.submit_contact(session, payload)
    logger.info("submissions.contact.created id=%s", row.id)
    return SubmissionResponse(
        success=True,
        message=CONTACT_SENT,
        data=ContactMessageRead.model_validate(row),
    )


@router.post(
    "/newsletter/subscribe",
    response_model=SubmissionResponse[NewsletterSubscriberRead],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def subscribe_newsletter(
    payload: NewsletterSubscribe,
    response: Response,
    session: Session = SESSION_DEP,
) -> SubmissionResponse[NewsletterSubscriberRead]:
    """Subscribe an email; repeating the call is a successful no-op."""
    with storage_errors(
        "submissions.newsletter",
        "Failed to subscribe to the newsletter. Please try again later.",
        session=session,
        error=SubmissionError,
    ):
        result = submissions.subscribe_newsletter(session, payload)

    if result.inserted:
        message = NEWSLETTER_SUBSCRIBED
    else:
        response.status_code = status.HTTP_200_OK
        message = NEWSLETTER_ALREADY_SUBSCRIBED
    logger.info(
        "submissions.newsletter.%s id=%s",
        result.outcome.value,
        result.row.id,
    )
    return SubmissionResponse(
        success=True,
        message=message,
        data=NewsletterSubscriberRead.model_validate(result.row),
    )


@router.post(
    "/internships/apply",
    response_model=SubmissionResponse[InternshipApplicationRead],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def apply_internship(
    payload: InternshipApplicationCreate,
    session: Session = SESSION_DEP,
) -> SubmissionResponse[InternshipApplicationRead]:
    with storage_errors(
        "submissions.internship",
        "Failed to submit your application. Please try again later.",
        session=session,
        error=SubmissionError,
    ):
        row = submissions.apply_internship(session, payload)
    logger.info("submissions.internship.created id=%s", row.id)
    return SubmissionResponse(
        success=True,
        message=APPLICATION_SUBMITTED,
        data=InternshipApplicationRead.model_validate(row),
    )
