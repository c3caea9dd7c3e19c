import logging
from pydantic import ValidationError as PydanticValidationError
from config import DISPATCH_EVENT_TYPE, Settings
from core.errors import ConfigurationError, RegistrationError, ValidationError
from schemas import (
    DispatchClientPayload,
    SubmissionError,
    SubmissionResult,
    SubmitNIP05Request,
    SubmitNIP05Response,
)
from services.github import DispatchClient

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Request body must be a JSON object"


def parse_submission(body) -> SubmitNIP05Request:
    """Validate and normalize a decoded request body.

    Fields are checked in declaration order, so a bad username is reported
    before a bad public key.
    """
    if not isinstance(body, dict):
        raise ValidationError(INVALID_BODY_MESSAGE)
    try:
        return SubmitNIP05Request.model_validate(body)
    except PydanticValidationError as e:
        for err in e.errors():
            cause = err.get("ctx", {}).get("error")
            if isinstance(cause, ValidationError):
                raise cause from e
        raise ValidationError(INVALID_BODY_MESSAGE) from e


async def submit_nip05(body, settings: Settings, dispatch_client: DispatchClient) -> SubmissionResult:
    try:
        data = parse_submission(body)

        if not settings.github_token:
            logger.error("GITHUB_TOKEN environment variable is not set")
            raise ConfigurationError("Server configuration error")

        await dispatch_client.trigger(
            DISPATCH_EVENT_TYPE,
            DispatchClientPayload(username=data.username, pubkey=data.pubkey),
        )
    except RegistrationError as e:
        logger.error(f"Submission rejected ({e.kind}): {e.message}")
        return SubmissionResult(ok=False, error=SubmissionError(kind=e.kind, message=e.message))

    return SubmissionResult(
        ok=True,
        data=SubmitNIP05Response(
            message=f"Request submitted! A pull request will be created for {data.username}",
            username=data.username,
            pubkey=data.pubkey,
            pr_url=settings.pr_url,
        ),
    )
