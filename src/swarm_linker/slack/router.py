"""HTTP transport: the Slack Events API endpoint."""

from fastapi import APIRouter, BackgroundTasks, Depends, Header
from fastapi.responses import JSONResponse

from swarm_linker.slack.handlers import handle_slack_event
from swarm_linker.slack.verification import verify_slack_request

router = APIRouter(tags=["slack"])


@router.post("/slack/events")
async def slack_events(
    background_tasks: BackgroundTasks,
    payload: dict = Depends(verify_slack_request),
    retry_num: str | None = Header(default=None, alias="X-Slack-Retry-Num"),
) -> JSONResponse:
    """Receive a signed Events API delivery and hand it to the dispatcher.

    A redelivery means the first attempt is already being processed, so it is
    acknowledged without posting the links a second time.
    """
    if retry_num is not None:
        return JSONResponse({"ok": True})
    return handle_slack_event(payload, background_tasks)
