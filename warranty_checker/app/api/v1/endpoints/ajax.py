"""
Ajax dispatch endpoint for API v1.

Browser scripts post form-encoded bodies to ``/ajax`` with an ``action``
field naming the handler to run.  Handlers are registered on the
application's ``Dispatcher`` at startup and receive the remaining form
fields.  Unknown actions get a 400 failure envelope.
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from warranty_checker.app.schemas.envelope import send_json_error
from warranty_checker.app.services.message_service import MessageService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/ajax", name="dispatch_ajax")
async def dispatch_ajax(request: Request) -> JSONResponse:
    """Run the action named in the request body."""
    form = await request.form()
    payload = {key: value for key, value in form.items() if isinstance(value, str)}
    action = payload.pop("action", "")
    handler = request.app.state.dispatcher.get_action(action)
    if handler is None:
        logger.warning("Rejected ajax call for unknown action %r", action)
        return send_json_error(
            await MessageService.get_text("unknown_action"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    return await handler(payload)
