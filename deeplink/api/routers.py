"""
FastAPI router definitions for the API endpoints.
"""

from fastapi import APIRouter, HTTPException, Query

from deeplink.api.dependencies import (
    get_bot_store,
    get_command_service,
    get_dispatcher,
    get_host_gate,
    get_parser,
    get_tunnel_gate,
)
from deeplink.api.schemas import (
    ActiveBotResponse,
    CommandHistoryResponse,
    CommandInfo,
    DispatchResponse,
    ErrorResponse,
    IssuedCommand,
    ProtocolRequest,
    ReadinessResponse,
)
from deeplink.exceptions import InvalidProtocolError

router = APIRouter()


@router.post(
    "/protocol", response_model=DispatchResponse, responses={400: {"model": ErrorResponse}}
)
def dispatch_protocol(request: ProtocolRequest):
    """
    Parse a deep-link URL and carry out its action.

    Handlers finish in the background; the response only says whether the
    link was routed to one.

    Raises:
        HTTPException: If the URL does not use the registered scheme
    """
    try:
        command, dispatched = get_dispatcher().parse_and_dispatch(request.url)
    except InvalidProtocolError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return DispatchResponse(command=CommandInfo.from_entity(command), dispatched=dispatched)


@router.get(
    "/protocol/parse", response_model=CommandInfo, responses={400: {"model": ErrorResponse}}
)
def parse_protocol(url: str = Query(..., description="Deep-link URL to parse")):
    """Parse a deep-link URL without dispatching it."""
    try:
        return CommandInfo.from_entity(get_parser().parse(url))
    except InvalidProtocolError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/readiness/tunnel", response_model=ReadinessResponse)
def tunnel_connected():
    """Called by the tunnel manager once the tunnel is connected."""
    return ReadinessResponse(gate="tunnel", opened=get_tunnel_gate().signal())


@router.post(
    "/readiness/host", response_model=ReadinessResponse, responses={404: {"model": ErrorResponse}}
)
def host_ready():
    """Called by the host UI once it can show deep-linked content."""
    gate = get_host_gate()
    if gate is None:
        raise HTTPException(status_code=404, detail="Host readiness gate is disabled")
    return ReadinessResponse(gate="host", opened=gate.signal())


@router.get("/commands/history", response_model=CommandHistoryResponse)
def command_history():
    """Commands issued to the client side, oldest first."""
    return CommandHistoryResponse(
        commands=[IssuedCommand(**c) for c in get_command_service().history()]
    )


@router.get(
    "/bot/active", response_model=ActiveBotResponse, responses={404: {"model": ErrorResponse}}
)
def active_bot():
    bot = get_bot_store().get_active()
    if bot is None:
        raise HTTPException(status_code=404, detail="No active bot")
    return ActiveBotResponse(bot=bot.get_details())
