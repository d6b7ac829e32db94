# sitereviews/services/api/routers/reviews.py
from __future__ import annotations

from http import HTTPStatus

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from fastapi.responses import JSONResponse

from sitereviews.common.settings import get_settings
from sitereviews.domain.errors import AppendFailure
from sitereviews.services.api.deps import get_runtime
from sitereviews.services.mappers.review import to_review_read
from sitereviews.services.reviews.runtime import ReviewRuntime
from sitereviews.services.reviews.submission import ReviewForm
from sitereviews.services.schemas.reviews import ReviewBoard, ReviewCreate, ReviewSummary, SubmissionResponse

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/reviews", tags=["reviews"])


@router.get("", response_model=ReviewBoard)
def get_board(rt: ReviewRuntime = Depends(get_runtime)) -> ReviewBoard:
    return rt.presenter.board()


@router.get("/summary", response_model=ReviewSummary)
def get_summary(rt: ReviewRuntime = Depends(get_runtime)) -> ReviewSummary:
    return rt.presenter.summary


@router.post(
    "",
    response_model=SubmissionResponse,
    status_code=HTTPStatus.CREATED,
    responses={
        HTTPStatus.UNPROCESSABLE_ENTITY: {"model": SubmissionResponse},
        HTTPStatus.SERVICE_UNAVAILABLE: {"model": SubmissionResponse},
    },
)
async def submit_review(payload: ReviewCreate, rt: ReviewRuntime = Depends(get_runtime)):
    form = ReviewForm(name=payload.name, text=payload.text)
    if payload.rating:
        form.selector.select(payload.rating)

    result = await rt.submissions.submit(form)
    body = SubmissionResponse(
        outcome=result.outcome.value,
        review=to_review_read(result.review) if result.review else None,
        missing=result.missing,
        detail=str(result.error) if result.error else None,
        persisted=result.persisted,
    )
    if result.ok:
        return body

    status = HTTPStatus.SERVICE_UNAVAILABLE if isinstance(result.error, AppendFailure) else HTTPStatus.UNPROCESSABLE_ENTITY
    return JSONResponse(status_code=status, content=body.model_dump(mode="json"))


@router.websocket("/live")
async def live_board(ws: WebSocket) -> None:
    """Sends the current board, then every board change as it happens."""
    rt: ReviewRuntime = ws.app.state.reviews
    await ws.accept()
    queue = rt.presenter.listen()
    try:
        await ws.send_json({"type": "board", "board": rt.presenter.board().model_dump(mode="json")})
        while True:
            event = await queue.get()
            await ws.send_json(event.model_dump(mode="json"))
            if event.type == "closed":
                # listener was dropped (too slow) or the app is shutting down
                await ws.close(code=status.WS_1013_TRY_AGAIN_LATER)
                return
    except WebSocketDisconnect:
        pass
    finally:
        rt.presenter.unlisten(queue)
