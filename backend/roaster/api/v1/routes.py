from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from roaster.core.logging import logger
from roaster.domain.audio import to_data_uri
from roaster.schemas.roast import (
    LanguageSchema,
    RoastFailure,
    RoastRequest,
    RoastResponse,
)
from roaster.usecases.roast import RoastPipeline, get_pipeline
from roaster.utils.ids import generate_request_id

router = APIRouter(prefix="/api/v1")

ROAST_FAILED = "Failed to roast"


@router.post(
    "/roast",
    response_model=RoastResponse,
    responses={500: {"model": RoastFailure}},
)
async def post_roast(body: RoastRequest, pipeline: RoastPipeline = Depends(get_pipeline)):
    request_id = generate_request_id()
    logger.info(
        "Request %s: roast requested (language=%s, %d chars)",
        request_id,
        body.language,
        len(body.message),
    )
    try:
        result = await pipeline.run(body.message, body.language, request_id=request_id)
    except Exception as e:
        logger.error("Request %s: roast failed: %s", request_id, e, exc_info=True)
        failure = RoastFailure(error=ROAST_FAILED, message=str(e) or type(e).__name__)
        return JSONResponse(status_code=500, content=failure.model_dump())

    return RoastResponse(
        reply=result.reply,
        audio=to_data_uri(result.audio),
        source=result.source,
    )


@router.get("/languages", response_model=list[LanguageSchema])
async def get_languages(pipeline: RoastPipeline = Depends(get_pipeline)):
    return [
        LanguageSchema(
            tag=p.language.value,
            display_name=p.display_name,
            locale=p.locale,
        )
        for p in pipeline.voices.profiles()
    ]
