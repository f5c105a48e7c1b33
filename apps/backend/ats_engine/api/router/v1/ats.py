import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ....schemas.pydantic import AnalysisRecord, AnalysisResult, AnalysisStats, ScoreTier
from ....services import AnalysisHistoryService, InputError, NotFoundError, score_tier
from ...deps import get_history_service

ats_router = APIRouter()
logger = logging.getLogger(__name__)


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resume_text: str
    job_description: Optional[str] = None
    user_id: Optional[str] = None
    job_title: Optional[str] = None
    company: Optional[str] = None


class AnalyzeResponse(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    result: AnalysisResult
    tier: ScoreTier
    record_id: Optional[str] = None


@ats_router.post("/analyze", response_model=AnalyzeResponse, summary="Score a resume for ATS compatibility")
async def analyze_resume(
    request: AnalyzeRequest,
    service: AnalysisHistoryService = Depends(get_history_service),
):
    try:
        result, record_id = await service.analyze_and_save(
            request.user_id,
            request.resume_text,
            job_description=request.job_description,
            job_title=request.job_title,
            company=request.company,
        )
    except InputError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return AnalyzeResponse(result=result, tier=score_tier(result.overall_score), record_id=record_id)


@ats_router.get("/history/record/{record_id}", response_model=AnalysisRecord)
async def get_analysis(record_id: str, service: AnalysisHistoryService = Depends(get_history_service)):
    try:
        return await service.get_analysis(record_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@ats_router.get("/history/{user_id}", response_model=List[AnalysisRecord])
async def get_history(user_id: str, service: AnalysisHistoryService = Depends(get_history_service)):
    return await service.get_history(user_id)


@ats_router.get("/stats/{user_id}", response_model=Optional[AnalysisStats])
async def get_stats(user_id: str, service: AnalysisHistoryService = Depends(get_history_service)):
    return await service.get_stats(user_id)


@ats_router.delete("/history/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_analysis(
    record_id: str,
    user_id: Optional[str] = Query(default=None),
    service: AnalysisHistoryService = Depends(get_history_service),
):
    try:
        deleted = await service.delete_analysis(record_id, user_id=user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Analysis history unavailable")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
