from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from taskflow.core.database import get_db
from taskflow.schemas.stats import StatsResponse
from taskflow.services import stats_service
from taskflow.services.document_service import store_error_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stats", tags=["stats"])


@router.get("", response_model=StatsResponse)
def get_stats(db: Session = Depends(get_db)):
    # lecture seule, tout ou rien
    try:
        return stats_service.collect_stats(db)
    except SQLAlchemyError as e:
        logger.error(f"Stats failed: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=store_error_message(e))
