from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from vendorhub.auth import get_current_user
from vendorhub.dashboard.schemas import DashboardCounts
from vendorhub.dashboard.service import get_dashboard_counts
from vendorhub.db import get_db
from vendorhub.responses import envelope

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"], dependencies=[Depends(get_current_user)])


@router.get("")
def dashboard(db: Session = Depends(get_db)):
    return envelope(data=DashboardCounts(**get_dashboard_counts(db)).model_dump())
