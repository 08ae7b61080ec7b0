from fastapi import APIRouter, Depends

from app.data.database import get_store
from app.data.store import InMemoryStore
from app.domain.schemas import CouponOut, StatsOut
from app.services.coupon_service import CouponService
from app.services.stats_service import StatsService

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post("/coupons", response_model=CouponOut, status_code=201)
def issue_coupon(store: InMemoryStore = Depends(get_store)):
    """Reczne wydanie kuponu, dozwolone tylko po N-tym zamowieniu."""
    return CouponService(store).admin_issue()


@router.get("/stats", response_model=StatsOut)
def stats(store: InMemoryStore = Depends(get_store)):
    return StatsService(store).stats()
