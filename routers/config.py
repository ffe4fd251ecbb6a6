from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends

from database.store import InMemoryStore, get_store
from schemas.assessments import ComponentConfigUpdate, Term
from services.output_of_work import apply_config_update

router = APIRouter(prefix="/config", tags=["Configuration"])

# ==========================================================
# [Step 1] current academic period
# ==========================================================
def get_current_academic_period(today: Optional[date] = None):
    """
    Academic year and term for a date
    - Sep~Dec -> Term 1 of the year starting this September
    - Jan~Apr -> Term 2 of the year that started last September
    - May~Aug -> Term 3 of the year that started last September
    """
    today = today or date.today()
    month = today.month

    if month >= 9:
        return f"{today.year}-{today.year + 1}", Term.TERM_1
    elif month <= 4:
        return f"{today.year - 1}-{today.year}", Term.TERM_2
    else:
        return f"{today.year - 1}-{today.year}", Term.TERM_3


# ==========================================================
# [Step 2] Config routes
# ==========================================================

# ✅ [READ] current academic year / term
@router.get("/academic")
def get_academic_config():
    academic_year, term = get_current_academic_period()
    return {
        "success": True,
        "data": {
            "academic_year": academic_year,
            "term": term.value
        },
        "message": f"Current period: {academic_year} {term.value}"
    }


# ✅ [READ] assessment configuration of a term
@router.get("/terms/{term}")
def get_term_config(term: Term, store: InMemoryStore = Depends(get_store)):
    config = store.get_term_config(term)
    return {
        "success": True,
        "data": config.model_dump(mode="json"),
        "message": f"{term.value} configuration"
    }


# ✅ [UPDATE] change assessment counts / max scores of a term
@router.put("/terms/{term}")
def update_term_config(
    term: Term,
    updates: List[ComponentConfigUpdate],
    store: InMemoryStore = Depends(get_store),
):
    config = store.save_term_config(apply_config_update(store.get_term_config(term), updates))
    return {
        "success": True,
        "data": config.model_dump(mode="json"),
        "message": f"{term.value} configuration saved"
    }
