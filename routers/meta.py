from fastapi import APIRouter, Depends

from config.settings import settings
from database.store import InMemoryStore, get_store

router = APIRouter(prefix="/meta", tags=["Meta"])


@router.get("/health")
def health(store: InMemoryStore = Depends(get_store)):
    return {"status": "ok", "env": settings.ENV, "version": settings.APP_VERSION, "records": store.counts()}
