from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List, Optional

from database import get_db
from schemas.app_config import AppConfigUpdate, AppConfigOut
from crud import app_config as crud_app_config

router = APIRouter(prefix="/api/configurations", tags=["Configuration"])

@router.get("/", response_model=List[AppConfigOut])
def get_configs(name: Optional[str] = None, db: Session = Depends(get_db)):
    configs = crud_app_config.get_config(db, name=name)
    # Always return a list, even if empty
    return [configs] if name and configs else configs or []

@router.put("/{name}", response_model=AppConfigOut)
def set_config(name: str, config: AppConfigUpdate, db: Session = Depends(get_db)):
    """Create or overwrite a configuration value, e.g. egg_price."""
    return crud_app_config.upsert_config(db, name, config)
