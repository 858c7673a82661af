from sqlalchemy.orm import Session
from typing import List
import logging
import os

from models.app_config import AppConfig
from schemas.app_config import AppConfigUpdate
from exceptions import ValidationError, translate_db_errors

logger = logging.getLogger(__name__)

EGG_PRICE = "egg_price"

DEFAULT_CONFIGS = [
    {"name": EGG_PRICE, "value": os.getenv("EGG_PRICE", "10.0")},
]

# Parameters whose value must parse as a non-negative number
NUMERIC_CONFIGS = {EGG_PRICE}


@translate_db_errors
def get_config(db: Session, name: str = None):
    if name:
        return db.query(AppConfig).filter(AppConfig.name == name).first()
    return db.query(AppConfig).order_by(AppConfig.name).all()


@translate_db_errors
def upsert_config(db: Session, name: str, config: AppConfigUpdate) -> AppConfig:
    if name in NUMERIC_CONFIGS:
        try:
            numeric = float(config.value)
        except ValueError:
            raise ValidationError(f"{name} must be a number, got '{config.value}'")
        if numeric < 0:
            raise ValidationError(f"{name} must not be negative")

    db_config = get_config(db, name=name)
    if db_config is None:
        db_config = AppConfig(name=name, value=config.value)
        db.add(db_config)
    else:
        db_config.value = config.value
    db.commit()
    db.refresh(db_config)
    logger.info(f"Set config {name} = {config.value}")
    return db_config


@translate_db_errors
def initialize_default_configs(db: Session) -> List[str]:
    """Create any missing default configs. Existing values are left alone."""
    existing = {name for (name,) in db.query(AppConfig.name)}
    created = []
    for config_data in DEFAULT_CONFIGS:
        if config_data["name"] not in existing:
            db.add(AppConfig(**config_data))
            created.append(config_data["name"])
    if created:
        db.commit()
        logger.info(f"Initialized default configs: {created}")
    return created


def get_egg_price(db: Session) -> float:
    db_config = get_config(db, name=EGG_PRICE)
    if not db_config:
        logger.warning(f"{EGG_PRICE} not found in AppConfig. Defaulting to EGG_PRICE env value.")
        return float(os.getenv("EGG_PRICE", "10.0"))
    try:
        return float(db_config.value)
    except ValueError:
        logger.error(f"Invalid {EGG_PRICE} in AppConfig: {db_config.value}. Defaulting to EGG_PRICE env value.")
        return float(os.getenv("EGG_PRICE", "10.0"))
