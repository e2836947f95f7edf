import logging
from logging.config import dictConfig

from fastapi import FastAPI

from autograder.config import LogConfig, config
from autograder.controllers import classes, users
from autograder.database import SessionLocal, engine
from autograder.utils import create_default_class, init_database

dictConfig(LogConfig().model_dump())
logger = logging.getLogger("autograder")

app = FastAPI(title="Autograder")

app.include_router(users.router)
app.include_router(classes.router)


@app.on_event("startup")
async def startup_event():
    """Initialize schema, enrollment hook and default class on startup"""
    init_database(engine, config.ENROLLMENT_HOOK_MODE)
    if config.SEED_DEFAULT_CLASS:
        db = SessionLocal()
        try:
            create_default_class(db)
        finally:
            db.close()
    logger.info("Enrollment hook mode: %s", config.ENROLLMENT_HOOK_MODE)
