"""FastAPI application."""

from fastapi import FastAPI

from server.routers.plan import router as plan_router
from server.server_config import API_DESCRIPTION, API_TITLE

app = FastAPI(title=API_TITLE, description=API_DESCRIPTION)
app.include_router(plan_router)
