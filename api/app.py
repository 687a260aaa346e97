# uvicorn - server to post and run
# uvicorn api.app:app --reload
from fastapi import FastAPI

from api.routers.examples import router as examples_router
from common.logging import setup_logging
from core.versions import APP_VERSION

app = FastAPI(title="Example sentences", version=APP_VERSION)
setup_logging()

app.include_router(examples_router)
