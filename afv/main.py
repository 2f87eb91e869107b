# afv/main.py
from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from starlette.responses import RedirectResponse

from afv.core.config import settings
from afv.core.logging_config import setup_logging

from afv.api import evaluation_router
from afv.web.calculator import router as calculator_router

setup_logging()

app = FastAPI(title=settings.APP_TITLE)

app.include_router(evaluation_router, prefix="/api")
app.include_router(calculator_router)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/")
def root():
    return RedirectResponse("/calculadora", status_code=302)
