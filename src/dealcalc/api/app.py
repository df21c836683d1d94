"""FastAPI application entry point."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from dealcalc.api.routes import calculators, transfer
from dealcalc.config import settings

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Deal Calculator",
    description="Rental property underwriting across six acquisition strategies",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculators.router)
app.include_router(transfer.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
