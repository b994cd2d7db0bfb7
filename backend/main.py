"""
Receipt Splitter Backend API

A FastAPI backend for splitting an itemized restaurant bill between people.
This module sets up the app and mounts routers - all endpoint logic is in routers/.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, LOG_LEVEL

# Import routers
from routers import splits, currencies


logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)

# Initialize FastAPI app
app = FastAPI(
    title="Receipt Splitter API",
    description="API for splitting itemized receipts with proportional tax and tip",
    version="1.0.0"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=CORS_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(splits.router)
app.include_router(currencies.router)


@app.get("/")
def read_root():
    return {"message": "Receipt Splitter API"}
