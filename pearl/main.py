from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from pearl.api.v1.router import api_router
from pearl.config import settings
from pearl.logging_config import setup_logging

setup_logging()

app = FastAPI(title="Pearl Cosmic Fingerprint", debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")

if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", type=str, default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args()

    uvicorn.run("pearl.main:app", host=args.host, port=args.port, reload=settings.DEBUG)
