from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.routes.extraction import router as extraction_router

app = FastAPI(
    title="Voice Capture API",
    description="Split spoken thoughts into task and note drafts",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
    ],
    allow_origin_regex=r"http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(extraction_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
