from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .routers import pricing

app = FastAPI(
    title=settings.APP_NAME,
    description="Price estimates, effort ranges and service packages for freelance web projects",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(pricing.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "freelance-pricing"}
