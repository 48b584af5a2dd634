"""Main FastAPI application."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from workout_plan_ingestor.api.plan_routes import router
from workout_plan_ingestor.config import settings

# Interactive docs are disabled in production
docs_url = None if settings.ENVIRONMENT == "production" else "/docs"
app = FastAPI(title="Workout Plan Ingestor", docs_url=docs_url, redoc_url=None)

# Configure CORS to allow requests from the UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/health")
def health():
    return {"status": "ok"}
