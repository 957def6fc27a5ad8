"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.routers import work_time


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown events."""
    # Startup
    print(f"Companion work-time service starting (debug={settings.debug})")
    yield
    # Shutdown
    print("Companion work-time service stopped")


app = FastAPI(
    title="Companion Work-Time API",
    description="Timesheet work-time calculations for the Companion app",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(work_time.router)


@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {"status": "ok", "message": "Companion Work-Time API"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
