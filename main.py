from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware
import os
from dotenv import load_dotenv
import logging
from contextlib import asynccontextmanager
from models import HealthResponse
from routers import profanity_router
from services import azure_kv_service, initialize_profanity_classifier, get_profanity_classifier

# Load environment variables
load_dotenv("config/.env")

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for application startup and shutdown."""
    logger.info("Starting application initialization...")
    classifier = get_profanity_classifier()
    try:
        initialize_profanity_classifier()

        if classifier.client.is_configured:
            logger.info("Vector index client is ready")
        else:
            logger.warning("Vector index client not configured, classification requests will fail")

        logger.info("Application initialization completed successfully")
        yield

    except Exception as e:
        logger.error(f"Failed to initialize application: {e}", exc_info=True)
        raise
    finally:
        await classifier.close()
        logger.info("Application shutdown completed")


app = FastAPI(
    title="Profanity Check API",
    description="API to classify text as profane using vector similarity search over a corpus of flagged phrases",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Create API router
api_router = APIRouter(prefix="/api")

@api_router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint with service status"""
    classifier = get_profanity_classifier()
    services = {
        "vector_index": bool(getattr(classifier.client, "is_configured", False)),
        "azure_key_vault": azure_kv_service.is_initialized,
        "profanity_classifier": classifier.is_initialized
    }

    return HealthResponse(
        status="healthy",
        message="Profanity check API is running",
        services=services
    )

# Include main API router
app.include_router(api_router)

# Served at /api itself, so it is mounted with the prefix rather than nested in api_router
app.include_router(profanity_router, prefix="/api")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        reload=True
    )
