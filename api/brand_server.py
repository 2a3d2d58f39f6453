import os
import sys
import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
import uvicorn

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.logging import LoggingIntegration

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from setup_logging_optimized import get_logger
from config.logging_config import apply_logging_config

load_dotenv(override=True)

# Configure logging for the entire application
logging_config = apply_logging_config()
logger = get_logger(__name__)

if os.getenv("SENTRY_DSN"):
    sentry_logging = LoggingIntegration(
        level=logging.INFO,        # Breadcrumbs
        event_level=logging.ERROR  # Events
    )
    sentry_sdk.init(
        dsn=os.getenv("SENTRY_DSN"),
        integrations=[
            FastApiIntegration(transaction_style='endpoint'),
            sentry_logging,
        ],
        traces_sample_rate=0.1,
        environment=logging_config["environment"],
        release=os.getenv("RENDER_GIT_COMMIT", "unknown"),
        send_default_pii=False,
    )

from api.requests.api_analyze import router as analyze_router
from api.requests.api_generate import router as generate_router

app = FastAPI(title="Brand Kit API")

ENVIRONMENT = (os.getenv("ENVIRONMENT") or os.getenv("ENV") or "development").lower()

allowed_origins = {
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "").split(",")
    if origin.strip()
}
if ENVIRONMENT != "production":
    allowed_origins.update({
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    })

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    max_age=3600,
)

app.include_router(analyze_router)
app.include_router(generate_router)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


if __name__ == "__main__":
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "9090"))

    logger.info(f"Starting Brand Kit API on http://{host}:{port} ({logging_config['environment']})")
    uvicorn.run("api.brand_server:app", host=host, port=port, reload=ENVIRONMENT != "production", workers=1)
