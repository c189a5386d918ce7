from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config import ALLOWED_ORIGINS, LOG_LEVEL
from booking_agent import BookingOrchestrator, create_booking_router

# ----------------------
# Basic Logging
# ----------------------
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# ----------------------
# App Setup
# ----------------------
app = FastAPI(title="Booking Orchestration Backend")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials="*" not in ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# ----------------------
# Booking State
# ----------------------
# Process-scoped: sessions and queued actions live until the process exits
orchestrator = BookingOrchestrator()
app.include_router(create_booking_router(orchestrator))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
