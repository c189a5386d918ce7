import os
from dotenv import load_dotenv

# Load Environment Variables
load_dotenv()

# ----------------------
# Logging
# ----------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# ----------------------
# Tavus (video agent)
# ----------------------
TAVUS_API_KEY = os.getenv("TAVUS_API_KEY")
TAVUS_PERSONA_ID = os.getenv("TAVUS_PERSONA_ID")
TAVUS_API_URL = os.getenv("TAVUS_API_URL", "https://tavusapi.com/v2")
TAVUS_CALLBACK_URL = os.getenv("TAVUS_CALLBACK_URL")

# ----------------------
# Retell (voice agent)
# ----------------------
RETELL_API_KEY = os.getenv("RETELL_API_KEY")
RETELL_INBOUND_AGENT_ID = os.getenv("RETELL_INBOUND_AGENT_ID")
RETELL_OUTBOUND_AGENT_ID = os.getenv("RETELL_OUTBOUND_AGENT_ID")
RETELL_API_URL = os.getenv("RETELL_API_URL", "https://api.retellai.com/v2")

# ----------------------
# Booking Links
# ----------------------
PURL_BASE_URL = os.getenv("PURL_BASE_URL", "https://book.voxaris.io")

# ----------------------
# CORS
# ----------------------
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
    if origin.strip()
]
