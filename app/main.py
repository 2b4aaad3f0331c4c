from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging

from app.config import CORS_ORIGINS, FORWARDED_ALLOW_IPS, HOST, LOG_LEVEL, PORT
from app.database import init_db
from app.errors import register_exception_handlers
from app.routers.players import router as players_router

# ✅ Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


# ✅ Create DB tables on startup
@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield


# ✅ Initialize FastAPI app with redirect_slashes=False to avoid automatic redirects
app = FastAPI(title="Player Stats API", redirect_slashes=False, lifespan=lifespan)

# ✅ CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


# ✅ Health check
@app.get("/")
async def home():
    return {"message": "Player Stats API is running!"}


# ✅ Register routers
app.include_router(players_router, prefix="/players", tags=["Players"])

# ✅ Uvicorn entry point with proxy headers enabled
if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=HOST,
        port=PORT,
        proxy_headers=True,
        forwarded_allow_ips=FORWARDED_ALLOW_IPS,
    )
