# backend/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv

from config import settings
from database import init_db
from utils.errors import AppError

load_dotenv()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Router imports
from routes.auth import router as auth_router
from routes.logs import router as logs_router
from routes.products import router as products_router
from routes.sales import router as sales_router
from routes.purchases import router as purchases_router
from routes.sellers import router as sellers_router
from routes.calculators import router as calculators_router
from routes.dashboard import router as dashboard_router

# Initialization
init_db()

app = FastAPI(title="Shop Stock API", version="1.0.0")

# CORS Configuration
origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]
if settings.FRONTEND_URL and settings.FRONTEND_URL not in origins:
    origins.append(settings.FRONTEND_URL)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Domain errors -> JSON with the same {"detail": ...} shape as HTTPException
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


# Router registration
app.include_router(auth_router)
app.include_router(logs_router)
app.include_router(products_router)
app.include_router(sales_router)
app.include_router(purchases_router)
app.include_router(sellers_router)
app.include_router(calculators_router)
app.include_router(dashboard_router)

@app.get("/")
def read_root():
    return {"message": "Shop Stock API running"}
