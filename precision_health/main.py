import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from precision_health.config.settings import settings
from precision_health.core.middleware import SecurityHeadersMiddleware
from precision_health.database.supabase_client import check_service_role_key
from precision_health.modules.auth import routes as auth_routes
from precision_health.modules.profiles import routes as profiles_routes
from precision_health.modules.biomarkers import routes as biomarkers_routes
from precision_health.modules.ingredients import routes as ingredients_routes
from precision_health.modules.food_lookup import routes as food_lookup_routes
from precision_health.modules.recipes import routes as recipes_routes
from precision_health.modules.meal_plans import routes as meal_plans_routes
from precision_health.modules.restaurants import routes as restaurants_routes
from precision_health.modules.grocery import routes as grocery_routes
from precision_health.modules.medications import routes as medications_routes

API_PREFIX = "/api/v1"

FEATURE_ROUTERS = (
    auth_routes.router,
    profiles_routes.router,
    biomarkers_routes.router,
    ingredients_routes.router,
    food_lookup_routes.router,
    recipes_routes.router,
    meal_plans_routes.router,
    restaurants_routes.router,
    grocery_routes.router,
    medications_routes.router,
)

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit])
app = FastAPI(title=settings.app_name, debug=settings.debug, redirect_slashes=False)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def unhandled_error(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    detail = "Internal server error" if settings.is_production else str(exc)
    return JSONResponse(status_code=500, content={"detail": detail})


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for feature_router in FEATURE_ROUTERS:
    app.include_router(feature_router, prefix=API_PREFIX)


@app.on_event("startup")
async def log_startup():
    logger.info("%s starting (%s), %d routers under %s",
                settings.app_name, settings.environment, len(FEATURE_ROUTERS), API_PREFIX)
    check_service_role_key()


@app.on_event("shutdown")
async def log_shutdown():
    logger.info("%s stopped", settings.app_name)


@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.app_name}", "status": "healthy"}


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    """Ready once the Supabase URL and key are configured"""
    missing = [name for name in ("supabase_url", "supabase_key") if not getattr(settings, name)]
    if missing:
        return JSONResponse(
            status_code=503,
            content={"status": "not ready", "detail": f"Missing settings: {', '.join(missing)}"},
        )
    return {"status": "ready"}
