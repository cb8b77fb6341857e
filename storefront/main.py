"""Main FastAPI application with all middleware"""

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from storefront.core.config import settings
from storefront.core.events import lifespan
from storefront.core.middleware import setup_middleware
from storefront.core.exceptions import setup_exception_handlers
from storefront.middleware.rate_limit import limiter, custom_rate_limit_handler
from storefront.api import api_router
from storefront.api.health import router as health_router

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="SquishyShop storefront API: catalog, cart, wishlist, mini-game rewards and back-office",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan
)

# Add rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, custom_rate_limit_handler)

# Setup middleware and error handlers
setup_middleware(app)
setup_exception_handlers(app)

# Include routers
app.include_router(api_router, prefix="/api")
app.include_router(health_router, tags=["Health"])

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "docs": "/api/docs",
        "health": "/health"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "storefront.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        workers=settings.WORKERS
    )
