import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from famapp.api.routes_tasks import router as tasks_router
from famapp.api.routes_cities import router as cities_router

from famapp.core.config_loader import settings


app = FastAPI(
    title=settings.app_name,
    description="Smart pre-trip task generation for family travel",
    version="1.0.0"
)

# -------------------------------------------------------------
# CORS
# -------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # update to frontend domain in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -------------------------------------------------------------
# ROUTES
# -------------------------------------------------------------
app.include_router(tasks_router)
app.include_router(cities_router)


# -------------------------------------------------------------
# ROOT ENDPOINT
# -------------------------------------------------------------
@app.get("/")
def root():
    return {
        "status": "ok",
        "message": "FamApp smart task backend is running",
        "env": settings.environment
    }


# -------------------------------------------------------------
# RUN LOCAL
# -------------------------------------------------------------
if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True
    )
