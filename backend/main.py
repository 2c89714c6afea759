# main.py
"""
Smart Parking Dashboard - FastAPI Entry Point

Start with:  uvicorn main:app --reload --port 3001
"""

from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

load_dotenv()

from routers import dashboard, facilities  # noqa: E402
from routers import map as map_router  # noqa: E402
from services.catalog_service import get_catalog  # noqa: E402
from utils.config import get_settings  # noqa: E402
from utils.logger import logger  # noqa: E402


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 카탈로그 무결성 오류(DataIntegrityError)는 여기서 그대로 올라가 시작을 중단
    catalog = get_catalog()
    logger.info(f"🚀 서버 시작: {len(catalog)}개 주차장")
    yield


settings = get_settings()

app = FastAPI(
    title=settings.APP_TITLE,
    description="주차장 지도 대시보드 API",
    version="0.1.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.include_router(facilities.router)
app.include_router(dashboard.router)
app.include_router(map_router.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=settings.PORT, reload=settings.DEBUG)
