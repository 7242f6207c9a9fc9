import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from member_search.api.v1.router import api_router as api_v1_router
from member_search.api.v2.router import api_router as api_v2_router
from member_search.core.config import get_settings
from member_search.core.database import async_session_maker, create_tables, engine
from member_search.core.telemetry import instrument_fastapi, instrument_sqlalchemy, setup_telemetry
from member_search.services.sample_data import seed_sample_data

# 로깅 설정
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """애플리케이션 라이프사이클"""
    # 시작 시: 테이블 생성 / 샘플 데이터 (로컬 데모용 설정)
    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Database tables created")
    if settings.seed_sample_data:
        async with async_session_maker() as session:
            await seed_sample_data(session)
            await session.commit()
    yield
    # 종료 시
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Member/Team dynamic search API",
    lifespan=lifespan,
)

# OpenTelemetry 계측
if settings.telemetry_enabled:
    setup_telemetry(
        "member-search-api",
        "0.1.0",
        otlp_endpoint=settings.otel_exporter_otlp_endpoint,
        environment=settings.app_env,
    )
    instrument_fastapi(app)
    instrument_sqlalchemy(engine)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# API 라우터 등록
app.include_router(api_v1_router)
app.include_router(api_v2_router)


@app.get("/health")
async def health_check() -> dict:
    """헬스 체크"""
    return {"status": "ok"}
