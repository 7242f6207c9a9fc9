"""OpenTelemetry 계측 설정

API 서버와 시드 스크립트에서 공통으로 사용하는 OTel 초기화 로직을 제공합니다.
초기화하지 않으면 모든 tracer/meter는 noop으로 동작합니다.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import TYPE_CHECKING, Any, Awaitable, Callable, TypeVar

from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import MetricReader, PeriodicExportingMetricReader
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.semconv.resource import ResourceAttributes

if TYPE_CHECKING:
    from fastapi import FastAPI
    from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

T = TypeVar("T")


def init_telemetry(
    service_name: str,
    service_version: str = "0.1.0",
    otlp_endpoint: str | None = None,
    environment: str = "development",
) -> tuple[trace.Tracer, metrics.Meter]:
    """OpenTelemetry 초기화

    Args:
        service_name: 서비스 이름 (예: "member-search-api")
        service_version: 서비스 버전
        otlp_endpoint: OTLP 수신 엔드포인트 (없으면 span/metric export 생략)
        environment: 배포 환경 이름

    Returns:
        (Tracer, Meter) 튜플
    """
    resource = Resource.create(
        {
            ResourceAttributes.SERVICE_NAME: service_name,
            ResourceAttributes.SERVICE_VERSION: service_version,
            ResourceAttributes.DEPLOYMENT_ENVIRONMENT: environment,
        }
    )

    tracer_provider = TracerProvider(resource=resource)
    metric_readers: list[MetricReader] = []
    if otlp_endpoint:
        span_processor = BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True))
        tracer_provider.add_span_processor(span_processor)
        metric_readers.append(
            PeriodicExportingMetricReader(
                OTLPMetricExporter(endpoint=otlp_endpoint, insecure=True),
                export_interval_millis=10000,  # 10초마다 export
            )
        )
    trace.set_tracer_provider(tracer_provider)

    meter_provider = MeterProvider(resource=resource, metric_readers=metric_readers)
    metrics.set_meter_provider(meter_provider)

    tracer = trace.get_tracer(service_name, service_version)
    meter = metrics.get_meter(service_name, service_version)

    logger.info(
        "Telemetry initialized: service=%s, endpoint=%s",
        service_name,
        otlp_endpoint,
    )

    return tracer, meter


def instrument_fastapi(app: FastAPI) -> None:
    """FastAPI 자동 계측"""
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

        FastAPIInstrumentor.instrument_app(app)
        logger.info("FastAPI instrumentation enabled")
    except Exception as e:
        logger.warning("Failed to instrument FastAPI: %s", e)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """SQLAlchemy 자동 계측 (AsyncEngine은 sync_engine에 연결)"""
    try:
        from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor

        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
        logger.info("SQLAlchemy instrumentation enabled")
    except Exception as e:
        logger.warning("Failed to instrument SQLAlchemy: %s", e)


# ===========================================
# 검색 메트릭
# ===========================================


class SearchMetrics:
    """회원 검색 커스텀 메트릭"""

    def __init__(self, meter: metrics.Meter):
        self.meter = meter
        self.searches_total = self.meter.create_counter(
            name="member_search_requests_total",
            description="회원 검색 실행 수 (paged/unpaged)",
        )
        self.count_queries_skipped_total = self.meter.create_counter(
            name="member_search_count_queries_skipped_total",
            description="content 결과로 total이 확정되어 생략된 count 쿼리 수",
        )


# ===========================================
# 싱글톤 인스턴스 및 접근자
# ===========================================

_tracer: trace.Tracer | None = None
_search_metrics: SearchMetrics | None = None
_initialized: bool = False


def get_tracer() -> trace.Tracer:
    """Tracer 인스턴스 반환 (초기화 안 된 경우 noop tracer 반환)"""
    if _tracer is None:
        return trace.get_tracer("member-search-noop")
    return _tracer


def setup_telemetry(
    service_name: str,
    service_version: str = "0.1.0",
    otlp_endpoint: str | None = None,
    environment: str = "development",
) -> None:
    """전역 telemetry 설정 (애플리케이션 시작 시 호출)"""
    global _tracer, _search_metrics, _initialized

    if _initialized:
        logger.warning("Telemetry already initialized, skipping")
        return

    _tracer, meter = init_telemetry(service_name, service_version, otlp_endpoint, environment)
    _search_metrics = SearchMetrics(meter)
    _initialized = True


def traced_function(
    span_name: str | None = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """async 함수를 OTel span으로 래핑하는 데코레이터

    Usage:
        @traced_function("member.search")
        async def search(...):
            ...
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        name = span_name or func.__name__

        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            with get_tracer().start_as_current_span(name) as span:
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    span.record_exception(e)
                    span.set_status(trace.Status(trace.StatusCode.ERROR, str(e)))
                    raise

        return wrapper

    return decorator


def record_search(kind: str) -> None:
    """검색 실행 카운트 기록 (kind: unpaged/paged)"""
    if _search_metrics is not None:
        _search_metrics.searches_total.add(1, {"kind": kind})


def record_count_query_skipped() -> None:
    """count 쿼리 생략 카운트 기록"""
    if _search_metrics is not None:
        _search_metrics.count_queries_skipped_total.add(1)
