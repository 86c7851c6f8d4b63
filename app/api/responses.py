"""Response normalization for success, not-found and internal-error outcomes."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import Request, status
from fastapi.responses import HTMLResponse, JSONResponse

from app.config import AppSettings
from app.domain import ErrorPayload, HealthReport, ReadinessReport, ServiceInfo

GENERIC_INTERNAL_ERROR_MESSAGE = "Internal server error"


def api_describe_request_target(request: Request) -> str:
    """Return the request target exactly as the client sent it.

    The raw path keeps percent-encoding intact, so `/a%20b` is echoed as
    `/a%20b` rather than the decoded `/a b`.

    Args:
        request: Incoming request.

    Returns:
        str: Raw path plus `?` and the raw query string when present.
    """

    raw_path = request.scope.get("raw_path")
    request_path = raw_path.decode("latin-1").split("?", 1)[0] if raw_path else request.url.path
    query_string = request.scope.get("query_string", b"").decode("latin-1")
    if query_string:
        return f"{request_path}?{query_string}"
    return request_path


def api_build_not_found_payload(request_target: str) -> ErrorPayload:
    """Build normalized payload for an unmatched route.

    Args:
        request_target: Requested path, echoed verbatim.

    Returns:
        ErrorPayload: Not-found payload.
    """

    return ErrorPayload(kind="not_found", error="Not Found", message=f"Route {request_target} not found")


def api_build_internal_error_payload(error: BaseException, settings: AppSettings) -> ErrorPayload:
    """Build normalized payload for a handler failure.

    The raw error detail is only exposed outside production-equivalent
    environments.

    Args:
        error: Exception raised while computing the response.
        settings: Settings snapshot providing the environment name.

    Returns:
        ErrorPayload: Internal-error payload with conditionally redacted message.
    """

    if settings.is_production:
        message = GENERIC_INTERNAL_ERROR_MESSAGE
    else:
        message = str(error) or type(error).__name__
    return ErrorPayload(kind="internal_error", error="Something went wrong!", message=message)


def api_build_error_response(payload: ErrorPayload) -> JSONResponse:
    """Render one error payload with the status code for its kind.

    Args:
        payload: Normalized error payload.

    Returns:
        JSONResponse: 404 for `not_found`, 500 otherwise.
    """

    status_code = (
        status.HTTP_404_NOT_FOUND if payload.kind == "not_found" else status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    content = {"error": payload.error, "message": payload.message, "kind": payload.kind}
    return JSONResponse(content=content, status_code=status_code)


def api_build_health_response(report: HealthReport) -> JSONResponse:
    """Render a health report as HTTP 200 JSON.

    Args:
        report: Health report computed for this request.

    Returns:
        JSONResponse: Health payload.
    """

    return JSONResponse(content=asdict(report), status_code=status.HTTP_200_OK)


def api_build_readiness_response(report: ReadinessReport) -> JSONResponse:
    """Render readiness report; not-ready reports answer 503 so probes fail.

    Args:
        report: Readiness report computed for this request.

    Returns:
        JSONResponse: 200 when ready, 503 otherwise.
    """

    status_code = status.HTTP_200_OK if report.is_ready else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(content=asdict(report), status_code=status_code)


def api_build_info_response(info: ServiceInfo) -> JSONResponse:
    """Render service metadata as HTTP 200 JSON.

    Args:
        info: Service metadata computed for this request.

    Returns:
        JSONResponse: Info payload with nested pod identity.
    """

    return JSONResponse(content=asdict(info), status_code=status.HTTP_200_OK)


def api_build_page_response(document: str) -> HTMLResponse:
    """Wrap a rendered HTML document in an HTTP 200 response.

    Args:
        document: Complete HTML document.

    Returns:
        HTMLResponse: Page response.
    """

    return HTMLResponse(content=document, status_code=status.HTTP_200_OK)
