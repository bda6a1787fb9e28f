from opentelemetry import trace
import hashlib, logging, time, json

from .config import settings

SERVICE_NAME = settings.service_name
ENV = settings.environment

logging.basicConfig(level=settings.log_level)
_logger = logging.getLogger(SERVICE_NAME)

def hash_preview(text: str) -> str:
    return f"sha256={hashlib.sha256(text.encode('utf-8')).hexdigest()[:12]},len={len(text)}"

def jlog(event: str = "", severity: str = "INFO", **fields):
    span = trace.get_current_span()
    ctx = span.get_span_context() if span else None
    trace_id = f"{ctx.trace_id:032x}" if ctx and ctx.trace_id else None
    span_id = f"{ctx.span_id:016x}" if ctx and ctx.span_id else None

    record = {
        "event": event,
        "severity": severity,
        "service": SERVICE_NAME,
        "env": ENV,
        "ts": time.time(),
        "trace_id": trace_id,
        "span_id": span_id,
    }
    record.update(fields)
    _logger.log(getattr(logging, severity, logging.INFO), json.dumps(record, ensure_ascii=False, default=str))
