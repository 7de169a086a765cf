import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware

# Repassado para a API do back office em todas as chamadas da requisição
correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> str:
	return correlation_id_var.get() or f"bo-{uuid.uuid4()}"


class CorrelationIdMiddleware(BaseHTTPMiddleware):
	async def dispatch(self, request, call_next):
		cid = request.headers.get('x-correlation-id') or f"bo-{uuid.uuid4()}"
		request.state.correlation_id = cid
		token = correlation_id_var.set(cid)
		try:
			response = await call_next(request)
		finally:
			correlation_id_var.reset(token)
		response.headers['x-correlation-id'] = cid
		return response
