from fastapi import FastAPI
import httpx
import logging

from .api.routes import visitor_box
from .core.config import settings

# Configure logging
logging.basicConfig(
	level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
	format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app() -> FastAPI:

	app = FastAPI(
		title=settings.APP_NAME,
		description="Plain-text visitor location and local weather box",
		version="0.1.0",
	)

	app.include_router(visitor_box.router)  # exposes GET /

	# One pooled client shared by both upstream lookups
	@app.on_event("startup")
	async def on_startup() -> None:
		limits = httpx.Limits(max_keepalive_connections=10, max_connections=20)
		app.state.http_client = httpx.AsyncClient(
			timeout=httpx.Timeout(settings.HTTP_TIMEOUT_SECONDS),
			limits=limits,
		)
		logger.info(
			f"Started with box width {settings.BOX_WIDTH}, local time "
			f"{'on' if settings.SHOW_LOCAL_TIME else 'off'}, timeout {settings.HTTP_TIMEOUT_SECONDS}s"
		)

	@app.on_event("shutdown")
	async def on_shutdown() -> None:
		client = getattr(app.state, "http_client", None)
		if client is not None:
			await client.aclose()
			app.state.http_client = None

	@app.get("/health")
	def health() -> dict:
		return {"status": "ok"}

	return app


app = create_app()


def run() -> None:
	import uvicorn

	uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
	run()
