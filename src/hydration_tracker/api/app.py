"""FastAPI application factory."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from hydration_tracker.api.dashboard_page import DASHBOARD_HTML
from hydration_tracker.app_logging import configure_logging
from hydration_tracker.containers import AppContainer
from hydration_tracker.presentation import DashboardView, build_dashboard_view


class AddEntryRequest(BaseModel):
    """Payload for logging a drink."""

    amount_ml: int | float | str | None = None


class GoalRequest(BaseModel):
    """Payload for editing the daily goal."""

    value: int | float | str | None = None


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await app.state.container.controller.load()
        logger.info(
            "Loaded today's water logs",
            extra={"count": len(app.state.container.controller.entries)},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def dashboard_page() -> HTMLResponse:
        """Dashboard shell that renders the JSON view model."""
        return HTMLResponse(DASHBOARD_HTML)

    @app.get("/api/dashboard")
    async def dashboard(request: Request) -> DashboardView:
        """Return the current dashboard state, reloading after midnight."""
        controller = request.app.state.container.controller
        if controller.day_changed() and not controller.loading:
            await controller.load()
        return _view(request)

    @app.post("/api/refresh")
    async def refresh(request: Request) -> DashboardView:
        """Reload today's entries from the store."""
        state_container: AppContainer = request.app.state.container
        await state_container.controller.load()
        return _view(request)

    @app.post("/api/logs")
    async def add_entry(payload: AddEntryRequest, request: Request) -> DashboardView:
        """Log a drink and return the optimistic state."""
        controller = request.app.state.container.controller
        await _submit(controller.submit(controller.add_entry(payload.amount_ml)))
        return _view(request)

    @app.delete("/api/logs/{entry_id}")
    async def remove_entry(entry_id: str, request: Request) -> DashboardView:
        """Remove a drink and return the optimistic state."""
        controller = request.app.state.container.controller
        await _submit(controller.submit(controller.remove_entry(entry_id)))
        return _view(request)

    @app.post("/api/reset")
    async def reset_day(request: Request) -> DashboardView:
        """Clear today's entries and return the optimistic state."""
        controller = request.app.state.container.controller
        await _submit(controller.submit(controller.reset_day()))
        return _view(request)

    @app.put("/api/goal")
    async def set_goal(payload: GoalRequest, request: Request) -> DashboardView:
        """Update the daily goal."""
        controller = request.app.state.container.controller
        await controller.set_goal(payload.value)
        return _view(request)

    return app


async def _submit(task: asyncio.Task[object]) -> None:
    """Let a submitted operation apply its optimistic step."""
    if not task.done():
        await asyncio.sleep(0)


def _view(request: Request) -> DashboardView:
    state_container: AppContainer = request.app.state.container
    return build_dashboard_view(
        state_container.controller, state_container.dashboard_options
    )
