import contextlib
import functools
import logging
from typing import AsyncIterator, Awaitable, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from rich.logging import RichHandler
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import (
    HTMLResponse,
    JSONResponse,
    RedirectResponse,
    Response,
)
from starlette.routing import Route

from resipi import config
from resipi.domain.errors import ValidationError
from resipi.domain.llm_service import LLMService
from resipi.domain.session import RecipeSession, SessionStore
from resipi.html.recipe_panel import RecipePanel


# Refuses to start without API_KEY.
CONFIG = config.Config()

SESSION_COOKIE = "resipi_session"


logging.basicConfig(
    level=CONFIG.log_level,
    format="%(message)s",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = logging.getLogger(__name__)


TEMPLATES = Environment(
    loader=FileSystemLoader(CONFIG.html_dir),
    autoescape=select_autoescape(),
)


def session_route(
    route: Callable[[Request, RecipeSession], Awaitable[str | Response]],
):
    """Look up the caller's session, render the route, keep the cookie set."""

    @functools.wraps(route)
    async def wrapper(request: Request) -> Response:
        store: SessionStore = request.app.state.sessions
        session_id, session = store.get_or_create(request.cookies.get(SESSION_COOKIE))
        resp = await route(request, session)
        if not isinstance(resp, Response):
            resp = HTMLResponse(resp)
        resp.set_cookie(SESSION_COOKIE, session_id, httponly=True, samesite="lax")
        return resp

    return wrapper


def render_ingredient_panel(session: RecipeSession, *, oob: bool = False) -> str:
    return TEMPLATES.get_template("ingredient-panel.html").render(
        session=session, oob=oob
    )


@session_route
async def homepage(request: Request, session: RecipeSession) -> str:
    panel = RecipePanel(session, environment=TEMPLATES)
    return TEMPLATES.get_template("index.html").render(session=session, panel=panel)


@session_route
async def add_ingredient(request: Request, session: RecipeSession) -> str:
    async with request.form() as form:
        name = form.get("ingredient", "")
    if isinstance(name, str):
        session.add(name)
    return render_ingredient_panel(session)


@session_route
async def remove_ingredient(request: Request, session: RecipeSession) -> str:
    session.remove(request.path_params["position"])
    return render_ingredient_panel(session)


@session_route
async def recipe(request: Request, session: RecipeSession) -> str:
    match request.method.lower():
        case "get":
            panel = RecipePanel(session, environment=TEMPLATES)
            if panel.loading:
                return panel.render()
            # Finished while polling, re-enable the generate button too.
            return panel.render() + render_ingredient_panel(session, oob=True)
        case "post":
            notice = None
            try:
                await session.generate()
            except ValidationError as e:
                notice = str(e)
            return RecipePanel(session, environment=TEMPLATES, notice=notice).render()
        case _:
            raise ValueError("Unsupported method.")


async def start_over(request: Request) -> RedirectResponse:
    session_id = request.cookies.get(SESSION_COOKIE)
    if session_id is not None:
        store: SessionStore = request.app.state.sessions
        store.discard(session_id)
    resp = RedirectResponse("/", status_code=303)
    resp.delete_cookie(SESSION_COOKIE)
    return resp


@session_route
async def state(request: Request, session: RecipeSession) -> Response:
    return JSONResponse(session.to_dict())


@contextlib.asynccontextmanager
async def lifespan(app: Starlette) -> AsyncIterator[None]:
    logger.info("Serving recipes with %s", CONFIG.core_model)
    yield
    await app.state.llm.close()


app = Starlette(
    debug=True if CONFIG.env == config.Env.local else False,
    routes=[
        Route("/", homepage),
        Route("/ingredients", add_ingredient, methods=["POST"]),
        Route("/ingredients/{position:int}", remove_ingredient, methods=["DELETE"]),
        Route("/recipe", recipe, methods=["GET", "POST"]),
        Route("/start-over", start_over, methods=["POST"]),
        Route("/state", state),
    ],
    lifespan=lifespan,
)

app.state.llm = LLMService(
    CONFIG.api_key,
    model=CONFIG.core_model,
    base_url=CONFIG.base_url,
)
app.state.sessions = SessionStore(
    llm=app.state.llm,
    initial_ingredients=CONFIG.initial_ingredients,
    max_sessions=CONFIG.max_sessions,
)
