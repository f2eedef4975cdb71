from jinja2 import Environment
from markupsafe import Markup

from resipi.domain.models import GenerationStatus, ResultKind
from resipi.domain.session import RecipeSession


class RecipePanel:
    def __init__(
        self,
        session: RecipeSession,
        *,
        environment: Environment,
        template_name: str = "recipe-panel.html",
        notice: str | None = None,
    ) -> None:
        self.session = session
        self.env = environment
        self.name = template_name
        self.notice = notice

    @property
    def loading(self) -> bool:
        return self.session.status == GenerationStatus.in_flight

    @property
    def error(self) -> str | None:
        if self.notice is not None:
            return self.notice
        if self.session.result.kind is ResultKind.failure:
            return self.session.result.message
        return None

    @property
    def content(self) -> Markup | None:
        if self.session.result.kind is not ResultKind.text:
            return None
        # Raw html in the model output is escaped by markdown2.
        return Markup(self.session.result.html)

    @property
    def empty(self) -> bool:
        return not self.loading and self.error is None and self.content is None

    def render(self) -> str:
        return self.env.get_template(self.name).render(panel=self)
