"""In-memory stores for the portfolio sections."""

from __future__ import annotations

from dataclasses import replace

from .domain import (
    About,
    Hero,
    Portfolio,
    Project,
    ServiceItem,
    ServiceNotFoundError,
    Services,
    Tool,
)


def _initial_about() -> About:
    return About(
        description="Initial description",
        summary="Initial summary",
        photo="path/to/photo.jpg",
        languages=["Go", "JavaScript"],
        education=["Bachelor of Computer Science"],
        projects=["Project A", "Project B"],
        tools=[Tool(id="1", name="Git", icon="git-icon.png")],
    )


def _profile_about() -> About:
    return About(
        summary="I am a Frontend and Mobile Developer.",
        languages=["Go", "JavaScript", "Dart"],
        education=["Bachelor of Computer Science"],
        projects=["Project A", "Project B"],
        tools=[
            Tool(name="Android Studio", icon="android-studio-icon.png"),
            Tool(name="VS Code", icon="vscode-icon.png"),
        ],
    )


class AboutRepository:
    """Holds the about section.

    ``get_about`` always answers with the fixed profile; updates are stored
    and returned but do not change what ``get_about`` reports.
    """

    def __init__(self) -> None:
        self._about = _initial_about()

    def get_about(self) -> About:
        return _profile_about()

    def update_about(self, about: About) -> About:
        self._about = about
        return self._about


class HeroRepository:
    """Supplies the fixed hero banner."""

    def get_hero(self) -> Hero:
        return Hero(
            name="Salih Arya Gumilang",
            photo="/assets/images/hero-photo.jpeg",
            title="/assets/images/hero-photo.jpeg",
            description=(
                "Experienced in mobile and web development, with strong skills in "
                "cross-functional team collaboration. Informatics \nEngineering graduate "
                "from Ahmad Dahlan University. Graduated with distinction from Bangkit "
                "Academy, a Kampus Merdeka \nprogram led by Google, Tokopedia, Gojek, "
                "and Traveloka."
            ),
        )


class PortfolioRepository:
    """Supplies the fixed portfolio section."""

    def get_portfolio(self) -> Portfolio:
        return Portfolio(
            summary="Summary Portfolio",
            projects=[
                Project(id="1", name="Project A", category="Web Development"),
                Project(id="2", name="Project B", category="Mobile App"),
            ],
        )


class ServicesRepository:
    """Keeps the list of services in memory and hands out increasing ids."""

    def __init__(self) -> None:
        self._services = Services(
            summary="Summary Services",
            items=[
                ServiceItem(
                    id=1,
                    icon="assets/images/web-icon.png",
                    title="Web Development",
                    description="Building responsive websites",
                    link_url="https://example.com/project1",
                )
            ],
        )
        self._next_id = 2

    def get_services(self) -> Services:
        return self._services

    def create_service(self, service: ServiceItem) -> ServiceItem:
        created = replace(service, id=self._next_id)
        self._next_id += 1
        self._services.items.append(created)
        return replace(created)

    def update_service(self, service: ServiceItem) -> ServiceItem:
        items = self._services.items
        for index, item in enumerate(items):
            if item.id == service.id:
                items[index] = replace(service)
                return service
        raise ServiceNotFoundError()

    def delete_service(self, service_id: int) -> None:
        items = self._services.items
        for index, item in enumerate(items):
            if item.id == service_id:
                del items[index]
                return
        raise ServiceNotFoundError()

    def update_summary(self, summary: str) -> Services:
        self._services.summary = summary
        return self._services